#!/usr/bin/python3

import argparse
import logging
import sys

from datasplit.config import ConfigError, load_config, log_level
from datasplit.legacy import legacy_split_file
from datasplit.splitter import SplitError, split_file

log = logging.getLogger(__name__)


def prompt_filename(stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write("Filename: ")
    stdout.flush()
    line = stdin.readline()
    # Only the newline goes, spaces are part of the name
    if line.endswith("\n"):
        line = line[:-1]
    return line


def build_parser():
    parser = argparse.ArgumentParser(description='Split alternate lines of a text file into <file>_avg.txt and <file>_max.txt')
    parser.add_argument('filename', nargs='?', help='Input file (prompted for if not given)')
    parser.add_argument('--compat', action=argparse.BooleanOptionalAction, default=None,
                        help='Reproduce the original splitter exactly, including its trailing line and silent failures (--no-compat overrides the config file)')
    parser.add_argument('--config', help='YAML settings file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log at DEBUG level')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        parser.error(str(e))

    if args.compat is not None:
        config["compat"] = args.compat
    level = logging.DEBUG if args.verbose else log_level(config)

    logging.basicConfig(format='%(asctime)s : %(levelname)s : %(message)s', stream=sys.stderr)
    logging.getLogger().setLevel(level)

    filename = args.filename
    if filename is None:
        filename = prompt_filename()

    if config["compat"]:
        legacy_split_file(filename)
        return 0

    try:
        split_file(filename)
    except SplitError as e:
        log.error("%s: %s", type(e).__name__, e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
