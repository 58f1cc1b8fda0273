#!/usr/bin/python3

# Bug-for-bug compatible splitter. The loop checks the input once per pair
# of lines and then reads and writes twice, so odd length input (or input
# ending in a newline) leaves an extra empty or repeated line at the end.
# Open failures are silent: a missing input reads as empty, a missing
# output swallows writes.

import io
import logging
import os
from contextlib import ExitStack

from datasplit.splitter import SplitResult, output_paths

log = logging.getLogger(__name__)


class LegacyLineReader:
    """
    Line reader with istream style eof/fail flags.

    getline() on a good stream clears the line and extracts up to and
    including the next '\\n'. Hitting end of input sets eof, and fail as
    well if nothing was extracted. getline() on a stream that is not good
    sets fail and leaves the previous line as it was.
    """

    def __init__(self, f):
        self.f = f
        self.eof = f is None
        self.fail = f is None
        self.line = ""

    def good(self):
        return not (self.eof or self.fail)

    def getline(self):
        if not self.good():
            self.fail = True
            return self.line

        s = self.f.readline()
        if s == "":
            self.eof = True
            self.fail = True
            self.line = ""
        elif s.endswith("\n"):
            self.line = s[:-1]
        else:
            self.eof = True
            self.line = s
        return self.line


class _NullWriter:
    def write(self, s):
        return 0


def _open_silently(stack, path, mode, **kwargs):
    try:
        return stack.enter_context(open(path, mode, errors="surrogateescape", **kwargs))
    except OSError as e:
        log.debug("Could not open %s: %s", path, e)
        return None


def legacy_split_file(filename):
    avg_path, max_path = output_paths(filename)
    count_a = 0
    count_b = 0

    with ExitStack() as stack:
        if os.path.isdir(filename):
            # Opening a directory succeeds for an ifstream, the first read fails
            fin = io.StringIO()
        else:
            fin = _open_silently(stack, filename, "r", newline="\n")
        out_a = _open_silently(stack, avg_path, "w") or _NullWriter()
        out_b = _open_silently(stack, max_path, "w") or _NullWriter()

        reader = LegacyLineReader(fin)
        while reader.good():
            out_a.write(reader.getline() + "\n")
            count_a += 1
            out_b.write(reader.getline() + "\n")
            count_b += 1

        log.debug("Input stream state at end: eof=%s fail=%s", reader.eof, reader.fail)

    log.info("Wrote %d lines to %s, %d lines to %s", count_a, avg_path, count_b, max_path)
    return SplitResult(avg_path, max_path, count_a, count_b)
