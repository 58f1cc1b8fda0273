#!/usr/bin/python3

# Split a text file into two: even-indexed lines go to <file>_avg.txt,
# odd-indexed lines go to <file>_max.txt

import logging
from collections import namedtuple

log = logging.getLogger(__name__)

AVG_SUFFIX = "_avg.txt"
MAX_SUFFIX = "_max.txt"

SplitResult = namedtuple("SplitResult", ["avg_path", "max_path", "avg_lines", "max_lines"])


class SplitError(Exception):
    def __init__(self, path, reason):
        super().__init__("%s: %s" % (path, reason))
        self.path = path
        self.reason = reason


class InputNotFoundError(SplitError):
    pass


class OutputNotWritableError(SplitError):
    pass


def output_paths(filename):
    return (filename + AVG_SUFFIX, filename + MAX_SUFFIX)


def split_lines(lines, out_a, out_b):
    """
    Copy lines alternately to out_a and out_b. Both reads are checked the
    same way, so an odd number of lines never produces a write to out_b.
    Returns the number of lines written to each stream.
    """
    it = iter(lines)
    count_a = 0
    count_b = 0
    while True:
        line = next(it, None)
        if line is None:
            break
        out_a.write(line.rstrip("\n") + "\n")
        count_a += 1

        line = next(it, None)
        if line is None:
            break
        out_b.write(line.rstrip("\n") + "\n")
        count_b += 1

    return (count_a, count_b)


class _Output:
    """
    Output file that reports write and close failures, including a failed
    flush of buffered data at close, as OutputNotWritableError with its
    own path.
    """

    def __init__(self, path):
        self.path = path
        try:
            self.f = open(path, "w", errors="surrogateescape")
        except OSError as e:
            raise OutputNotWritableError(path, e.strerror or str(e)) from e

    def write(self, s):
        try:
            return self.f.write(s)
        except OSError as e:
            raise OutputNotWritableError(self.path, e.strerror or str(e)) from e

    def close(self):
        try:
            self.f.close()
        except OSError as e:
            raise OutputNotWritableError(self.path, e.strerror or str(e)) from e

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.close()
            return False

        # The file is closed even when the final flush fails; the error
        # already in flight is the one reported
        try:
            self.f.close()
        except OSError as e:
            log.debug("Closing %s after error: %s", self.path, e)
        return False


def split_file(filename):
    avg_path, max_path = output_paths(filename)

    try:
        fin = open(filename, "r", errors="surrogateescape")
    except OSError as e:
        raise InputNotFoundError(filename, e.strerror or str(e)) from e

    with fin:
        with _Output(avg_path) as out_a, _Output(max_path) as out_b:
            log.debug("Splitting %s into %s and %s", filename, avg_path, max_path)
            count_a, count_b = split_lines(fin, out_a, out_b)

    log.info("Wrote %d lines to %s, %d lines to %s", count_a, avg_path, count_b, max_path)
    return SplitResult(avg_path, max_path, count_a, count_b)
