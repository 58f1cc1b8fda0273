from datasplit.splitter import (SplitError, InputNotFoundError,
                                OutputNotWritableError, SplitResult,
                                output_paths, split_lines, split_file)
from datasplit.legacy import LegacyLineReader, legacy_split_file

__version__ = "0.1"
