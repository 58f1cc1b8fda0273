import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    # main() calls basicConfig, which would otherwise keep a handler on a
    # stream that pytest has already closed
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)
