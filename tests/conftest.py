import logging

import pytest


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by the CLI so tests do not share log state."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
