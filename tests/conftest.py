import logging

import pytest

from weightgraph.logs import ExitStreamHandler


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging so one test's exit handler cannot end another test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if isinstance(h, ExitStreamHandler)]:
        root.removeHandler(handler)
    root.setLevel(level)
