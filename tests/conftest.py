"""Shared pytest fixtures: on-disk folder trees and a Qt core application."""
import os

import pytest


def write_file(path, size):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(b"x" * size)


@pytest.fixture
def make_tree(tmp_path):
    """Build files from a ``{relative path: size}`` mapping under tmp_path."""
    def _make(files, root=None):
        root = root or tmp_path
        for rel, size in files.items():
            write_file(os.path.join(str(root), rel), size)
        return str(root)
    return _make


@pytest.fixture
def qapp():
    from PySide6.QtCore import QCoreApplication
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    import logging
    logger = logging.getLogger("sunder")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
