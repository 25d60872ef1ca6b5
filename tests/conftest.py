import logging

import pytest

from memfs import MemoryFileSystem


@pytest.fixture
def memfs():
    fs = MemoryFileSystem()
    fs.add_dir("/src")
    fs.add_dir("/out")
    return fs


@pytest.fixture
def resource_dir(tmp_path):
    """A real directory with a few resources plus some files to be skipped."""
    src = tmp_path / "res"
    src.mkdir()
    (src / "logo.png").write_bytes(bytes(range(100)))
    (src / "My File.v2.png").write_bytes(b"\x89PNG")
    (src / "tiny.png").write_bytes(b"\x07")
    (src / "empty.png").write_bytes(b"")
    (src / ".hidden.png").write_bytes(b"secret")
    (src / "notes.txt").write_bytes(b"not a png")
    return src


@pytest.fixture(autouse=True)
def _reset_root_logging():
    """cli.main() calls logging.basicConfig(); undo it after each test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
