"""
In-memory stand-in for binary_builder.filesystem.LocalFileSystem.

Files are listed in insertion order (not sorted), so tests can check that the
pipeline keeps whatever order the filesystem reports. Individual paths can be
marked unreadable, unwritable, undeletable or (for directories) unlistable
to exercise the failure paths.
"""
import fnmatch
import io
from pathlib import Path

from binary_builder.filesystem import FileHandle


class _Writer(io.BytesIO):
    def __init__(self, fs, path):
        super().__init__()
        self._fs = fs
        self._path = path
        fs.files[path] = b""  # created (empty) as soon as it is opened

    def close(self):
        if not self.closed:
            self._fs.files[self._path] = self.getvalue()
        super().close()


class MemoryFileSystem:
    def __init__(self):
        self.files: dict[Path, bytes] = {}
        self.directories: set[Path] = {Path("/")}
        self.unreadable: set[Path] = set()
        self.unwritable: set[Path] = set()
        self.undeletable: set[Path] = set()
        self.unlistable: set[Path] = set()
        self.deleted: list[Path] = []

    def add_dir(self, path) -> Path:
        path = Path(path)
        while path not in self.directories:
            self.directories.add(path)
            path = path.parent
        return path

    def add_file(self, path, data: bytes) -> Path:
        path = Path(path)
        self.add_dir(path.parent)
        self.files[path] = bytes(data)
        return path

    def list_files(self, directory, pattern):
        if Path(directory) in self.unlistable:
            raise PermissionError(f"cannot list {directory}")
        return [
            FileHandle(path)
            for path in self.files
            if path.parent == Path(directory) and fnmatch.fnmatchcase(path.name, pattern)
        ]

    def read_all(self, handle):
        if handle.path in self.unreadable:
            raise PermissionError(f"cannot read {handle.path}")
        return self.files[handle.path]

    def exists(self, path):
        return Path(path) in self.files or Path(path) in self.directories

    def is_directory(self, path):
        return Path(path) in self.directories

    def file_size(self, path):
        return len(self.files[Path(path)])

    def parent(self, path):
        return Path(path).parent

    def open_for_write(self, path):
        path = Path(path)
        if path in self.unwritable:
            raise PermissionError(f"cannot write {path}")
        return _Writer(self, path)

    def delete(self, path):
        if Path(path) in self.undeletable:
            raise PermissionError(f"cannot delete {path}")
        self.deleted.append(Path(path))
        self.files.pop(Path(path), None)

    def text(self, path) -> str:
        return self.files[Path(path)].decode("utf-8")


# Extracts the values of the first "tempN" array literal found in the text,
# sentinel included.
def literal_values(text: str) -> list[int]:
    start = text.index("[] = {") + len("[] = {")
    end = text.index("};", start)
    return [int(v) for v in text[start:end].replace("\r\n", "").split(",")]
