import fnmatch
from pathlib import Path
from typing import BinaryIO, Protocol


class FileHandle:
    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return self.path.name

    def __eq__(self, other):
        return isinstance(other, FileHandle) and self.path == other.path

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return f"FileHandle({str(self.path)!r})"


# Everything the pipeline needs from the outside world. Failures are reported
# by raising OSError (or one of its subclasses).
class FileSystem(Protocol):
    def list_files(self, directory: Path, pattern: str) -> list[FileHandle]: ...

    def read_all(self, handle: FileHandle) -> bytes: ...

    def exists(self, path: Path) -> bool: ...

    def is_directory(self, path: Path) -> bool: ...

    def file_size(self, path: Path) -> int: ...

    def parent(self, path: Path) -> Path: ...

    def open_for_write(self, path: Path) -> BinaryIO: ...

    def delete(self, path: Path) -> None: ...


class LocalFileSystem:
    # Lists the regular files directly inside the given directory (i.e. not
    # recursively) whose name matches a shell-style wildcard. Entries are
    # sorted by name, so that the output does not depend on the order in which
    # the OS happens to return them.
    #
    # Note: fnmatch follows the platform's case sensitivity rules.
    def list_files(self, directory: Path, pattern: str) -> list[FileHandle]:
        return [
            FileHandle(entry)
            for entry in sorted(Path(directory).iterdir(), key=lambda p: p.name)
            if entry.is_file() and fnmatch.fnmatch(entry.name, pattern)
        ]

    def read_all(self, handle: FileHandle) -> bytes:
        return handle.path.read_bytes()

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def file_size(self, path: Path) -> int:
        return Path(path).stat().st_size

    def parent(self, path: Path) -> Path:
        return Path(path).parent

    def open_for_write(self, path: Path) -> BinaryIO:
        return Path(path).open("wb")

    def delete(self, path: Path) -> None:
        Path(path).unlink(missing_ok=True)
