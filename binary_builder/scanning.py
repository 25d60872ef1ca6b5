import logging
from pathlib import Path

from .filesystem import FileHandle, FileSystem

logger = logging.getLogger(__name__)


def _has_hidden_name(name: str) -> bool:
    return (
        name.lower().endswith(".scc")  # source control metadata
        or name == ".svn"
        or name.startswith(".")
    )


# Returns True if the given file must not be embedded.
#
# Besides the name-based rules, empty files are skipped silently. Ancestor
# directories between the file and the scan root are checked with the same
# rules, walking upwards until the root (or the top of the filesystem) is
# reached.
def is_hidden_file(path: Path, root: Path, fs: FileSystem) -> bool:
    path = Path(path)
    root = Path(root)

    if _has_hidden_name(path.name):
        return True
    if not fs.is_directory(path) and fs.file_size(path) == 0:
        return True

    parent = fs.parent(path)
    if parent == root or parent == path:
        return False
    return is_hidden_file(parent, root, fs)


# Lists the candidate files with the given extension, in scan order and
# before any filtering.
def list_candidates(fs: FileSystem, root: Path, extension: str) -> list[FileHandle]:
    return fs.list_files(Path(root), f"*.{extension}")


def filter_hidden(
    fs: FileSystem, root: Path, candidates: list[FileHandle]
) -> list[FileHandle]:
    accepted = []
    for handle in candidates:
        if is_hidden_file(handle.path, root, fs):
            logger.debug(f"Skipping hidden or empty file: {handle.path}")
        else:
            accepted.append(handle)
    return accepted
