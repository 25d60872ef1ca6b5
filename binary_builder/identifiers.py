import re
from pathlib import PurePath

# Anything that is not allowed in a C++ identifier.
_DISALLOWED = re.compile(r"[^A-Za-z0-9_]")


# Turns a file name (already stripped of its extension) into a symbol name.
#
# Spaces and dots become underscores, every other unsupported character is
# dropped. The result may be empty, may start with a digit and may collide
# with the identifier of another file: callers decide what to do about it.
def sanitize_identifier(stem: str) -> str:
    return _DISALLOWED.sub("", stem.replace(" ", "_").replace(".", "_"))


# Only the last extension is removed, i.e. "My File.v2.png" -> "My File.v2".
def stem_of(path: PurePath | str) -> str:
    name = PurePath(path).name
    dot = name.rfind(".")
    return name if dot < 0 else name[:dot]


def identifier_for(path: PurePath | str) -> str:
    return sanitize_identifier(stem_of(path))
