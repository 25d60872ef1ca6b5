from pathlib import Path

DEFAULT_EXTENSION = "png"
DEFAULT_CLASS_NAME = "BinaryData"

# [EXT [SRC_DIR [DEST_DIR [CLASS_NAME]]]]
MAX_POSITIONALS = 4


class BuildConfig:
    def __init__(
        self,
        extension: str = DEFAULT_EXTENSION,
        source_dir: Path | str = ".",
        dest_dir: Path | str = ".",
        class_name: str = DEFAULT_CLASS_NAME,
        checked_accessors: bool = False,
        allow_duplicate_identifiers: bool = False,
    ):
        self.extension = extension
        self.source_dir = Path(source_dir)
        self.dest_dir = Path(dest_dir)
        self.class_name = class_name
        self.checked_accessors = checked_accessors
        self.allow_duplicate_identifiers = allow_duplicate_identifiers

    @property
    def header_path(self) -> Path:
        return self.dest_dir / f"{self.class_name}.h"

    @property
    def source_path(self) -> Path:
        return self.dest_dir / f"{self.class_name}.cpp"

    # Builds a configuration out of the (up to four) positional command-line
    # values. Missing or blank values fall back to the defaults; directories
    # are resolved against "cwd".
    @classmethod
    def from_positionals(
        cls, values: list[str], cwd: Path | None = None, **options
    ) -> "BuildConfig":
        if len(values) > MAX_POSITIONALS:
            raise ValueError(f"at most {MAX_POSITIONALS} parameters are accepted")
        cwd = Path.cwd() if cwd is None else Path(cwd)
        values = list(values) + [""] * (MAX_POSITIONALS - len(values))

        extension = clean_extension(values[0]) or DEFAULT_EXTENSION
        source_dir = cwd / unquote(values[1]) if values[1] else cwd
        dest_dir = cwd / unquote(values[2]) if values[2] else cwd
        class_name = values[3].strip() or DEFAULT_CLASS_NAME

        return cls(extension, source_dir, dest_dir, class_name, **options)

    def __repr__(self):
        return (
            f"BuildConfig(extension={self.extension!r}, "
            f"source_dir={str(self.source_dir)!r}, "
            f"dest_dir={str(self.dest_dir)!r}, "
            f"class_name={self.class_name!r})"
        )


# "*.png", ".png" and " png " all mean "png".
def clean_extension(text: str) -> str:
    return "".join(c for c in text.strip() if c not in ".*")


# Removes one pair of matching surrounding quotes, if present.
def unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1]
    return text
