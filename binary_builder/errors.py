import enum
from pathlib import Path


class FailureReason(enum.Enum):
    INVALID_ARGUMENT_COUNT = "invalid-argument-count"
    MISSING_SOURCE_DIRECTORY = "missing-source-directory"
    MISSING_DESTINATION_DIRECTORY = "missing-destination-directory"
    NO_MATCHING_FILES = "no-matching-files"
    OUTPUT_OPEN_FAILURE = "output-open-failure"
    UNREADABLE_SOURCE_DIRECTORY = "unreadable-source-directory"
    UNREADABLE_SOURCE_FILE = "unreadable-source-file"
    DUPLICATE_IDENTIFIER = "duplicate-identifier"

    def __str__(self) -> str:
        return self.value


class BuildError(Exception):
    def __init__(self, reason: FailureReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


# Outcome of a whole run. Exactly one of "reason" (failure) or the output
# fields (success) is meaningful.
class BuildResult:
    def __init__(
        self,
        reason: FailureReason | None,
        message: str,
        header_path: Path | None = None,
        source_path: Path | None = None,
        num_files: int = 0,
        total_size: int = 0,
    ):
        self.reason = reason
        self.message = message
        self.header_path = header_path
        self.source_path = source_path
        self.num_files = num_files
        self.total_size = total_size

    @classmethod
    def ok(
        cls,
        header_path: Path,
        source_path: Path,
        num_files: int,
        total_size: int,
    ) -> "BuildResult":
        return cls(
            None,
            f"Total size of binary data: {total_size} bytes",
            header_path=header_path,
            source_path=source_path,
            num_files=num_files,
            total_size=total_size,
        )

    @classmethod
    def failure(cls, reason: FailureReason, message: str) -> "BuildResult":
        return cls(reason, message)

    @property
    def succeeded(self) -> bool:
        return self.reason is None

    def __repr__(self):
        if self.succeeded:
            return f"BuildResult.ok({self.num_files} files, {self.total_size} B)"
        return f"BuildResult.failure({self.reason}: {self.message!r})"
