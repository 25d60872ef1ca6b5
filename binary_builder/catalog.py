from pathlib import Path

from .encoding import EncodedPayload


class ResourceRecord:
    def __init__(
        self,
        identifier: str,
        byte_size: int,
        ordinal_index: int,
        source_path: Path,
        payload: EncodedPayload,
    ):
        self.identifier = identifier
        self.byte_size = byte_size
        self.ordinal_index = ordinal_index
        self.source_path = source_path
        self.payload = payload

    def __repr__(self):
        return f"ResourceRecord({self.ordinal_index}: {self.identifier}, {self.byte_size} B)"


# Ordered set of the files accepted during a run.
#
# The position of each record is the index used by the generated accessors
# and the value of the corresponding enum member, so records can only be
# appended.
class ResourceCatalog:
    def __init__(self):
        self._records: list[ResourceRecord] = []
        self.total_size = 0

    def add(
        self, identifier: str, source_path: Path, payload: EncodedPayload
    ) -> ResourceRecord:
        record = ResourceRecord(
            identifier=identifier,
            byte_size=payload.byte_size,
            ordinal_index=len(self._records),
            source_path=source_path,
            payload=payload,
        )
        self._records.append(record)
        self.total_size += record.byte_size
        return record

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __getitem__(self, index: int) -> ResourceRecord:
        return self._records[index]

    @property
    def identifiers(self) -> list[str]:
        return [record.identifier for record in self._records]

    def duplicate_identifiers(self) -> dict[str, list[Path]]:
        return find_duplicates(
            (record.identifier, record.source_path) for record in self._records
        )


# Returns the identifiers shared by more than one file, in order of first
# appearance, each with the files that produced it.
def find_duplicates(entries) -> dict[str, list[Path]]:
    sources: dict[str, list[Path]] = {}
    for identifier, path in entries:
        sources.setdefault(identifier, []).append(path)
    return {
        identifier: paths for identifier, paths in sources.items() if len(paths) > 1
    }
