from pathlib import Path

from binary_builder.catalog import ResourceCatalog
from binary_builder.encoding import ByteArrayEncoder


def test_records_are_numbered_in_insertion_order():
    encoder = ByteArrayEncoder()
    catalog = ResourceCatalog()
    for name, data in [("b", b"12"), ("a", b"345"), ("c", b"6")]:
        catalog.add(name, Path(f"/src/{name}.png"), encoder.encode(data))

    assert len(catalog) == 3
    assert catalog.identifiers == ["b", "a", "c"]
    assert [r.ordinal_index for r in catalog] == [0, 1, 2]
    assert [r.byte_size for r in catalog] == [2, 3, 1]
    assert catalog.total_size == 6
    assert catalog[1].payload.symbol == "temp2"


def test_duplicate_identifiers():
    encoder = ByteArrayEncoder()
    catalog = ResourceCatalog()
    catalog.add("x", Path("/src/x.png"), encoder.encode(b"1"))
    catalog.add("y", Path("/src/y.png"), encoder.encode(b"1"))
    catalog.add("x", Path("/src/x!.png"), encoder.encode(b"1"))

    assert catalog.duplicate_identifiers() == {
        "x": [Path("/src/x.png"), Path("/src/x!.png")]
    }
