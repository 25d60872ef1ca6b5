from .catalog import ResourceCatalog
from .config import BuildConfig
from .encoding import NEWLINE

BANNER = "/* (Auto-generated binary data file). */"


# Joins entries one per line, separated by commas (no trailing comma).
def comma_lines(indent: str, entries: list[str]) -> list[str]:
    return [
        f"{indent}{entry}," if i + 1 < len(entries) else f"{indent}{entry}"
        for i, entry in enumerate(entries)
    ]


def _join(lines: list[str]) -> str:
    return NEWLINE.join(lines) + NEWLINE


# Emits a static table followed by the unchecked accessor that indexes it.
def _table(
    table_type: str,
    table_name: str,
    entries: list[str],
    accessor: str,
) -> list[str]:
    outlines = [f"static const {table_type} {table_name}[] = {{"]
    outlines += comma_lines("  ", entries)
    outlines.append("};")
    outlines.append("")
    outlines.append(f"{accessor} {{ return {table_name}[i]; }}")
    outlines.append("")
    return outlines


# Generates the header: per-file declarations, accessor declarations, the
# number of files and the Items enum, all inside a namespace named after the
# class.
def emit_header(catalog: ResourceCatalog, config: BuildConfig) -> str:
    outlines = [BANNER, "", "#pragma once", "", f"namespace {config.class_name} {{"]

    for record in catalog:
        outlines.append(f"  extern const char*  {record.identifier}_mem;")
        outlines.append(
            f"  const int           {record.identifier}_size = {record.byte_size};"
        )
        outlines.append("")

    outlines.append("  extern const char* getFile(int i);")
    outlines.append("  extern const size_t getFileSize(int i);")
    outlines.append(f"  const int numFiles = {len(catalog)};")
    outlines.append("  extern const char* getFileName(int i);")
    outlines.append("")

    if config.checked_accessors:
        outlines.append(
            "  extern bool tryGetFile(int i, const char*& data, size_t& size);"
        )
        outlines.append("")

    # Enum values are implicit, i.e. they match the position in the tables.
    outlines.append("  namespace Items {")
    outlines.append("    enum: int{")
    outlines += comma_lines("      ", catalog.identifiers)
    outlines.append("    };")
    outlines.append("  }")
    outlines.append("")
    outlines.append("}")

    return _join(outlines)


# Generates the source file: one array per file, then the pointer, size and
# name tables (all in catalog order) and the accessors' bodies.
#
# Accessors do not check their argument: 0 <= i < numFiles is up to the
# caller. The optional tryGetFile() is the checked alternative.
def emit_source(catalog: ResourceCatalog, config: BuildConfig) -> str:
    class_name = config.class_name
    outlines = [BANNER, "", f'#include "{class_name}.h"', ""]

    for record in catalog:
        outlines.append(record.payload.text)
        outlines.append(
            f"const char* {class_name}::{record.identifier}_mem"
            f" = (const char*) {record.payload.symbol};"
        )
        outlines.append("")

    outlines += _table(
        "char*",
        "temp_ptrs",
        [f"{class_name}::{record.identifier}_mem" for record in catalog],
        f"const char* {class_name}::getFile(int i)",
    )
    outlines += _table(
        "size_t",
        "temp_sizes",
        [str(record.byte_size) for record in catalog],
        f"const size_t {class_name}::getFileSize(int i)",
    )
    outlines += _table(
        "char*",
        "temp_names",
        [f'"{record.identifier}"' for record in catalog],
        f"const char* {class_name}::getFileName(int i)",
    )

    if config.checked_accessors:
        outlines.append(
            f"bool {class_name}::tryGetFile(int i, const char*& data, size_t& size)"
        )
        outlines.append("{")
        outlines.append("  if (i < 0 || i >= numFiles) return false;")
        outlines.append("  data = temp_ptrs[i];")
        outlines.append("  size = temp_sizes[i];")
        outlines.append("  return true;")
        outlines.append("}")
        outlines.append("")

    return _join(outlines)
