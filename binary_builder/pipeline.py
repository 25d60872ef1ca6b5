import logging

from .catalog import ResourceCatalog, find_duplicates
from .config import BuildConfig
from .emitter import emit_header, emit_source
from .encoding import ByteArrayEncoder
from .errors import BuildError, BuildResult, FailureReason
from .filesystem import FileHandle, FileSystem, LocalFileSystem
from .identifiers import identifier_for
from .scanning import filter_hidden, list_candidates

logger = logging.getLogger(__name__)


# State of a single run. A new context is created by every build() call, so
# temp array numbering and totals never leak from one run to the next.
class BuildContext:
    def __init__(self, config: BuildConfig, fs: FileSystem):
        self.config = config
        self.fs = fs
        self.catalog = ResourceCatalog()
        self.encoder = ByteArrayEncoder()


def check_directories(ctx: BuildContext):
    if not ctx.fs.is_directory(ctx.config.source_dir):
        raise BuildError(
            FailureReason.MISSING_SOURCE_DIRECTORY,
            f"Source directory doesn't exist: {ctx.config.source_dir}",
        )
    if not ctx.fs.is_directory(ctx.config.dest_dir):
        raise BuildError(
            FailureReason.MISSING_DESTINATION_DIRECTORY,
            f"Destination directory doesn't exist: {ctx.config.dest_dir}",
        )


# Lists the files with the requested extension and drops the hidden and empty
# ones, keeping the scan order.
def scan(ctx: BuildContext) -> tuple[list[FileHandle], list[FileHandle]]:
    source_dir = ctx.config.source_dir
    try:
        candidates = list_candidates(ctx.fs, source_dir, ctx.config.extension)
        accepted = filter_hidden(ctx.fs, source_dir, candidates)
    except OSError as e:
        raise BuildError(
            FailureReason.UNREADABLE_SOURCE_DIRECTORY,
            f"Couldn't scan {source_dir}: {e}",
        ) from e
    return candidates, accepted


# Identifiers only depend on the file names, so collisions are detected before
# anything is deleted or read.
def check_identifiers(ctx: BuildContext, accepted: list[FileHandle]):
    duplicates = find_duplicates(
        (identifier_for(handle.path), handle.path) for handle in accepted
    )
    if not duplicates:
        return
    if ctx.config.allow_duplicate_identifiers:
        for identifier, paths in duplicates.items():
            logger.warning(
                f"Identifier {identifier!r} is used by {len(paths)} files, "
                f"the generated code will not compile"
            )
        return

    details = "; ".join(
        f"{identifier!r} <- " + ", ".join(str(p) for p in paths)
        for identifier, paths in duplicates.items()
    )
    raise BuildError(
        FailureReason.DUPLICATE_IDENTIFIER,
        f"Several files map to the same identifier: {details}",
    )


def delete_outputs(ctx: BuildContext):
    for path in (ctx.config.header_path, ctx.config.source_path):
        try:
            if ctx.fs.exists(path):
                ctx.fs.delete(path)
        except OSError as e:
            raise BuildError(
                FailureReason.OUTPUT_OPEN_FAILURE,
                f"Couldn't delete {path}: {e}",
            ) from e


# Reads, names and encodes every accepted file, in scan order.
def collect_resources(ctx: BuildContext, accepted: list[FileHandle]):
    for handle in accepted:
        try:
            data = ctx.fs.read_all(handle)
        except OSError as e:
            raise BuildError(
                FailureReason.UNREADABLE_SOURCE_FILE,
                f"Couldn't read {handle.path}: {e}",
            ) from e

        identifier = identifier_for(handle.path)
        payload = ctx.encoder.encode(data)
        ctx.catalog.add(identifier, handle.path, payload)
        logger.info(f"Adding {identifier}: {payload.byte_size} bytes")


def open_output(ctx: BuildContext, path):
    try:
        return ctx.fs.open_for_write(path)
    except OSError as e:
        raise BuildError(
            FailureReason.OUTPUT_OPEN_FAILURE,
            f"Couldn't open {path} for writing",
        ) from e


def run(ctx: BuildContext) -> BuildResult:
    config = ctx.config

    check_directories(ctx)

    logger.info(
        f"Creating {config.header_path} and {config.source_path} "
        f"from files in {config.source_dir}..."
    )

    candidates, accepted = scan(ctx)
    if len(candidates) == 0:
        raise BuildError(
            FailureReason.NO_MATCHING_FILES,
            f"Didn't find any source files in: {config.source_dir}",
        )
    check_identifiers(ctx, accepted)

    # Old outputs are removed before anything new is written. Note that there
    # is no temp-file-and-rename step: if the run is aborted from here on, the
    # destination is left without (or with partial) outputs.
    delete_outputs(ctx)

    if len(accepted) == 0:
        raise BuildError(
            FailureReason.NO_MATCHING_FILES,
            f"Didn't find any usable source files in: {config.source_dir}",
        )
    collect_resources(ctx, accepted)

    header_text = emit_header(ctx.catalog, config)
    source_text = emit_source(ctx.catalog, config)

    # If the second file cannot be opened, the first one is left behind empty.
    with open_output(ctx, config.header_path) as header_fp:
        with open_output(ctx, config.source_path) as source_fp:
            header_fp.write(header_text.encode("utf-8"))
            source_fp.write(source_text.encode("utf-8"))

    result = BuildResult.ok(
        header_path=config.header_path,
        source_path=config.source_path,
        num_files=len(ctx.catalog),
        total_size=ctx.catalog.total_size,
    )
    logger.info(result.message)
    return result


# Runs the whole pipeline once. Failures are returned, not raised.
def build(config: BuildConfig, fs: FileSystem | None = None) -> BuildResult:
    ctx = BuildContext(config, LocalFileSystem() if fs is None else fs)
    try:
        return run(ctx)
    except BuildError as e:
        logger.error(e.message)
        return BuildResult.failure(e.reason, e.message)
