import argparse
import collections
import logging
import sys
from pathlib import Path

from .config import DEFAULT_CLASS_NAME, DEFAULT_EXTENSION, MAX_POSITIONALS, BuildConfig
from .errors import BuildResult, FailureReason
from .filesystem import FileSystem
from .pipeline import build

logger = logging.getLogger("binary_builder")


class ParameterError(Exception):
    pass


# Reports command-line errors to main() instead of exiting with status 2, so
# that they go through the same exit status mapping as every other failure.
class ParameterParser(argparse.ArgumentParser):
    def error(self, message):
        raise ParameterError(message)


def make_parser() -> argparse.ArgumentParser:
    parser = ParameterParser(
        prog="build-binary-data",
        description=(
            "Embeds all the files with the same extension found in a directory "
            "(non-recursively) into a C++ header and source pair, with indexed "
            "accessors and an enum of the file names."
        ),
        epilog=(
            f"Defaults: {DEFAULT_EXTENSION} . . {DEFAULT_CLASS_NAME}. "
            "Hidden files, source control files and empty files are skipped."
        ),
    )

    parser.add_argument(
        "params",
        metavar="PARAM",
        nargs="*",
        help=(
            "up to four values: file extension, source directory, destination "
            "directory and namespace name, in this order"
        ),
    )
    parser.add_argument(
        "--checked-accessors",
        action="store_true",
        help="also generate tryGetFile(), which validates the index",
    )
    parser.add_argument(
        "--allow-duplicate-identifiers",
        action="store_true",
        help="only warn when several files map to the same identifier",
    )
    parser.add_argument(
        "--strict-exit-status",
        action="store_true",
        help="exit with status 1 on failure (by default the status is always 0)",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="also report skipped files",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="only report errors",
    )

    return parser


def setup_logging(args: argparse.Namespace):
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    logging.basicConfig(format="%(message)s", level=level, stream=sys.stderr)


# Picks the tokens of argv that are listed in "values", keeping their order on
# the command line.
def ordered_positionals(argv: list[str], values: list[str]) -> list[str]:
    remaining = collections.Counter(values)
    positionals = []
    for token in argv:
        if remaining[token] > 0:
            positionals.append(token)
            remaining[token] -= 1
    return positionals


def exit_status(result: BuildResult, strict: bool) -> int:
    if result.succeeded or not strict:
        return 0
    return 1


def main(
    argv: list[str] | None = None,
    cwd: Path | None = None,
    fs: FileSystem | None = None,
) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = make_parser()
    try:
        args, extras = parser.parse_known_args(argv)
    except ParameterError as e:
        logging.basicConfig(format="%(message)s", stream=sys.stderr)
        result = BuildResult.failure(FailureReason.INVALID_ARGUMENT_COUNT, str(e))
        logger.error(f"Invalid parameters: {result.message}")
        return exit_status(result, "--strict-exit-status" in argv)
    setup_logging(args)

    # Values that look like options (e.g. a "-gen" directory) are positionals.
    args.params = ordered_positionals(argv, args.params + extras)

    if len(args.params) > MAX_POSITIONALS:
        result = BuildResult.failure(
            FailureReason.INVALID_ARGUMENT_COUNT,
            f"Too many parameters: expected at most {MAX_POSITIONALS}, "
            f"got {len(args.params)}",
        )
        logger.error(result.message)
        return exit_status(result, args.strict_exit_status)

    config = BuildConfig.from_positionals(
        args.params,
        cwd=cwd,
        checked_accessors=args.checked_accessors,
        allow_duplicate_identifiers=args.allow_duplicate_identifiers,
    )
    result = build(config, fs)
    return exit_status(result, args.strict_exit_status)
