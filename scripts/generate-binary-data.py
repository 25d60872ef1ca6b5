#!/usr/bin/env python3
import sys

from binary_builder.cli import main

# Same as the "build-binary-data" command, for build systems that expect a
# script path (e.g. a CMake custom command running ${Python3_EXECUTABLE}).
#
# Usage: generate-binary-data.py [EXT [SRC_DIR [DEST_DIR [CLASS_NAME]]]]

if __name__ == "__main__":
    sys.exit(main())
