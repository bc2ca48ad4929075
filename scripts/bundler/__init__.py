"""bundler: embed resource files in a generated C header.

Each input file becomes a null-terminated ``const char bundle<N>[]`` byte
array, followed by a ``const char* bundle[]`` index in input order, all
wrapped in a ``BUNDLE_H`` include guard.

Usage:
    python scripts/bundler <output.h> <file> [<file> ...]
    python -m bundler -v resources.h shader.vert font.ttf
"""

from ._common import (
    BundleError,
    InputOpenError,
    OutputOpenError,
    UsageError,
)
from .writer import HeaderWriter, format_byte, run, write_bundle

__all__ = [
    "BundleError",
    "HeaderWriter",
    "InputOpenError",
    "OutputOpenError",
    "UsageError",
    "format_byte",
    "run",
    "write_bundle",
]
