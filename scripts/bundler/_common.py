"""Shared constants and error types for the resource bundler."""

# ---------------------------------------------------------------------------
# Output format
# ---------------------------------------------------------------------------

GUARD = "BUNDLE_H"
ARRAY_PREFIX = "bundle"
BYTES_PER_LINE = 10
INDENT = "    "

# Bytes pulled from an input file per read call
CHUNK_SIZE = 64 * 1024

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class BundleError(Exception):
    """Base class for failures that abort a bundling run."""


class UsageError(BundleError):
    """No output path or no input paths were given."""

    def __init__(self, prog):
        self.prog = prog
        super().__init__(f"Usage: {prog} <output file> files...")


class OutputOpenError(BundleError):
    """The output header could not be opened for writing."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Failed to open {path} to write.")


class InputOpenError(BundleError):
    """An input file could not be opened for reading."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Failed to open {path} to read.")
