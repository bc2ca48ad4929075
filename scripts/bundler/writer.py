"""Stream input files into C byte-array declarations.

The generated header looks like:

    #ifndef BUNDLE_H
    #define BUNDLE_H

    const char bundle0[] = {
        0x41, 0x42, 0x00, 
    };

    const char* bundle[] = {
        bundle0,
    };

    #endif

Every array ends with a synthetic 0x00 so it can double as a C string.
"""

import os

from ._common import (
    ARRAY_PREFIX,
    BYTES_PER_LINE,
    CHUNK_SIZE,
    GUARD,
    INDENT,
    InputOpenError,
    OutputOpenError,
    UsageError,
)

# Precomputed "0xHH, " text for every byte value
_BYTE_TEXT = [f"0x{value:02X}, " for value in range(256)]


def format_byte(value):
    """Return the array entry text for one byte, e.g. 10 -> '0x0A, '."""
    return _BYTE_TEXT[value]


class HeaderWriter:
    """Write bundle declarations to an already-open text stream.

    Tracks the entry position inside the current array so line breaks land
    before entries 0, 10, 20, ... no matter how the input is chunked.
    """

    def __init__(self, stream):
        self.stream = stream
        self.position = 0

    def begin_guard(self):
        self.stream.write(f"#ifndef {GUARD}\n")
        self.stream.write(f"#define {GUARD}\n\n")

    def end_guard(self):
        self.stream.write("#endif\n")

    def begin_array(self, index):
        self.position = 0
        self.stream.write(f"const char {ARRAY_PREFIX}{index}[] = {{")

    def write_bytes(self, chunk):
        parts = []
        position = self.position
        for value in chunk:
            if position % BYTES_PER_LINE == 0:
                parts.append("\n" + INDENT)
            parts.append(_BYTE_TEXT[value])
            position += 1
        self.stream.write("".join(parts))
        self.position = position

    def end_array(self):
        """Append the null terminator and close the array.

        Returns the number of real (non-terminator) bytes in the array.
        """
        count = self.position
        self.write_bytes(b"\x00")
        self.stream.write("\n};\n\n")
        return count

    def write_index(self, count):
        self.stream.write(f"const char* {ARRAY_PREFIX}[] = {{\n")
        for index in range(count):
            self.stream.write(f"{INDENT}{ARRAY_PREFIX}{index},\n")
        self.stream.write("};\n\n")


def write_bundle(writer, index, path):
    """Stream one input file into the header as bundle<index>.

    Returns the number of bytes read from the file.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise InputOpenError(path) from e

    with f:
        writer.begin_array(index)
        while True:
            chunk = f.read(CHUNK_SIZE)
            if not chunk:
                break
            writer.write_bytes(chunk)
        return writer.end_array()


def run(output_path, input_paths, verbose=False, prog="bundler"):
    """Bundle input_paths, in order, into the header at output_path.

    Raises UsageError, OutputOpenError or InputOpenError. On an input
    failure the output is closed and left holding whatever was already
    written.
    """
    input_paths = list(input_paths)
    if not input_paths:
        raise UsageError(prog)

    try:
        out = open(output_path, "w", encoding="ascii", newline="\n")
    except OSError as e:
        raise OutputOpenError(output_path) from e

    with out:
        writer = HeaderWriter(out)
        writer.begin_guard()
        for index, path in enumerate(input_paths):
            size = write_bundle(writer, index, path)
            if verbose:
                print(f"  {ARRAY_PREFIX}{index}: {size} bytes from {os.fspath(path)}")
        writer.write_index(len(input_paths))
        writer.end_guard()

    if verbose:
        print(f"Wrote {len(input_paths)} bundle(s) to {os.fspath(output_path)}")
