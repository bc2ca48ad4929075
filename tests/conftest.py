"""Shared fixtures for the bundler test suite."""

import re

import pytest

ARRAY_RE = re.compile(r"const char bundle(\d+)\[\] = \{(.*?)\n\};\n\n", re.DOTALL)
ENTRY_RE = re.compile(r"0x([0-9A-F]{2}), ")


@pytest.fixture
def make_file(tmp_path):
    """Create an input file under tmp_path holding the given bytes."""

    def _make(name, data):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


def parse_arrays(text):
    """Return {index: [byte, ...]} for every bundle<N> array in a header."""
    arrays = {}
    for index, body in ARRAY_RE.findall(text):
        arrays[int(index)] = [int(h, 16) for h in ENTRY_RE.findall(body)]
    return arrays
