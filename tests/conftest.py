"""Pytest conftest: ensure src is on path for supertrunfo imports; fake console input."""

import io
import sys
from pathlib import Path

import pytest

src = Path(__file__).resolve().parent.parent / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture
def reader_for():
    """Factory: reader_for("line1", "line2", ...) -> (InputReader, output buffer)."""
    from supertrunfo.console.reader import InputReader

    def _make(*lines: str):
        stream = io.StringIO("".join(line + "\n" for line in lines))
        out = io.StringIO()
        return InputReader(stream, out), out

    return _make
