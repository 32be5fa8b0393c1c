from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = str(Path(__file__).resolve().parents[1])
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tablewriter.writer import TableWriter


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def writer(sink: io.StringIO) -> TableWriter:
    return TableWriter(sink)
