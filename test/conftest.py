# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC_PATH = ROOT / "python" / "src"
DATA_DIR = Path(__file__).parent / "data"

if str(PYTHON_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC_PATH))


def build_gef(header_lines, data_lines=()):
    """Assemble GEF text from ``#KEY= ...`` lines (without the ``#``) and data lines."""
    lines = ["#" + line for line in header_lines] + ["#EOH="] + list(data_lines)
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_gef():
    return build_gef


@pytest.fixture
def cpt_text():
    return (DATA_DIR / "cpt_inclined.gef").read_text(encoding="utf-8")


@pytest.fixture
def bore_text():
    return (DATA_DIR / "bore_sample.gef").read_text(encoding="utf-8")


@pytest.fixture
def fixed_projector():
    calls = []

    def projector(epsg_from, epsg_to, x, y):
        calls.append((epsg_from, epsg_to, x, y))
        return 4.9, 52.37

    projector.calls = calls
    return projector
