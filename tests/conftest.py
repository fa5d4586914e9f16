"""
pytest configuration and fixtures
====================
Shared test infrastructure and sample inputs
"""

import pytest
import sys
import os
from pathlib import Path

import numpy as np

# Put the src root on the path so tests import the package as `fracnorm`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from fracnorm.core.options import ParseOptions  # noqa: E402

# Detect run mode
LEARNING_MODE = os.environ.get("LEARNING_MODE", "0") == "1"


@pytest.fixture
def default_options():
    """Default options: "," and "." separators, 64-bit bounds."""
    return ParseOptions()


@pytest.fixture
def uint16_options():
    """16-bit bounds (max 65535), handy for hitting overflow with short inputs."""
    return ParseOptions(integer_dtype=np.uint16)


@pytest.fixture
def fractions_file(tmp_path):
    """Input file with a mix of valid and invalid lines."""
    path = tmp_path / "fractions.txt"
    path.write_text("35,6/12\n\n  3/4  \n5/0\n7\n", encoding="utf-8")
    return path


def print_section(title: str):
    """Print a section title"""
    if LEARNING_MODE:
        print(f"\n{'='*60}")
        print(f"  {title}")
        print(f"{'='*60}")


def print_concept(content: str):
    """Print a concept note"""
    if LEARNING_MODE:
        print(f"\n💡 {content}")


def print_code_example(code: str):
    """Print a code example"""
    if LEARNING_MODE:
        print(f"\n📝 Code example:")
        for line in code.strip().split("\n"):
            print(f"   {line}")
