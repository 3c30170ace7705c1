"""
Pytest configuration for local imports.
"""

# Standard Library
import os
import sys

# PIP3 modules
import pytest

#============================================


def _ensure_source_on_path() -> None:
    """
    Ensure the text_on_image/ source directory is on sys.path.
    """
    repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    source_root = os.path.join(repo_root, "text_on_image")
    if source_root not in sys.path:
        sys.path.insert(0, source_root)


_ensure_source_on_path()

# local repo modules
import text_on_image_tool


#============================================
@pytest.fixture
def mono():
    """
    Fixed-advance metrics: every character is `size` pixels wide and tall.
    """
    return text_on_image_tool.MonospaceMetrics(advance_ratio=1.0, height_ratio=1.0)
