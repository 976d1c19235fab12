"""
types.
"""

from __future__ import annotations

from pathlib import Path

StrOrPath = str | Path
