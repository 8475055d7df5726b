"""
propsat/version.py
==================
Single source of truth for the propsat version. pyproject.toml reads
``__version__`` from here.
"""

from __future__ import annotations

from typing import NamedTuple


class VersionInfo(NamedTuple):
    major: int
    minor: int
    patch: int
    pre_release: str = ""

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            return f"{base}-{self.pre_release}"
        return base


VERSION_INFO = VersionInfo(major=0, minor=3, patch=0)

__version__: str = str(VERSION_INFO)
