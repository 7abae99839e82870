"""
Release group model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReleaseGroup:
    """A grouping of releases (e.g. editions of the same album)."""
    gid: str
    name: str = ""
