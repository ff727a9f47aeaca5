"""
Central data model definitions used across the project.

This module defines the canonical structure of a Course so that:
- the loader, the lookup helpers and the interactive menu share the same field names
- the in-memory collection stays a plain list of Course objects in load order
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Course:
    """
    Represents one course as read from one line of the course data file.

    number        -> identity key (compared case-insensitively, never empty)
    title         -> title words joined with single spaces (may be empty)
    prerequisites -> prerequisite course numbers in the order of the line
    """

    number: str
    title: str = ""
    prerequisites: List[str] = field(default_factory=list)

    def label(self) -> str:
        """
        Display line used by the course list and the course detail view.
        """
        return f"{self.number}, {self.title}"
