"""Helpers for turning project names into identifiers."""

from __future__ import annotations


class ProjectNameError(ValueError):
    """Raised when a project name cannot be turned into identifiers."""


def split_on_capitals(s: str) -> list[str]:
    """Split ``s`` before every uppercase character except the first one."""
    parts: list[str] = []
    start = 0
    for index, char in enumerate(s):
        if index > 0 and char.isupper():
            parts.append(s[start:index])
            start = index
    parts.append(s[start:])
    return parts


def capitalize_first_letter(s: str) -> str:
    """Uppercase the first character of ``s`` and leave the rest untouched."""
    return s[:1].upper() + s[1:]


def last_part_of_project_name(project_name: str) -> str:
    """Return what follows the last ``/`` of a project name."""
    return project_name.rsplit("/", 1)[-1]