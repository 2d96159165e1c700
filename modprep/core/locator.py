"""Locate the solution and project files inside a template tree."""
from pathlib import Path
from typing import List

from modprep.core.errors import AmbiguousOrMissingFileError
from modprep.core.layout import (
    PREFERRED_PROJECT,
    PREFERRED_SOLUTION,
    PROJECT_DIR,
    PROJECT_EXT,
    SOLUTION_EXT,
)


def _files_with_suffix(directory: Path, suffix: str) -> List[Path]:
    """Top-level files in ``directory`` whose suffix matches, ignoring case."""
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() == suffix.lower()
    )


def find_single_file(directory: Path, preferred: str, suffix: str) -> Path:
    """Return ``preferred`` if present, else the only ``*suffix`` file.

    Raises:
        AmbiguousOrMissingFileError: Directory is missing, or it holds zero
            or several candidates and the preferred name is absent.
    """
    if not directory.is_dir():
        raise AmbiguousOrMissingFileError(f"Expected directory not found: {directory}")

    candidate = directory / preferred
    if candidate.is_file():
        return candidate

    candidates = _files_with_suffix(directory, suffix)
    if len(candidates) == 1:
        return candidates[0]

    found = ", ".join(p.name for p in candidates) or "none"
    raise AmbiguousOrMissingFileError(
        f"Could not find '{preferred}' or exactly one '*{suffix}' in {directory} (found: {found})"
    )


def find_solution(root: Path) -> Path:
    """Solution file at the top of a template tree."""
    return find_single_file(root, PREFERRED_SOLUTION, SOLUTION_EXT)


def find_project_file(root: Path) -> Path:
    """Project file inside the project subdirectory of a template tree."""
    return find_single_file(root / PROJECT_DIR, PREFERRED_PROJECT, PROJECT_EXT)
