"""Small file helpers shared by the rewrite steps."""
from pathlib import Path

from modprep.core.errors import TargetExistsError


def same_name(a: Path, b: Path) -> bool:
    return a.name.lower() == b.name.lower()


def rename_file(source: Path, target: Path, what: str = "file") -> Path:
    """Rename ``source`` to ``target`` unless the names only differ by case.

    Raises:
        TargetExistsError: ``target`` is already taken
    """
    if same_name(source, target):
        return source
    if target.exists():
        raise TargetExistsError(f"Target {what} already exists: {target}")
    source.rename(target)
    return target
