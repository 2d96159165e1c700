"""Rename the mod project file and update its identifiers."""
from pathlib import Path
from typing import List, Tuple

from modprep.core.fileops import rename_file
from modprep.core.layout import project_name
from modprep.core.locator import find_project_file
from modprep.core.logger import get_logger
from modprep.core.xmlfile import children_named, load_xml, local_name, save_xml

logger = get_logger(__name__)

IDENTIFIER_FIELDS = ("RootNamespace", "AssemblyName")


def rename_project_file(root: Path, mod_name: str) -> Tuple[Path, Path]:
    """Rename the project file under ``root`` to ``<mod_name>.csproj``.

    Returns:
        Tuple of (original path, path after renaming)
    """
    current = find_project_file(root)
    renamed = rename_file(current, current.with_name(project_name(mod_name)), what="csproj")
    return current, renamed


def update_identifiers(project_path: Path, mod_name: str) -> List[str]:
    """Set RootNamespace and AssemblyName of every PropertyGroup to ``mod_name``.

    Fields that are absent are not added. The file is only rewritten when a
    value actually changed.

    Returns:
        Names of the fields that were changed
    """
    document = load_xml(project_path)
    changed = []

    if local_name(document.root.tag) == "Project":
        for group in children_named(document.root, "PropertyGroup"):
            for field_name in IDENTIFIER_FIELDS:
                for node in children_named(group, field_name):
                    if (node.text or "") != mod_name:
                        node.text = mod_name
                        changed.append(field_name)

    if changed:
        save_xml(document, project_path)
        logger.debug(f"Updated {', '.join(changed)} in {project_path}")
    return changed
