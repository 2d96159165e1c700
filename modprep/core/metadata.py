"""Patch or create About/About.xml and its PublishedFileId marker."""
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict

from modprep.core.errors import InvalidFormatError
from modprep.core.layout import (
    MARKER_FILE,
    METADATA_DIR,
    METADATA_FILE,
    METADATA_ROOT,
    PLACEHOLDER_DESCRIPTION,
)
from modprep.core.logger import get_logger
from modprep.core.xmlfile import XmlDocument, children_named, load_xml, local_name, new_document, save_xml

logger = get_logger(__name__)

DEFAULT_INDENT = "  "


def metadata_path(root: Path) -> Path:
    return root / METADATA_DIR / METADATA_FILE


def marker_path(root: Path) -> Path:
    return root / METADATA_DIR / MARKER_FILE


def metadata_fields(mod_name: str, package_id: str, author: str) -> Dict[str, str]:
    """Fields written into the metadata document, in document order."""
    return {
        "name": mod_name,
        "packageId": package_id,
        "author": author,
    }


def _append_child(parent: ET.Element, tag: str, text: str) -> ET.Element:
    """Append an element, reusing the indentation of its siblings."""
    child = ET.Element(tag)
    child.text = text
    elements = [c for c in parent]
    if elements:
        last = elements[-1]
        child.tail = last.tail
        last.tail = parent.text
    else:
        closing = parent.tail or "\n"
        parent.text = closing + DEFAULT_INDENT
        child.tail = closing
    parent.append(child)
    return child


def upsert_fields(document: XmlDocument, fields: Dict[str, str]) -> None:
    """Overwrite or add direct children of the root; others stay untouched."""
    root = document.root
    for name, value in fields.items():
        existing = children_named(root, name)
        if existing:
            existing[0].text = value
        else:
            _append_child(root, document.qualify(name), value)


def update_metadata(path: Path, fields: Dict[str, str]) -> None:
    """Patch an existing metadata file in place.

    Raises:
        InvalidFormatError: The root element is not ModMetaData
    """
    document = load_xml(path)
    if local_name(document.root.tag).lower() != METADATA_ROOT.lower():
        raise InvalidFormatError(f"{path.name} does not contain <{METADATA_ROOT}> root.")
    upsert_fields(document, fields)
    save_xml(document, path)


def create_metadata(path: Path, fields: Dict[str, str]) -> None:
    """Write a fresh, indented metadata document with a placeholder description."""
    path.parent.mkdir(parents=True, exist_ok=True)
    document = new_document(METADATA_ROOT)
    for name, value in {**fields, "description": PLACEHOLDER_DESCRIPTION}.items():
        ET.SubElement(document.root, name).text = value
    ET.indent(document.tree, space=DEFAULT_INDENT)
    save_xml(document, path)


def clear_marker(path: Path, create: bool = False) -> bool:
    """Truncate the marker file, optionally creating it.

    Returns:
        True if the marker is now empty. Failures are logged, never raised.
    """
    if not create and not path.exists():
        return False
    try:
        path.write_bytes(b"")
    except OSError as e:
        logger.debug(f"Could not clear {path}: {e}")
        return False
    return True
