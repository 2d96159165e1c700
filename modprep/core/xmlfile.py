"""Load and save XML files while keeping their layout.

ElementTree keeps text and tail whitespace inside the root element on its
own. Everything before the root start tag (declaration, comments, processing
instructions, DOCTYPE) is kept verbatim as the prolog, and the default
namespace and trailing newline are tracked here, so a rewritten file only
differs where values changed.
"""
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

_BOM = b"\xef\xbb\xbf"

DEFAULT_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'

# Whitespace, <?...?>, <!--...--> and <!DOCTYPE ...> (with an internal subset)
PROLOG = re.compile(
    rb"(?:\s+|<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^\[>]*(?:\[.*?\])?\s*>)*",
    re.DOTALL,
)


@dataclass
class XmlDocument:
    tree: ET.ElementTree
    prolog: str = DEFAULT_DECLARATION
    namespace: Optional[str] = None
    trailing_newline: bool = True

    @property
    def root(self) -> ET.Element:
        return self.tree.getroot()

    def qualify(self, name: str) -> str:
        """Tag name in the document's default namespace."""
        return f"{{{self.namespace}}}{name}" if self.namespace else name


def local_name(tag) -> str:
    """Tag without its ``{namespace}`` part; '' for comments and PIs."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def children_named(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if local_name(child.tag) == name]


def load_xml(path: Path) -> XmlDocument:
    """Parse ``path``, keeping comments and processing instructions.

    Raises:
        xml.etree.ElementTree.ParseError: Malformed document
    """
    data = Path(path).read_bytes()
    head = data[len(_BOM):] if data.startswith(_BOM) else data

    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True, insert_pis=True))
    parser.feed(data)
    root = parser.close()

    namespace = None
    if root.tag.startswith("{"):
        namespace = root.tag[1:].split("}", 1)[0]

    prolog = head[:PROLOG.match(head).end()]
    return XmlDocument(
        tree=ET.ElementTree(root),
        prolog=prolog.decode("utf-8", errors="replace"),
        namespace=namespace,
        trailing_newline=data.endswith(b"\n"),
    )


def new_document(root_tag: str) -> XmlDocument:
    return XmlDocument(tree=ET.ElementTree(ET.Element(root_tag)))


def save_xml(document: XmlDocument, path: Path) -> None:
    """Write ``document`` as BOM-less UTF-8, prolog first."""
    root = document.root
    root.tail = "\n" if document.trailing_newline else None
    if document.namespace:
        # Serialize the namespace as xmlns="..." instead of an ns0: prefix
        ET.register_namespace("", document.namespace)
    body = ET.tostring(root, encoding="unicode")
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(document.prolog + body)
