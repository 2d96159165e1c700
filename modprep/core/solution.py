"""Rewrite the project entry of a Visual Studio solution file."""
import re
from pathlib import Path
from typing import Iterator, NamedTuple

from modprep.core.fileops import rename_file
from modprep.core.layout import PROJECT_DIR, PROJECT_EXT, project_entry_path, solution_name
from modprep.core.logger import get_logger

logger = get_logger(__name__)

# Project("{TYPE-GUID}") = "NAME", "PATH", "{PROJECT-GUID}"
PROJECT_ENTRY = re.compile(
    r'Project\("\{([A-F0-9\-]{36})\}"\)\s=\s"([^"]+)",\s"([^"]+)",\s"\{([A-F0-9\-]{36})\}"',
    re.IGNORECASE,
)


class ProjectEntry(NamedTuple):
    type_guid: str
    name: str
    path: str
    project_guid: str

    def render(self) -> str:
        return f'Project("{{{self.type_guid}}}") = "{self.name}", "{self.path}", "{{{self.project_guid}}}"'


def iter_project_entries(text: str) -> Iterator[ProjectEntry]:
    for match in PROJECT_ENTRY.finditer(text):
        yield ProjectEntry(*match.groups())


def is_mod_project_path(path: str) -> bool:
    """True for paths like ``.vscode\\mod.csproj`` (either separator)."""
    normalized = path.replace("/", "\\").lower()
    return (
        normalized.startswith(PROJECT_DIR.lower() + "\\")
        and normalized.endswith(PROJECT_EXT)
    )


def rewrite_solution_text(text: str, mod_name: str) -> str:
    """Point the mod project entry at ``<mod_name>.csproj``.

    Only entries whose path lives in the project subdirectory and carries
    the project extension are rewritten; everything else is returned as is.
    """

    def replace(match: re.Match) -> str:
        entry = ProjectEntry(*match.groups())
        if not is_mod_project_path(entry.path):
            return match.group(0)
        return entry._replace(name=mod_name, path=project_entry_path(mod_name)).render()

    return PROJECT_ENTRY.sub(replace, text)


def read_solution(path: Path) -> str:
    # utf-8-sig drops a BOM; newline='' keeps CRLF line endings intact.
    # Bytes that are not UTF-8 round-trip through surrogateescape.
    with open(path, encoding="utf-8-sig", errors="surrogateescape", newline="") as f:
        return f.read()


def write_solution(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(text)


def rewrite_solution(solution_path: Path, mod_name: str) -> Path:
    """Rewrite the mod entry, rename the solution and save it without BOM.

    Returns:
        Path of the solution after renaming
    """
    rewritten = rewrite_solution_text(read_solution(solution_path), mod_name)
    target = solution_path.with_name(solution_name(mod_name))
    new_path = rename_file(solution_path, target, what="solution")
    write_solution(new_path, rewritten)
    logger.debug(f"Wrote solution {new_path}")
    return new_path
