"""Well-known names inside a ModTemplate tree."""

SOLUTION_EXT = ".sln"
PREFERRED_SOLUTION = "ModTemplate.sln"

PROJECT_DIR = ".vscode"
PROJECT_EXT = ".csproj"
PREFERRED_PROJECT = "mod.csproj"

METADATA_DIR = "About"
METADATA_FILE = "About.xml"
METADATA_ROOT = "ModMetaData"
MARKER_FILE = "PublishedFileId.txt"

VCS_DIR = ".git"
IDE_CACHE_DIR = ".vs"
BUILD_OUTPUT_DIRS = ("bin", "obj")

DEFAULT_AUTHOR = "author"
DEFAULT_MOD_SLUG = "newmod"
PLACEHOLDER_DESCRIPTION = "TODO: mod description"


def solution_name(mod_name: str) -> str:
    return f"{mod_name}{SOLUTION_EXT}"


def project_name(mod_name: str) -> str:
    return f"{mod_name}{PROJECT_EXT}"


def project_entry_path(mod_name: str) -> str:
    """Path of the project as written into the solution file."""
    return f"{PROJECT_DIR}\\{project_name(mod_name)}"
