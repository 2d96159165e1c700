"""Shared test fixtures for modprep tests."""
from pathlib import Path

import pytest

CSHARP_TYPE_GUID = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"
MOD_PROJECT_GUID = "8F9C7F1A-3B2D-4E5F-9A6B-1C2D3E4F5A6B"
FOLDER_TYPE_GUID = "2150E333-8FDC-42A3-9474-1A3956D46DE8"
FOLDER_GUID = "0A1B2C3D-4E5F-6071-8293-A4B5C6D7E8F9"

SOLUTION_TEXT = (
    "\r\n"
    "Microsoft Visual Studio Solution File, Format Version 12.00\r\n"
    "# Visual Studio Version 17\r\n"
    f'Project("{{{CSHARP_TYPE_GUID}}}") = "mod", ".vscode\\mod.csproj", "{{{MOD_PROJECT_GUID}}}"\r\n'
    "EndProject\r\n"
    f'Project("{{{FOLDER_TYPE_GUID}}}") = "Solution Items", "Solution Items", "{{{FOLDER_GUID}}}"\r\n'
    "EndProject\r\n"
    "Global\r\n"
    "EndGlobal\r\n"
)

CSPROJ_TEXT = """<Project Sdk="Microsoft.NET.Sdk">
  <!-- mod build settings -->
  <PropertyGroup>
    <TargetFramework>net472</TargetFramework>
    <RootNamespace>Mod</RootNamespace>
    <AssemblyName>Mod</AssemblyName>
  </PropertyGroup>
  <PropertyGroup Condition="'$(Configuration)' == 'Release'">
    <AssemblyName>Mod</AssemblyName>
  </PropertyGroup>
</Project>
"""

ABOUT_TEXT = """<?xml version="1.0" encoding="utf-8"?>
<ModMetaData>
  <name>Mod Template</name>
  <packageId>template.modtemplate</packageId>
  <supportedVersions>
    <li>1.5</li>
  </supportedVersions>
  <description>Template description</description>
</ModMetaData>
"""


def write(path: Path, content="", binary: bool = False) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if binary:
        path.write_bytes(content)
    else:
        path.write_bytes(content.encode("utf-8"))
    return path


def snapshot(root: Path) -> dict:
    """Relative path -> file bytes (None for directories) of a whole tree."""
    return {
        str(p.relative_to(root)): (None if p.is_dir() else p.read_bytes())
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def template_root(tmp_path):
    """A ModTemplate tree with build, IDE and VCS clutter."""
    root = tmp_path / "ModTemplate"
    write(root / "ModTemplate.sln", SOLUTION_TEXT)
    write(root / ".vscode" / "mod.csproj", CSPROJ_TEXT)
    write(root / ".vscode" / "tasks.json", "{}\n")
    write(root / "About" / "About.xml", ABOUT_TEXT)
    write(root / "About" / "PublishedFileId.txt", "2009463077")
    write(root / "Source" / "ModEntry.cs", "namespace Mod {}\n")
    write(root / "Source" / "obj" / "cache.bin", b"\x00\x01", binary=True)
    write(root / ".git" / "HEAD", "ref: refs/heads/main\n")
    write(root / ".vs" / "ModTemplate" / "v17" / ".suo", b"\x00", binary=True)
    write(root / "bin" / "Mod.dll", b"MZ", binary=True)
    write(root / "obj" / "project.assets.json", "{}")
    return root


@pytest.fixture
def dest_base(tmp_path):
    base = tmp_path / "Source"
    base.mkdir()
    return base
