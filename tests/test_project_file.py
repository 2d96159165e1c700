"""Tests for project file renaming and identifier updates."""
import pytest

from modprep.core.errors import TargetExistsError
from modprep.core.project_file import rename_project_file, update_identifiers

from conftest import CSPROJ_TEXT, write

NAMESPACED_CSPROJ = """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="15.0" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <PropertyGroup>
    <RootNamespace>Mod</RootNamespace>
    <AssemblyName>Mod</AssemblyName>
  </PropertyGroup>
  <ItemGroup>
    <Compile Include="..\\Source\\ModEntry.cs" />
  </ItemGroup>
</Project>
"""


class TestRenameProjectFile:

    def test_renames_well_known_project(self, tmp_path):
        write(tmp_path / ".vscode" / "mod.csproj", CSPROJ_TEXT)

        old, new = rename_project_file(tmp_path, "Foo")

        assert old.name == "mod.csproj"
        assert new == tmp_path / ".vscode" / "Foo.csproj"
        assert new.read_text() == CSPROJ_TEXT
        assert not old.exists()

    def test_collision(self, tmp_path):
        write(tmp_path / ".vscode" / "mod.csproj", CSPROJ_TEXT)
        write(tmp_path / ".vscode" / "Foo.csproj", "<Project />")

        with pytest.raises(TargetExistsError, match="csproj"):
            rename_project_file(tmp_path, "Foo")


class TestUpdateIdentifiers:

    def test_updates_every_property_group(self, tmp_path):
        project = write(tmp_path / "Foo.csproj", CSPROJ_TEXT)

        changed = update_identifiers(project, "Foo")

        assert changed == ["RootNamespace", "AssemblyName", "AssemblyName"]
        text = project.read_text()
        assert "<RootNamespace>Foo</RootNamespace>" in text
        assert text.count("<AssemblyName>Foo</AssemblyName>") == 2
        assert "Mod<" not in text

    def test_keeps_layout(self, tmp_path):
        """Only the identifier values differ after the rewrite."""
        project = write(tmp_path / "Foo.csproj", CSPROJ_TEXT)

        update_identifiers(project, "Foo")

        expected = CSPROJ_TEXT.replace(">Mod<", ">Foo<")
        assert project.read_text() == expected

    def test_untouched_when_already_correct(self, tmp_path):
        project = write(tmp_path / "Mod.csproj", CSPROJ_TEXT)
        before = project.stat().st_mtime_ns

        assert update_identifiers(project, "Mod") == []
        assert project.stat().st_mtime_ns == before
        assert project.read_text() == CSPROJ_TEXT

    def test_does_not_add_missing_fields(self, tmp_path):
        project = write(tmp_path / "Foo.csproj", "<Project>\n  <PropertyGroup />\n</Project>\n")
        assert update_identifiers(project, "Foo") == []
        assert "RootNamespace" not in project.read_text()

    def test_msbuild_namespace(self, tmp_path):
        project = write(tmp_path / "Foo.csproj", NAMESPACED_CSPROJ)

        assert update_identifiers(project, "Foo") == ["RootNamespace", "AssemblyName"]

        text = project.read_text()
        assert text.startswith('<?xml version="1.0" encoding="utf-8"?>\n<Project ')
        assert 'xmlns="http://schemas.microsoft.com/developer/msbuild/2003"' in text
        assert "ns0:" not in text
        assert "<RootNamespace>Foo</RootNamespace>" in text
        assert '<Compile Include="..\\Source\\ModEntry.cs" />' in text
