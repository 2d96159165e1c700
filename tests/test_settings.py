"""Tests for settings persistence and defaults."""
import yaml

from modprep.core.settings import SettingsStore, default_dest_base, default_settings_path
from modprep.models.settings import Settings


class TestSettingsStore:
    """Test YAML-backed settings."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = SettingsStore(tmp_path / "settings.yml").load()

        assert settings.template_root is None
        assert settings.dest_base is None
        assert settings.pkg_prefix == "jellypowered"
        assert settings.include_git is False
        assert settings.open_when_done is True

    def test_save_then_load(self, tmp_path):
        store = SettingsStore(tmp_path / "nested" / "settings.yml")
        saved = Settings(template_root="/mods/ModTemplate", dest_base="/mods/Source",
                         pkg_prefix="acme", include_git=True, open_when_done=False)

        assert store.save(saved) is True
        assert store.load() == saved

        data = yaml.safe_load(store.path.read_text())
        assert data["pkg_prefix"] == "acme"
        assert "mod_name" not in data

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("pkg_prefix: [unterminated\n")
        assert SettingsStore(path).load() == Settings()

    def test_non_mapping_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("- just\n- a list\n")
        assert SettingsStore(path).load() == Settings()

    def test_blank_values_are_unset(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("template_root: '  '\npkg_prefix: ''\nunknown: 1\n")

        settings = SettingsStore(path).load()

        assert settings.template_root is None
        assert settings.pkg_prefix == "jellypowered"

    def test_clear(self, tmp_path):
        store = SettingsStore(tmp_path / "settings.yml")
        assert store.clear() is False
        store.save(Settings())
        assert store.clear() is True
        assert not store.path.exists()

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MODPREP_SETTINGS", str(tmp_path / "custom.yml"))
        assert default_settings_path() == tmp_path / "custom.yml"
        assert SettingsStore().path == tmp_path / "custom.yml"


class TestDefaultDestBase:
    """Test where new mods go by default."""

    def test_sibling_source_directory(self, tmp_path):
        (tmp_path / "ModTemplate").mkdir()
        (tmp_path / "Source").mkdir()
        assert default_dest_base(tmp_path / "ModTemplate") == (tmp_path / "Source").resolve()

    def test_template_name_is_case_insensitive(self, tmp_path):
        (tmp_path / "modtemplate").mkdir()
        (tmp_path / "Source").mkdir()
        assert default_dest_base(tmp_path / "modtemplate") == (tmp_path / "Source").resolve()

    def test_no_source_directory(self, tmp_path):
        (tmp_path / "ModTemplate").mkdir()
        assert default_dest_base(tmp_path / "ModTemplate") == tmp_path.resolve()

    def test_other_template_name(self, tmp_path):
        (tmp_path / "Skeleton").mkdir()
        (tmp_path / "Source").mkdir()
        assert default_dest_base(tmp_path / "Skeleton") == tmp_path.resolve()
