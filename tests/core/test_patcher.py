"""Tests for settings file patching."""

import sys

import pytest

from waka.core import jsonc
from waka.core.errors import ConfigParseError, ConfigShapeError, ConfigWriteError
from waka.core.patcher import patch_settings

KEY_PATH = ("auto_install_extensions", "wakatime")
EXPECTED = {"auto_install_extensions": {"wakatime": True}}


class TestPatchSettings:
    def test_creates_missing_file_and_parents(self, tmp_path):
        path = tmp_path / "config" / "zed" / "settings.json"
        patch_settings(path, KEY_PATH, True)
        assert path.is_file()
        assert jsonc.loads(path.read_text()) == EXPECTED
        assert path.read_text().endswith("}\n")

    @pytest.mark.parametrize("content", ["", "   \n\t\n"])
    def test_blank_file_treated_as_empty_object(self, tmp_path, content):
        path = tmp_path / "settings.json"
        path.write_text(content)
        patch_settings(path, KEY_PATH, True)
        assert jsonc.loads(path.read_text()) == EXPECTED

    def test_preserves_comments_and_keys(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{ "foo": 1, // comment\n "bar": 2 }')
        patch_settings(path, KEY_PATH, True)
        text = path.read_text()
        assert "// comment" in text
        assert jsonc.loads(text) == {"foo": 1, "bar": 2, **EXPECTED}

    def test_idempotent(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{\n  // theme\n  "theme": "Ayu Dark",\n}\n')
        first = patch_settings(path, KEY_PATH, True)
        second = patch_settings(path, KEY_PATH, True)
        assert first == second
        assert path.read_text() == first

    def test_shape_failure_leaves_file_unchanged(self, tmp_path):
        path = tmp_path / "settings.json"
        original = '{"auto_install_extensions": 5}'
        path.write_text(original)
        with pytest.raises(ConfigShapeError):
            patch_settings(path, KEY_PATH, True)
        assert path.read_text() == original

    def test_parse_failure_leaves_file_unchanged(self, tmp_path):
        path = tmp_path / "settings.json"
        original = '{\n  "theme": "One Dark"\n  "vim_mode": true\n}'
        path.write_text(original)
        with pytest.raises(ConfigParseError) as exc:
            patch_settings(path, KEY_PATH, True)
        assert exc.value.path == path
        assert exc.value.line == 3
        assert str(path) in str(exc.value)
        assert path.read_text() == original

    def test_undecodable_file_left_unchanged(self, tmp_path):
        path = tmp_path / "settings.json"
        original = b'{"theme": "\xff"}'
        path.write_bytes(original)
        with pytest.raises(ConfigParseError, match="not valid UTF-8") as exc:
            patch_settings(path, KEY_PATH, True)
        assert exc.value.path == path
        assert path.read_bytes() == original

    def test_deep_nesting_left_unchanged(self, tmp_path):
        path = tmp_path / "settings.json"
        original = '{"a": ' + "[" * 5000 + "]" * 5000 + "}"
        path.write_text(original)
        with pytest.raises(ConfigParseError, match="nested too deeply"):
            patch_settings(path, KEY_PATH, True)
        assert path.read_text() == original

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no integer digit limit")
    def test_oversized_number_left_unchanged(self, tmp_path):
        path = tmp_path / "settings.json"
        original = '{"a": ' + "1" * 5000 + "}"
        path.write_text(original)
        with pytest.raises(ConfigParseError, match="Number literal too long"):
            patch_settings(path, KEY_PATH, True)
        assert path.read_text() == original

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "zed"
        blocker.write_text("not a directory")
        with pytest.raises(ConfigWriteError) as exc:
            patch_settings(blocker / "settings.json", KEY_PATH, True)
        assert exc.value.path == blocker / "settings.json"
