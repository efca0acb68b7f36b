"""Tests for config.py — config.toml loading and validation."""

from pathlib import Path

import pytest

from glyphseed.config import AppConfig, config_from_toml, load_config
from glyphseed.surface import RenderTiming

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config.toml"


@pytest.fixture(autouse=True)
def no_palette_env(monkeypatch):
    monkeypatch.delenv("GLYPHSEED_PALETTE", raising=False)


def write(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_repo_config_matches_defaults(self):
        assert load_config(REPO_CONFIG) == AppConfig()

    def test_missing_default_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config() == AppConfig()

    def test_cwd_config_is_picked_up(self, tmp_path, monkeypatch):
        write(tmp_path, '[style]\npalette_mode = "ember"\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().style.palette_mode == "ember"

    def test_explicit_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_partial_file(self, tmp_path):
        cfg = load_config(write(tmp_path, "[live]\ndebounce_ms = 250\n"))
        assert cfg.live.debounce_ms == 250
        assert cfg.live.keystroke_ms == 60
        assert cfg.timing.typing == RenderTiming(700, 25)


class TestConfigFromToml:
    def test_timing_pairs(self):
        cfg = config_from_toml({"timing": {"typing": [900, 10]}})
        assert cfg.timing.typing == RenderTiming(900, 10)
        assert cfg.timing.grow == RenderTiming(3000, 30)

    def test_export_section(self):
        cfg = config_from_toml(
            {"export": {"output": "renders", "png_size": 2048, "svg_size": 800}}
        )
        assert (cfg.export.output, cfg.export.png_size, cfg.export.svg_size) == (
            "renders",
            2048,
            800,
        )

    def test_env_overrides_palette(self, monkeypatch):
        monkeypatch.setenv("GLYPHSEED_PALETTE", "mono")
        cfg = config_from_toml({"style": {"palette_mode": "tide"}})
        assert cfg.style.palette_mode == "mono"

    @pytest.mark.parametrize(
        "data, error",
        [
            ({"style": {"palette_mode": "neon"}}, ValueError),
            ({"style": "auto"}, TypeError),
            ({"live": {"debounce_ms": -5}}, ValueError),
            ({"live": {"debounce_ms": "fast"}}, TypeError),
            ({"live": {"keystroke_ms": True}}, TypeError),
            ({"timing": {"grow": [3000]}}, ValueError),
            ({"export": {"output": ""}}, ValueError),
            ({"export": {"png_size": 0}}, ValueError),
        ],
    )
    def test_invalid_values(self, data, error):
        with pytest.raises(error):
            config_from_toml(data)

    def test_bad_env_palette(self, monkeypatch):
        monkeypatch.setenv("GLYPHSEED_PALETTE", "neon")
        with pytest.raises(ValueError):
            config_from_toml({})
