from pathlib import Path

import pytest

from imagemode.common.enums import ContentMode
from imagemode.geometry import Size
from imagemode.settings import FitSettings

GOOD_YAML = """
mode: scale-aspect-fill
canvas_width: 16
canvas_height: 9
resample: bicubic
"""

BAD_YAML = """
mode: scale-aspect-fill
canvas_width: 0
canvas_height: 9
"""

BAD_MODE_YAML = """
mode: center
"""


def test_defaults() -> None:
    settings = FitSettings()
    assert settings.mode is ContentMode.SCALE_ASPECT_FIT
    assert settings.canvas_size == Size(1, 1)
    assert settings.resample == "lanczos"


def test_valid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "good.yaml"
    cfg_file.write_text(GOOD_YAML)
    settings = FitSettings.load(cfg_file)
    assert settings.mode is ContentMode.SCALE_ASPECT_FILL
    assert settings.canvas_size == Size(16, 9)
    assert settings.resample == "bicubic"


@pytest.mark.parametrize("content", [BAD_YAML, BAD_MODE_YAML])
def test_invalid_config(tmp_path: Path, content: str) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text(content)
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        FitSettings.load(cfg_file)


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yaml"
    cfg_file.write_text("")
    assert FitSettings.load(cfg_file) == FitSettings()


def test_env_interpolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WATERMARK_MODE", "scaleToFill")
    cfg_file = tmp_path / "env.yaml"
    cfg_file.write_text('mode: "${WATERMARK_MODE}"\n')
    assert FitSettings.load(cfg_file).mode is ContentMode.SCALE_TO_FILL


def test_load_from_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "from_env.yaml"
    cfg_file.write_text(GOOD_YAML)
    monkeypatch.setenv("IMAGEMODE_CONFIG", str(cfg_file))
    assert FitSettings.load().canvas_size == Size(16, 9)


def test_missing_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMAGEMODE_CONFIG", str(tmp_path / "nope.yaml"))
    with pytest.raises(FileNotFoundError):
        FitSettings.load()


def test_no_config_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("IMAGEMODE_CONFIG", raising=False)
    monkeypatch.setattr(FitSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "missing.yaml"])
    with pytest.raises(FileNotFoundError):
        FitSettings.load()
