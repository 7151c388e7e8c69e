"""User-configurable fitting defaults loaded from a YAML file."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, ClassVar, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from imagemode.common.enums import ContentMode
from imagemode.geometry import DEFAULT_RATIO_TOLERANCE, Size

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class FitSettings(BaseModel):
    """Default content mode and canvas used when fitting watermark images.

    Values can be overridden by command line options.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("imagemode.yaml"),
        Path("~/.config/imagemode/config.yaml").expanduser(),
        Path("/etc/imagemode/config.yaml"),
    ]

    mode: ContentMode = Field(
        ContentMode.SCALE_ASPECT_FIT, description="Content mode (e.g. scale-aspect-fit)"
    )
    canvas_width: float = Field(1.0, gt=0, description="Canvas width or ratio numerator")
    canvas_height: float = Field(1.0, gt=0, description="Canvas height or ratio denominator")
    resample: Literal["nearest", "bilinear", "bicubic", "lanczos"] = "lanczos"
    ratio_tolerance: float = Field(
        DEFAULT_RATIO_TOLERANCE,
        gt=0,
        lt=1,
        description="Relative tolerance when comparing aspect ratios",
    )

    # ---- validators ----
    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, v: Any) -> Any:
        if isinstance(v, str):
            return ContentMode.parse(v)
        return v

    # ---- convenience methods ----
    @property
    def canvas_size(self) -> Size:
        """Canvas dimensions as a Size."""
        return Size(self.canvas_width, self.canvas_height)

    @classmethod
    def load(cls, path: Path | None = None) -> FitSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated FitSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("IMAGEMODE_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from IMAGEMODE_CONFIG not found: {path}")
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create imagemode.yaml or set IMAGEMODE_CONFIG."
                    )

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
