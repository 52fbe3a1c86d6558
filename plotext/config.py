"""
Configuration management.

Supports loading from:
- Environment variables (default)
- YAML config file
"""

import os
import logging
from dataclasses import dataclass, fields
from typing import Optional

from .charts.generator import STYLES
from .charts.themes import THEMES

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Chart rendering configuration"""

    # Image settings
    width: int = 900
    height: int = 600
    dpi: int = 100

    # Chart settings
    theme: str = "light"
    style: str = "candlesticks"
    candle_width: float = 0.6  # Fraction of bar spacing
    ma_window: int = 5

    # Output settings
    output_dir: str = "."

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from PLOTEXT_* environment variables"""
        config = cls(
            width=int(os.getenv("PLOTEXT_WIDTH", "900")),
            height=int(os.getenv("PLOTEXT_HEIGHT", "600")),
            dpi=int(os.getenv("PLOTEXT_DPI", "100")),
            theme=os.getenv("PLOTEXT_THEME", "light"),
            style=os.getenv("PLOTEXT_STYLE", "candlesticks"),
            candle_width=float(os.getenv("PLOTEXT_CANDLE_WIDTH", "0.6")),
            ma_window=int(os.getenv("PLOTEXT_MA_WINDOW", "5")),
            output_dir=os.getenv("PLOTEXT_OUTPUT_DIR", "."),
            log_level=os.getenv("PLOTEXT_LOG_LEVEL", "INFO"),
            log_file=os.getenv("PLOTEXT_LOG_FILE") or None,
        )

        logger.debug(f"Loaded config from environment: {config}")
        return config

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """Load configuration from YAML file"""
        import yaml

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys in {path}: {sorted(unknown)}")

        return cls(**{k: v for k, v in data.items() if k in known})

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if self.width <= 0 or self.height <= 0:
            errors.append("width and height must be positive")

        if self.dpi <= 0:
            errors.append("dpi must be positive")

        if self.theme.lower() not in THEMES:
            errors.append(f"Unknown theme {self.theme!r}, expected one of {sorted(THEMES)}")

        if self.style not in STYLES:
            errors.append(f"Unknown style {self.style!r}, expected one of {list(STYLES)}")

        if not 0 < self.candle_width <= 1:
            errors.append("candle_width must be in (0, 1]")

        if self.ma_window < 1:
            errors.append("ma_window must be at least 1")

        return errors
