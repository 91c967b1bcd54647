"""Settings schema and load/save helpers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .logging_setup import config_root


CONFIG_VERSION = 1


@dataclass
class WindowConfig:
    title: str = "Test - ESC to exit"
    width: int = 500
    height: int = 500


@dataclass
class FrameConfig:
    target_fps: int = 60
    phase_divisor_ms: int = 90


@dataclass
class LoggingConfig:
    keep_files: int = 7
    console: bool = True
    level: str = "INFO"


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    window: WindowConfig = field(default_factory=WindowConfig)
    frame: FrameConfig = field(default_factory=FrameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _normalize_window(cfg: AppConfig) -> None:
    defaults = WindowConfig()
    cfg.window.width = max(100, min(4096, _as_int(cfg.window.width, defaults.width)))
    cfg.window.height = max(100, min(4096, _as_int(cfg.window.height, defaults.height)))
    if not isinstance(cfg.window.title, str):
        cfg.window.title = defaults.title


def _normalize_frame(cfg: AppConfig) -> None:
    defaults = FrameConfig()
    cfg.frame.target_fps = max(1, min(240, _as_int(cfg.frame.target_fps, defaults.target_fps)))
    cfg.frame.phase_divisor_ms = max(1, _as_int(cfg.frame.phase_divisor_ms, defaults.phase_divisor_ms))


def _normalize_logging(cfg: AppConfig) -> None:
    cfg.logging.keep_files = max(2, _as_int(cfg.logging.keep_files, LoggingConfig().keep_files))
    cfg.logging.console = bool(cfg.logging.console)
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL") else "INFO"


def normalize(cfg: AppConfig) -> AppConfig:
    _normalize_window(cfg)
    _normalize_frame(cfg)
    _normalize_logging(cfg)
    return cfg


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=_as_int(raw.get("config_version"), CONFIG_VERSION),
        window=_merge(WindowConfig, raw.get("window", {})),
        frame=_merge(FrameConfig, raw.get("frame", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )
    return normalize(cfg)


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
