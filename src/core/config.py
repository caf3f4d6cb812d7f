from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

import yaml
from dotenv import load_dotenv

PARAMETER_FIELDS: Tuple[str, ...] = ("initial_stock", "growth_rate", "catch_plan", "min_stock")

_DEFAULT_VALUES: Dict[str, float] = {
    "initial_stock": 1000.0,
    "growth_rate": 12.0,
    "catch_plan": 189.0,
    "min_stock": 250.0,
}

# (min, max, step) of the page sliders
_DEFAULT_BOUNDS: Dict[str, Tuple[float, float, float]] = {
    "initial_stock": (100.0, 2000.0, 50.0),
    "growth_rate": (1.0, 30.0, 1.0),
    "catch_plan": (50.0, 500.0, 10.0),
    "min_stock": (100.0, 500.0, 50.0),
}


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    cache_max_items: int

    horizon_years: int
    defaults: Dict[str, float] = field(default_factory=lambda: dict(_DEFAULT_VALUES))
    bounds: Dict[str, Tuple[float, float, float]] = field(default_factory=lambda: dict(_DEFAULT_BOUNDS))


def _deep_get(d: Dict[str, Any], path: str, default=None):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _read_bounds(cfg: Dict[str, Any]) -> Dict[str, Tuple[float, float, float]]:
    out: Dict[str, Tuple[float, float, float]] = {}
    for name, (lo, hi, step) in _DEFAULT_BOUNDS.items():
        b = _deep_get(cfg, f"model.bounds.{name}", {}) or {}
        out[name] = (
            float(b.get("min", lo)),
            float(b.get("max", hi)),
            float(b.get("step", step)),
        )
    return out


def load_settings(config_path: str = "config.yaml") -> Settings:
    """
    Loads config.yaml + overrides from .env/environment variables.
    """
    load_dotenv()  # loads .env into env vars

    cfg: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}

    # Empty env vars count as "not set".
    def _env_or_cfg(key: str, cfg_path: str, default):
        v = os.getenv(key)
        if v is None:
            return _deep_get(cfg, cfg_path, default)
        v = v.strip()
        return _deep_get(cfg, cfg_path, default) if v == "" else v

    env = _env_or_cfg("APP_ENV", "app.env", "dev")
    log_level = str(_env_or_cfg("LOG_LEVEL", "app.log_level", "INFO")).upper()
    cache_max_items = int(_env_or_cfg("CACHE_MAX_ITEMS", "app.cache_max_items", 256))
    horizon_years = int(_env_or_cfg("HORIZON_YEARS", "model.horizon_years", 20))

    defaults = {
        name: float(_deep_get(cfg, f"model.defaults.{name}", value))
        for name, value in _DEFAULT_VALUES.items()
    }

    return Settings(
        env=env,
        log_level=log_level,
        cache_max_items=max(1, cache_max_items),
        horizon_years=horizon_years,
        defaults=defaults,
        bounds=_read_bounds(cfg),
    )


# Optional convenience singleton
SETTINGS = load_settings()
