from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Tuple

from src.core.config import PARAMETER_FIELDS
from src.core.schemas import ModelParameters
from src.utils.validation_models import ValidationReport

FIELD_LABELS: Dict[str, str] = {
    "initial_stock": "Запас рыбы (т)",
    "growth_rate": "Ежегодный прирост (%)",
    "catch_plan": "План отлова (т)",
    "min_stock": "Критический минимум (т)",
}

# camelCase names used by the chart/table payloads
FIELD_ALIASES: Dict[str, str] = {
    "initialStock": "initial_stock",
    "growthRate": "growth_rate",
    "catchPlan": "catch_plan",
    "minStock": "min_stock",
}


class InvalidParameterError(ValueError):
    def __init__(self, field: str, raw: Any, reason: str) -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        label = FIELD_LABELS.get(field, field)
        super().__init__(f"{label}: {reason} ({raw!r})")


def parse_number(raw: Any, field: str) -> float:
    """
    Parse one user-entered value.

    Accepts numbers and numeric text ("1000", " 12.5 ", "12,5"). Anything that
    does not parse to a finite number raises InvalidParameterError rather than
    leaking NaN into the projection.
    """
    if isinstance(raw, bool):
        raise InvalidParameterError(field, raw, "ожидается число")

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw if raw is not None else "").strip().replace("\u00a0", "").replace(" ", "")
        if not text:
            raise InvalidParameterError(field, raw, "значение не задано")
        try:
            value = float(text.replace(",", "."))
        except ValueError:
            raise InvalidParameterError(field, raw, "ожидается число") from None

    if not math.isfinite(value):
        raise InvalidParameterError(field, raw, "ожидается конечное число")
    return value


def parse_parameters(raw: Mapping[str, Any], defaults: Mapping[str, float] | None = None) -> ModelParameters:
    """Build ModelParameters from snake_case or camelCase keys; missing keys fall back to defaults."""
    data: Dict[str, Any] = {}
    for key, value in (raw or {}).items():
        data[FIELD_ALIASES.get(key, key)] = value

    values: Dict[str, float] = {}
    for name in PARAMETER_FIELDS:
        if name in data:
            values[name] = parse_number(data[name], name)
        elif defaults is not None and name in defaults:
            values[name] = float(defaults[name])
        else:
            raise InvalidParameterError(name, None, "значение не задано")

    return ModelParameters(**values)


def check_policy_bounds(
    params: ModelParameters,
    bounds: Mapping[str, Tuple[float, float, float]],
) -> ValidationReport:
    """
    Compare parameters with the slider ranges of the page.

    Out-of-range values are reported as warnings only; the projection is
    defined for any real input.
    """
    report = ValidationReport()
    for name in PARAMETER_FIELDS:
        if name not in bounds:
            continue
        lo, hi, _step = bounds[name]
        value = float(getattr(params, name))
        if value < lo or value > hi:
            report.add_warning(
                name,
                f"{FIELD_LABELS[name]}: {value:g} вне диапазона ползунка [{lo:g}, {hi:g}]",
                value=value,
            )
    return report
