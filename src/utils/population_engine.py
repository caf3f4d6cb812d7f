"""
Harvested population projection.

Year-by-year recurrence over a fixed horizon:

    without_catch[y] = with_catch[y-1] * (1 + growth_rate / 100)
    with_catch[y]    = max(0, without_catch[y] - catch_plan)
    with_catch[0]    = initial_stock

Records hold values rounded to one decimal; the unrounded with_catch is what
feeds the next year. The whole thing is pure and cheap (O(horizon)), so the
page recomputes it on every parameter change.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence

from src.core.schemas import ModelParameters, Projection, YearRecord
from src.utils.cache import ProjectionCache
from src.utils.logging import get_logger

logger = get_logger("population_engine")

HORIZON_YEARS = 20


def round_display(x: float, decimals: int = 1) -> float:
    """Round half toward +inf (same as Math.round(x * 10) / 10). NaN/inf pass through."""
    if not math.isfinite(x):
        return x
    m = 10 ** decimals
    scaled = x * m
    # near float max the scaled value overflows; such x has no fraction left
    if not math.isfinite(scaled):
        return x
    return math.floor(scaled + 0.5) / m


def _clamp_at_zero(x: float) -> float:
    # max(0.0, nan) would return 0.0; keep NaN visible instead
    if math.isnan(x):
        return x
    return max(0.0, x)


def compute_projection(
    initial_stock: float,
    growth_rate: float,
    catch_plan: float,
    *,
    years: int = HORIZON_YEARS,
) -> List[YearRecord]:
    records: List[YearRecord] = []
    current = float(initial_stock)
    factor = 1.0 + float(growth_rate) / 100.0
    catch = float(catch_plan)

    for year in range(1, years + 1):
        without_catch = current * factor
        with_catch = _clamp_at_zero(without_catch - catch)

        records.append(
            YearRecord(
                year=year,
                without_catch=round_display(without_catch),
                with_catch=round_display(with_catch),
                catch_amount=catch,
            )
        )

        current = with_catch

    return records


def find_critical_year(records: Iterable[YearRecord], min_stock: float) -> int:
    """1-based year of the first record strictly below min_stock, or 0."""
    for idx, rec in enumerate(records, start=1):
        if rec.with_catch < min_stock:
            return idx
    return 0


def safe_years(critical_year: int, horizon: int = HORIZON_YEARS) -> int:
    return critical_year - 1 if critical_year > 0 else horizon


def is_critical(record: YearRecord, min_stock: float) -> bool:
    return record.with_catch < min_stock


def run_projection(
    params: ModelParameters,
    *,
    cache: Optional[ProjectionCache] = None,
    years: int = HORIZON_YEARS,
) -> Projection:
    """
    Full projection for one parameter set: records, critical year and safe years.

    The records depend only on (initial_stock, growth_rate, catch_plan) and are
    memoized on that tuple when a cache is given; the critical-year analysis
    is cheap and always redone against the current min_stock.
    """

    def _compute() -> Sequence[YearRecord]:
        logger.debug(
            f"projection_compute initial_stock={params.initial_stock} "
            f"growth_rate={params.growth_rate} catch_plan={params.catch_plan} years={years}"
        )
        return tuple(compute_projection(params.initial_stock, params.growth_rate, params.catch_plan, years=years))

    if cache is not None:
        records = cache.get_or_compute((*params.key(), years), _compute)
    else:
        records = _compute()

    critical = find_critical_year(records, params.min_stock)
    return Projection(
        parameters=params,
        records=list(records),
        critical_year=critical,
        safe_years=safe_years(critical, horizon=years),
        stable=critical == 0,
    )
