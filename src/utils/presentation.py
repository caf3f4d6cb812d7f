"""
Adapters from a Projection to what the chart and the table draw.

Series keys (withoutCatch / withCatch) match the record aliases so the same
names appear in the chart legend data, the JSON output and the table.
"""

from __future__ import annotations

from typing import List

import pandas as pd
import plotly.express as px

from src.core.schemas import Projection, TableRow
from src.utils.population_engine import is_critical

SERIES_LABELS = {
    "withoutCatch": "Без отлова",
    "withCatch": "С отловом",
}

SERIES_COLORS = {
    "Без отлова": "#8B5CF6",
    "С отловом": "#0EA5E9",
}

THRESHOLD_COLOR = "#F97316"

YEAR_ZERO_STYLE = "background-color: #eff6ff; font-weight: 600;"
CRITICAL_STYLE = "background-color: #fee2e2; color: #b91c1c; font-weight: 600;"
STRIPE_STYLE = "background-color: #f9fafb;"

TABLE_COLUMNS = ["Год", "Прирост", "Кол-во без отлова (т)", "Отлов (т)", "Кол-во с отловом (т)"]


def _fmt_pct(x: float) -> str:
    return f"{x:g}%"


def chart_frame(projection: Projection) -> pd.DataFrame:
    rows = []
    for rec in projection.records:
        dumped = rec.model_dump(by_alias=True)
        for key, label in SERIES_LABELS.items():
            rows.append({"year": rec.year, "series": key, "label": label, "value": dumped[key]})
    return pd.DataFrame(rows, columns=["year", "series", "label", "value"])


def table_rows(projection: Projection) -> List[TableRow]:
    params = projection.parameters
    rows = [
        TableRow(
            year=0,
            growth_label="-",
            without_catch=params.initial_stock,
            catch_amount=None,
            with_catch=params.initial_stock,
            is_critical=False,
        )
    ]
    for rec in projection.records:
        rows.append(
            TableRow(
                year=rec.year,
                growth_label=_fmt_pct(params.growth_rate),
                without_catch=rec.without_catch,
                catch_amount=rec.catch_amount,
                with_catch=rec.with_catch,
                is_critical=is_critical(rec, params.min_stock),
            )
        )
    return rows


def table_frame(projection: Projection) -> pd.DataFrame:
    """Display frame; the last column `critical` drives row highlighting and is hidden on the page."""
    growth_header = f"Прирост {_fmt_pct(projection.parameters.growth_rate)}"
    data = []
    for r in table_rows(projection):
        data.append(
            [
                r.year,
                r.growth_label,
                r.without_catch,
                "-" if r.catch_amount is None else r.catch_amount,
                r.with_catch,
                r.is_critical,
            ]
        )
    columns = [TABLE_COLUMNS[0], growth_header] + TABLE_COLUMNS[2:] + ["critical"]
    return pd.DataFrame(data, columns=columns)


def row_style(position: int, critical: bool) -> str:
    """CSS for one table row: year 0 row, critical rows, then alternating stripes."""
    if position == 0:
        return YEAR_ZERO_STYLE
    if critical:
        return CRITICAL_STYLE
    # records start at position 1; every other one, starting with the first, is shaded
    return STRIPE_STYLE if (position - 1) % 2 == 0 else ""


def build_figure(projection: Projection, *, height: int = 420):
    df = chart_frame(projection)
    fig = px.line(
        df,
        x="year",
        y="value",
        color="label",
        color_discrete_map=SERIES_COLORS,
        labels={"year": "Год", "value": "Запас рыбы (т)", "label": ""},
        markers=True,
    )
    fig.update_traces(fill="tozeroy")
    fig.add_hline(
        y=projection.parameters.min_stock,
        line_dash="dash",
        line_color=THRESHOLD_COLOR,
        line_width=2,
        annotation_text="Критический минимум",
        annotation_font_color=THRESHOLD_COLOR,
    )
    fig.update_layout(height=height, legend_title_text="", hovermode="x unified")
    return fig
