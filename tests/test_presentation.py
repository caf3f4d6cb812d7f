from src.core.schemas import ModelParameters
from src.utils.population_engine import run_projection
from src.utils.presentation import (
    CRITICAL_STYLE,
    STRIPE_STYLE,
    YEAR_ZERO_STYLE,
    build_figure,
    chart_frame,
    row_style,
    table_frame,
    table_rows,
)


def _proj(**kw):
    base = dict(initial_stock=1000, growth_rate=12, catch_plan=189, min_stock=250)
    base.update(kw)
    return run_projection(ModelParameters(**base))


def test_chart_frame_has_two_series():
    df = chart_frame(_proj())
    assert len(df) == 40
    assert set(df["series"]) == {"withoutCatch", "withCatch"}
    year1 = df[df["year"] == 1].set_index("series")["value"]
    assert year1["withoutCatch"] == 1120.0
    assert year1["withCatch"] == 931.0


def test_table_rows_year_zero_and_flags():
    rows = table_rows(_proj())
    assert len(rows) == 21
    zero = rows[0]
    assert zero.year == 0
    assert zero.with_catch == 1000
    assert zero.without_catch == 1000
    assert zero.catch_amount is None
    assert zero.growth_label == "-"
    assert zero.is_critical is False

    assert [r.year for r in rows[1:]] == list(range(1, 21))
    assert rows[1].growth_label == "12%"
    flagged = [r.year for r in rows if r.is_critical]
    assert flagged == list(range(8, 21))


def test_year_zero_not_flagged_even_below_minimum():
    rows = table_rows(_proj(initial_stock=100, min_stock=500))
    assert rows[0].is_critical is False
    assert rows[1].is_critical is True


def test_table_frame_columns():
    df = table_frame(_proj())
    assert list(df.columns) == [
        "Год",
        "Прирост 12%",
        "Кол-во без отлова (т)",
        "Отлов (т)",
        "Кол-во с отловом (т)",
        "critical",
    ]
    assert df.iloc[0]["Отлов (т)"] == "-"
    assert df.iloc[1]["Отлов (т)"] == 189
    assert int(df["critical"].sum()) == 13


def test_build_figure_threshold_line():
    fig = build_figure(_proj(min_stock=300))
    assert len(fig.data) == 2
    assert {t.name for t in fig.data} == {"Без отлова", "С отловом"}
    assert all(t.fill == "tozeroy" for t in fig.data)
    assert len(fig.layout.shapes) == 1
    assert fig.layout.shapes[0].y0 == 300


def test_row_style_year_zero_critical_and_stripes():
    df = table_frame(_proj())
    styles = [row_style(i, bool(c)) for i, c in enumerate(df["critical"])]
    assert styles[0] == YEAR_ZERO_STYLE
    # years 1..7 are safe and alternate, starting shaded
    assert styles[1:8] == [STRIPE_STYLE, "", STRIPE_STYLE, "", STRIPE_STYLE, "", STRIPE_STYLE]
    assert all(s == CRITICAL_STYLE for s in styles[8:])


def test_row_style_year_zero_wins_over_critical():
    assert row_style(0, True) == YEAR_ZERO_STYLE
