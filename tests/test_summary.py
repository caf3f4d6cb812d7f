from src.core.schemas import ModelParameters
from src.utils.population_engine import run_projection
from src.utils.summary import format_report_md, sustainability_report


def _report(**kw):
    return sustainability_report(run_projection(ModelParameters(**kw)))


def test_critical_message():
    rep = _report(initial_stock=1000, growth_rate=12, catch_plan=189, min_stock=250)
    assert rep.level == "warning"
    assert rep.critical_year == 8
    assert rep.safe_years == 7
    assert rep.stable is False
    assert "На 8-й год" in rep.message
    assert "(250 т)" in rep.message
    assert "в течение 7 лет" in rep.message


def test_one_safe_year_uses_singular():
    # year 1: 931 >= 900, year 2: 853.7 < 900
    rep = _report(initial_stock=1000, growth_rate=12, catch_plan=189, min_stock=900)
    assert rep.critical_year == 2
    assert "в течение 1 года" in rep.message


def test_zero_safe_years():
    rep = _report(initial_stock=100, growth_rate=1, catch_plan=500, min_stock=100)
    assert rep.critical_year == 1
    assert rep.safe_years == 0
    assert "в течение 0 лет" in rep.message


def test_stable_message():
    rep = _report(initial_stock=1000, growth_rate=12, catch_plan=0, min_stock=250)
    assert rep.level == "ok"
    assert rep.stable is True
    assert rep.safe_years == 20
    assert rep.message.startswith("Популяция устойчива!")


def test_format_report_md():
    md = format_report_md(_report(initial_stock=1000, growth_rate=12, catch_plan=189, min_stock=250))
    assert "Критический год: **8**" in md
    assert "Безопасных лет: **7**" in md

    md_ok = format_report_md(_report(initial_stock=1000, growth_rate=12, catch_plan=0, min_stock=250))
    assert "Критический год" not in md_ok
