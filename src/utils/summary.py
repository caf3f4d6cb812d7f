from __future__ import annotations

from src.core.schemas import Projection, SustainabilityReport


def _years_word(n: int) -> str:
    # genitive after "в течение": 1 года, 0/2/5 лет
    return "года" if n == 1 else "лет"


def _fmt_tons(x: float) -> str:
    return f"{x:g}"


def sustainability_report(projection: Projection) -> SustainabilityReport:
    min_stock = projection.parameters.min_stock

    if projection.critical_year > 0:
        k = projection.safe_years
        message = (
            f"Внимание! На {projection.critical_year}-й год популяция опускается ниже "
            f"критического минимума ({_fmt_tons(min_stock)} т). "
            f"Можно безопасно вести отлов в течение {k} {_years_word(k)}."
        )
        level = "warning"
    else:
        message = "Популяция устойчива! При текущих параметрах отлов можно вести неограниченно долго."
        level = "ok"

    return SustainabilityReport(
        critical_year=projection.critical_year,
        safe_years=projection.safe_years,
        min_stock=min_stock,
        stable=projection.stable,
        level=level,
        message=message,
    )


def format_report_md(report: SustainabilityReport) -> str:
    icon = "⚠️" if report.level == "warning" else "✅"
    lines = [f"{icon} **{report.message}**"]
    if report.level == "warning":
        lines.append("")
        lines.append(f"- Критический год: **{report.critical_year}**")
        lines.append(f"- Безопасных лет: **{report.safe_years}**")
    return "\n".join(lines)
