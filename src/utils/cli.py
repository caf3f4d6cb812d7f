from __future__ import annotations

import argparse
import json
from typing import Optional, Sequence

from src.core.config import SETTINGS
from src.utils.logging import setup_logging
from src.utils.population_engine import run_projection
from src.utils.presentation import table_frame
from src.utils.summary import format_report_md, sustainability_report
from src.utils.validators import InvalidParameterError, check_policy_bounds, parse_parameters

EXIT_STABLE = 0
EXIT_CRITICAL = 1
EXIT_INVALID = 2


def cmd_project(args: argparse.Namespace) -> int:
    raw = {
        "initial_stock": args.initial_stock,
        "growth_rate": args.growth_rate,
        "catch_plan": args.catch_plan,
        "min_stock": args.min_stock,
    }
    try:
        params = parse_parameters({k: v for k, v in raw.items() if v is not None}, defaults=SETTINGS.defaults)
    except InvalidParameterError as e:
        print(f"ERROR: {e}")
        return EXIT_INVALID

    proj = run_projection(params, years=args.years)
    report = sustainability_report(proj)

    if args.json:
        out = proj.model_dump(by_alias=True)
        out["report"] = report.model_dump()
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        for w in check_policy_bounds(params, SETTINGS.bounds).warnings:
            print(f"WARN: {w.message}")
        df = table_frame(proj)
        df["critical"] = df["critical"].map(lambda c: "!" if c else "")
        print(df.to_string(index=False))
        print()
        print(format_report_md(report))

    return EXIT_STABLE if proj.stable else EXIT_CRITICAL


def main(argv: Optional[Sequence[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="population_cli", description="Harvested population projection")
    p.add_argument("--log_level", default=SETTINGS.log_level)
    sub = p.add_subparsers(dest="cmd", required=True)

    v = sub.add_parser("project", help="Print the year-by-year projection and sustainability alert")
    # kept as text so that parsing goes through the same validator as the page
    v.add_argument("--initial_stock", default=None)
    v.add_argument("--growth_rate", default=None)
    v.add_argument("--catch_plan", default=None)
    v.add_argument("--min_stock", default=None)
    v.add_argument("--years", type=int, default=SETTINGS.horizon_years)
    v.add_argument("--json", action="store_true")
    v.set_defaults(func=cmd_project)

    args = p.parse_args(argv)
    setup_logging(args.log_level)
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
