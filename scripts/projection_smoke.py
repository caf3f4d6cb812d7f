from __future__ import annotations

import sys
from pathlib import Path

# Ensure repo root is on sys.path even when running from scripts/
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.tools.projection_tools import tool_run_projection


def main():
    cases = [
        {"initialStock": 1000, "growthRate": 12, "catchPlan": 189, "minStock": 250},
        {"initialStock": 1000, "growthRate": 12, "catchPlan": 0, "minStock": 250},
        {"initialStock": 100, "growthRate": 1, "catchPlan": 500, "minStock": 100},
        {"initialStock": "abc"},
    ]
    for payload in cases:
        out = tool_run_projection(payload)
        if "error" in out:
            print("Error:", out["error"]["code"], out["error"]["message"])
            continue
        last = out["records"][-1]
        print("Params:", out["parameters"])
        print("Year 20 with catch:", last["withCatch"])
        print("Critical year:", out["criticalYear"], "safe years:", out["safeYears"])
        print("Report:", out["report"]["message"])
        for w in out["warnings"]:
            print("Warning:", w)
        print()


if __name__ == "__main__":
    main()
