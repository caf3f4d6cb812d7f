from __future__ import annotations

from typing import Any, Dict, Optional

from src.core.config import SETTINGS
from src.core.schemas import ErrorEnvelope
from src.utils.cache import ProjectionCache
from src.utils.logging import get_logger
from src.utils.population_engine import run_projection
from src.utils.summary import sustainability_report
from src.utils.validators import InvalidParameterError, check_policy_bounds, parse_parameters

logger = get_logger("projection_tools")

_CACHE = ProjectionCache(max_items=SETTINGS.cache_max_items)


def tool_run_projection(payload: Dict[str, Any], *, cache: Optional[ProjectionCache] = None) -> Dict[str, Any]:
    """
    Dict in, dict out. Keys may be snake_case or camelCase; missing keys take
    the configured defaults. Invalid input comes back as {"error": {...}}.
    """
    try:
        params = parse_parameters(payload or {}, defaults=SETTINGS.defaults)
    except InvalidParameterError as e:
        logger.info(f"invalid_parameter field={e.field} raw={e.raw!r}")
        env = ErrorEnvelope(code="INVALID_INPUT", message=str(e), details={"field": e.field})
        return {"error": env.model_dump()}

    proj = run_projection(params, cache=cache or _CACHE, years=SETTINGS.horizon_years)
    report = sustainability_report(proj)
    policy = check_policy_bounds(params, SETTINGS.bounds)

    out = proj.model_dump(by_alias=True)
    out["report"] = report.model_dump()
    out["warnings"] = [w.message for w in policy.warnings]
    return out
