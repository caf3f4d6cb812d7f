from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


# -------------------------
# Inputs
# -------------------------

class ModelParameters(BaseModel):
    """
    The four values the user controls on the page.

    No range checks here: slider bounds are UI policy, and the engine is
    total over all real numbers (negative growth, zero stock, catch larger
    than the stock are all valid).
    """

    model_config = ConfigDict(populate_by_name=True)

    initial_stock: float = Field(1000.0, alias="initialStock", description="Stock at year 0, tons.")
    growth_rate: float = Field(12.0, alias="growthRate", description="Annual growth, percent (12 means 12%).")
    catch_plan: float = Field(189.0, alias="catchPlan", description="Tons removed each year after growth.")
    min_stock: float = Field(250.0, alias="minStock", description="Critical minimum, tons.")

    def key(self) -> Tuple[float, float, float]:
        """Memoization key of the recurrence (min_stock does not affect it)."""
        return (self.initial_stock, self.growth_rate, self.catch_plan)


# -------------------------
# Projection
# -------------------------

class YearRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    year: int
    without_catch: float = Field(..., alias="withoutCatch")
    with_catch: float = Field(..., alias="withCatch")
    catch_amount: float = Field(..., alias="catchAmount")


class Projection(BaseModel):
    parameters: ModelParameters
    records: List[YearRecord]
    critical_year: int = Field(0, alias="criticalYear", description="First year below min_stock, 0 if none.")
    safe_years: int = Field(..., alias="safeYears")
    stable: bool = Field(..., description="True when no critical year exists within the horizon.")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def horizon(self) -> int:
        return len(self.records)


class TableRow(BaseModel):
    year: int
    growth_label: str
    without_catch: Optional[float] = None
    catch_amount: Optional[float] = None
    with_catch: float
    is_critical: bool = False


class SustainabilityReport(BaseModel):
    critical_year: int
    safe_years: int
    min_stock: float
    stable: bool
    level: Literal["ok", "warning"]
    message: str


# -------------------------
# Errors
# -------------------------

class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
