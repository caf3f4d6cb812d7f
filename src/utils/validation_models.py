from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    field: str
    message: str
    value: Optional[float] = None


class ValidationReport(BaseModel):
    """Notes from checking parameters against the page's slider policy. Never blocking."""

    warnings: List[ValidationIssue] = Field(default_factory=list)

    def add_warning(self, field: str, msg: str, value: Optional[float] = None) -> None:
        self.warnings.append(ValidationIssue(field=field, message=msg, value=value))

    def for_field(self, field: str) -> List[ValidationIssue]:
        return [i for i in self.warnings if i.field == field]

    @property
    def clean(self) -> bool:
        return not self.warnings
