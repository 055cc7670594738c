from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Outcome(str, Enum):
    passed = "pass"
    duplicate_key = "duplicate_key"
    encoding_ambiguity = "encoding_ambiguity"
    malformed = "malformed"


class EncodingVerdict(BaseModel):
    ascii: bool
    utf_8: bool
    iso_8859_1: bool
    detected: Optional[str] = Field(default=None, examples=["utf_8"])

    @property
    def ambiguous(self) -> bool:
        return not self.ascii and self.utf_8 and self.iso_8859_1


class ValidationResult(BaseModel):
    resource: str
    outcome: Outcome
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.passed


class ValidationReport(BaseModel):
    result: ValidationResult
    encoding: EncodingVerdict
    encoding_checked: bool
    entries: Optional[int] = None


class SuiteReport(BaseModel):
    root: str
    total: int = 0
    passed: int = 0
    failed: int = 0
    results: List[ValidationResult] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
