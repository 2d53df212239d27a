"""Diagnostics attached to a document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


@dataclass
class DiagnosticRange:
    start: int
    end: int


@dataclass
class Diagnostic:
    range: DiagnosticRange
    line: int
    message: str
    severity: Optional[Severity] = None