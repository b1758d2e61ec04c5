"""
=============================================================================
MODULE NAME: calc_types.py
=============================================================================

INPUT FILES:
- None (utility dataclasses only).

OUTPUT FILES:
- None written directly; structures feed the controller and web/CLI surfaces.

VERSION HISTORY:
- v1.0 (2025-10-02): Initial form state, request and outcome dataclasses.

LAST UPDATED: 2025-10-02

NOTES:
- Outcome classes are mutually exclusive by construction: the controller holds
  exactly one of Idle, Loading, Success or Failure at a time.
- Operation values are the capitalized names shown in the form; the URL path
  segment is their lowercase.
=============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Optional, Union


class Operation(str, Enum):
    """Probability combination mode, resolved by the calculation service."""

    COMBINED_WITH = "CombinedWith"
    EITHER = "Either"

    @property
    def path_segment(self) -> str:
        return self.value.lower()

    @classmethod
    def parse(cls, name: Union[str, "Operation"]) -> "Operation":
        """
        Look up an operation by its display name, case-insensitively.

        Args:
            name: "CombinedWith", "Either" (any casing) or an Operation

        Returns:
            The matching Operation

        Raises:
            ValueError: If the name matches no operation
        """
        if isinstance(name, Operation):
            return name
        for op in cls:
            if op.value.lower() == str(name).strip().lower():
                return op
        raise ValueError(f"Unknown operation: {name}")


DEFAULT_OPERATION = Operation.COMBINED_WITH


@dataclass(slots=True, frozen=True)
class InputState:
    """Raw text of both probability fields plus the selected operation."""

    probability_a_text: str = ""
    probability_b_text: str = ""
    operation: Operation = DEFAULT_OPERATION


@dataclass(slots=True, frozen=True)
class Valid:
    is_valid: ClassVar[bool] = True


@dataclass(slots=True, frozen=True)
class Invalid:
    message: str
    is_valid: ClassVar[bool] = False


ValidationResult = Union[Valid, Invalid]


@dataclass(slots=True, frozen=True)
class RequestDescriptor:
    """Everything needed to issue one calculation request."""

    url: str
    body: Dict[str, float]
    method: str = "POST"
    headers: Dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )


@dataclass(slots=True, frozen=True)
class HttpOutcome:
    """What came back from the wire: a status and body, or a transport error."""

    status_code: Optional[int] = None
    body: str = ""
    transport_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300

    @classmethod
    def unreachable(cls, reason: str) -> "HttpOutcome":
        return cls(transport_error=reason)


@dataclass(slots=True, frozen=True)
class Idle:
    phase: ClassVar[str] = "idle"


@dataclass(slots=True, frozen=True)
class Loading:
    phase: ClassVar[str] = "loading"


@dataclass(slots=True, frozen=True)
class Success:
    result: float
    phase: ClassVar[str] = "success"


@dataclass(slots=True, frozen=True)
class Failure:
    message: str
    phase: ClassVar[str] = "failure"


OutcomeState = Union[Idle, Loading, Success, Failure]


__all__ = [
    "Operation",
    "DEFAULT_OPERATION",
    "InputState",
    "Valid",
    "Invalid",
    "ValidationResult",
    "RequestDescriptor",
    "HttpOutcome",
    "Idle",
    "Loading",
    "Success",
    "Failure",
    "OutcomeState",
]
