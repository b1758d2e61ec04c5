"""Probability calculator form: validation, submit lifecycle and service client."""

from .calc_types import (
    Failure,
    HttpOutcome,
    Idle,
    InputState,
    Invalid,
    Loading,
    Operation,
    RequestDescriptor,
    Success,
    Valid,
)
from .config import Settings, load_settings
from .controller import CalculatorFormController, SubmitInProgressError, SubmitTicket
from .formatting import format_result, formula
from .interpreter import interpret
from .request_builder import build_request
from .transport import send_request
from .validation import validate

__all__ = [
    "Operation",
    "InputState",
    "Valid",
    "Invalid",
    "RequestDescriptor",
    "HttpOutcome",
    "Idle",
    "Loading",
    "Success",
    "Failure",
    "Settings",
    "load_settings",
    "CalculatorFormController",
    "SubmitInProgressError",
    "SubmitTicket",
    "format_result",
    "formula",
    "interpret",
    "build_request",
    "send_request",
    "validate",
]
