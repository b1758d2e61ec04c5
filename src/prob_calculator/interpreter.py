"""Turn a raw HTTP outcome into the form's outcome state."""

import json
import logging
import math
from typing import Any, Optional

from .calc_types import Failure, HttpOutcome, OutcomeState, Success

LOG = logging.getLogger(__name__)

CONNECTION_MESSAGE = "Could not connect to the backend API. Check if the service is running."
MALFORMED_MESSAGE = "Received a malformed response from the backend API."


def _parse_json(body: str) -> Optional[Any]:
    try:
        return json.loads(body)
    except (TypeError, ValueError):
        return None


def _as_number(value: Any) -> Optional[float]:
    # bool is an int subclass but never a probability
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    # json.loads accepts NaN and Infinity
    return number if math.isfinite(number) else None


def interpret(outcome: HttpOutcome) -> OutcomeState:
    """
    Map a transport outcome to Success or Failure.

    Args:
        outcome: Status and body of the response, or a transport error

    Returns:
        Success(result) for a 2xx response carrying a numeric "result",
        otherwise Failure with a message suitable for display
    """
    if outcome.transport_error is not None:
        return Failure(CONNECTION_MESSAGE)

    payload = _parse_json(outcome.body)

    if not outcome.ok:
        if isinstance(payload, dict) and payload.get("error"):
            return Failure(str(payload["error"]))
        return Failure(f"Calculation failed with status: {outcome.status_code}")

    if not isinstance(payload, dict):
        LOG.warning("Unparsable response body with status %s", outcome.status_code)
        return Failure(MALFORMED_MESSAGE)

    result = _as_number(payload.get("result"))
    if result is None:
        LOG.warning("Response has no numeric result: %r", payload)
        return Failure(MALFORMED_MESSAGE)

    return Success(result)
