"""
Calculator form controller.

Owns the form's input and outcome state and drives the submit lifecycle:
- Idle -> Loading -> Success | Failure, with validation failures short-circuiting
- At most one request in flight; submitting while loading is refused
- Reset and each new submit advance a generation counter so that a response
  belonging to an older submit is discarded instead of applied
"""

import logging
import threading
from dataclasses import dataclass, replace
from functools import partial
from typing import Callable, Dict, Optional, Union

from .calc_types import (
    Failure,
    HttpOutcome,
    Idle,
    InputState,
    Loading,
    Operation,
    OutcomeState,
    RequestDescriptor,
    Success,
)
from .config import Settings, load_settings
from .formatting import format_result, formula
from .interpreter import interpret
from .request_builder import build_request
from .transport import send_request
from .validation import is_valid_probability, parse_probability, validate

LOG = logging.getLogger(__name__)

Sender = Callable[[RequestDescriptor], HttpOutcome]


class SubmitInProgressError(RuntimeError):
    """Raised when a submit is attempted while a request is still outstanding."""


@dataclass(slots=True, frozen=True)
class SubmitTicket:
    """A validated submit waiting for its response."""

    generation: int
    request: RequestDescriptor
    operation: Operation
    probability_a: float
    probability_b: float


class CalculatorFormController:
    """Form state plus the transitions the UI triggers."""

    def __init__(self, settings: Optional[Settings] = None, send: Optional[Sender] = None):
        """
        Initialize the controller with empty inputs and an idle outcome.

        Args:
            settings: Service settings (read from the environment when omitted)
            send: Callable issuing a RequestDescriptor; defaults to an HTTP POST
        """
        self.settings = settings or load_settings()
        self._send = send or partial(
            send_request,
            timeout=self.settings.timeout,
            verify=self.settings.verify_tls,
        )
        self._lock = threading.Lock()
        self._generation = 0
        self.reset()

    @property
    def inputs(self) -> InputState:
        with self._lock:
            return self._inputs

    @property
    def outcome(self) -> OutcomeState:
        with self._lock:
            return self._outcome

    @property
    def is_loading(self) -> bool:
        return isinstance(self.outcome, Loading)

    def reset(self):
        """Clear both fields, restore the default operation and go idle."""
        with self._lock:
            self._generation += 1
            self._inputs = InputState()
            self._outcome = Idle()
            self._submitted: Optional[SubmitTicket] = None

    def set_probability_a(self, text: str):
        with self._lock:
            self._inputs = replace(self._inputs, probability_a_text=text)

    def set_probability_b(self, text: str):
        with self._lock:
            self._inputs = replace(self._inputs, probability_b_text=text)

    def set_operation(self, operation: Union[Operation, str]):
        """
        Select the combination mode.

        Args:
            operation: Operation or its display name

        Raises:
            ValueError: If the name matches no operation
        """
        op = Operation.parse(operation)
        with self._lock:
            self._inputs = replace(self._inputs, operation=op)

    def begin_submit(self) -> Optional[SubmitTicket]:
        """
        Validate the inputs and, if they pass, move to Loading.

        Returns:
            A ticket for the request to send, or None when validation failed
            (the outcome is then Failure with the validation message)

        Raises:
            SubmitInProgressError: If a request is already outstanding
        """
        with self._lock:
            if isinstance(self._outcome, Loading):
                raise SubmitInProgressError("A calculation is already in progress")

            self._outcome = Idle()
            self._submitted = None

            inputs = self._inputs
            check = validate(inputs.probability_a_text, inputs.probability_b_text)
            if not check.is_valid:
                LOG.info("Submit rejected: %s", check.message)
                self._outcome = Failure(check.message)
                return None

            probability_a = parse_probability(inputs.probability_a_text)
            probability_b = parse_probability(inputs.probability_b_text)
            self._generation += 1
            ticket = SubmitTicket(
                generation=self._generation,
                request=build_request(
                    self.settings.api_url, inputs.operation, probability_a, probability_b
                ),
                operation=inputs.operation,
                probability_a=probability_a,
                probability_b=probability_b,
            )
            self._outcome = Loading()

        LOG.info("Submitting %s (generation %d)", ticket.request.url, ticket.generation)
        return ticket

    def complete(self, ticket: SubmitTicket, http_outcome: HttpOutcome) -> bool:
        """
        Apply a response to the form if it belongs to the current submit.

        Args:
            ticket: Ticket returned by begin_submit
            http_outcome: What the transport returned

        Returns:
            True if the outcome was applied, False if the ticket was stale
        """
        outcome = interpret(http_outcome)
        with self._lock:
            if ticket.generation != self._generation or not isinstance(self._outcome, Loading):
                LOG.info("Discarding response for stale generation %d", ticket.generation)
                return False
            self._outcome = outcome
            if isinstance(outcome, Success):
                self._submitted = ticket

        LOG.info("Generation %d finished as %s", ticket.generation, outcome.phase)
        return True

    def execute(self, ticket: SubmitTicket) -> OutcomeState:
        """Send the ticket's request and apply the response."""
        try:
            http_outcome = self._send(ticket.request)
        except Exception as e:
            LOG.exception("Sending %s raised", ticket.request.url)
            http_outcome = HttpOutcome.unreachable(str(e))
        self.complete(ticket, http_outcome)
        return self.outcome

    def submit(self) -> OutcomeState:
        """Validate, send and interpret in one blocking call."""
        ticket = self.begin_submit()
        if ticket is None:
            return self.outcome
        return self.execute(ticket)

    def snapshot(self) -> Dict:
        """
        Describe the current state for rendering.

        Returns:
            Dict with the field texts, operation, outcome phase, error message,
            and (on success only) the result, formatted result and formula
        """
        with self._lock:
            inputs = self._inputs
            outcome = self._outcome
            submitted = self._submitted

        state = {
            "probability_a": inputs.probability_a_text,
            "probability_b": inputs.probability_b_text,
            "probability_a_invalid": _flag_invalid(inputs.probability_a_text),
            "probability_b_invalid": _flag_invalid(inputs.probability_b_text),
            "operation": inputs.operation.value,
            "state": outcome.phase,
            "loading": isinstance(outcome, Loading),
            "error": outcome.message if isinstance(outcome, Failure) else None,
            "result": None,
            "formatted_result": None,
            "formula": None,
        }
        if isinstance(outcome, Success) and submitted is not None:
            state["result"] = outcome.result
            state["formatted_result"] = format_result(outcome.result)
            state["formula"] = formula(
                submitted.operation, submitted.probability_a, submitted.probability_b
            )
        return state


def _flag_invalid(text: str) -> bool:
    return text != "" and not is_valid_probability(text)
