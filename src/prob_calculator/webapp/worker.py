"""
Background execution of calculation requests for the web form.

The HTTP handler returns as soon as the controller is Loading; the request to
the calculation service runs on a daemon thread and applies its outcome when it
finishes.
"""

import logging
import threading

from ..controller import CalculatorFormController, SubmitTicket

LOG = logging.getLogger(__name__)


def dispatch(controller: CalculatorFormController, ticket: SubmitTicket) -> threading.Thread:
    """
    Start sending a submit ticket in a background thread.

    Args:
        controller: Controller that issued the ticket
        ticket: Ticket returned by begin_submit

    Returns:
        The started thread
    """
    thread = threading.Thread(
        target=_run_submission,
        args=(controller, ticket),
        name=f"prob-calc-submit-{ticket.generation}",
        daemon=True,
    )
    thread.start()
    return thread


def _run_submission(controller: CalculatorFormController, ticket: SubmitTicket):
    """Execute one submit in a background thread."""
    outcome = controller.execute(ticket)
    LOG.debug("Background submit %d done, form is %s", ticket.generation, outcome.phase)
