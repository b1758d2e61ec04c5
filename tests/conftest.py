import json

import pytest

from prob_calculator.calc_types import HttpOutcome
from prob_calculator.config import Settings
from prob_calculator.controller import CalculatorFormController

API_URL = "https://localhost:7001/api/probabilities"


class RecordingSender:
    """Stands in for the HTTP transport and remembers every request."""

    def __init__(self, outcome: HttpOutcome):
        self.outcome = outcome
        self.calls = []

    def __call__(self, request):
        self.calls.append(request)
        return self.outcome


def json_outcome(payload, status_code=200) -> HttpOutcome:
    return HttpOutcome(status_code=status_code, body=json.dumps(payload))


@pytest.fixture
def make_controller():
    def _make(outcome=None):
        sender = RecordingSender(outcome or json_outcome({"result": 0.25}))
        controller = CalculatorFormController(Settings(api_url=API_URL), send=sender)
        return controller, sender

    return _make
