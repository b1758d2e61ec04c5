import pytest
from click.testing import CliRunner

from prob_calculator import cli
from prob_calculator import controller as controller_module
from prob_calculator.calc_types import HttpOutcome

from conftest import json_outcome


@pytest.fixture
def sent(monkeypatch):
    for name in ("PROB_CALCULATOR_API_URL", "PROB_CALCULATOR_TIMEOUT", "PROB_CALCULATOR_VERIFY_TLS"):
        monkeypatch.delenv(name, raising=False)
    calls = []
    responses = {"outcome": json_outcome({"result": 0.25})}

    def _fake_send(request, timeout, verify):
        calls.append((request, timeout, verify))
        return responses["outcome"]

    monkeypatch.setattr(controller_module, "send_request", _fake_send)
    return calls, responses


def test_calculate_prints_formula_and_result(sent):
    calls, _ = sent
    result = CliRunner().invoke(cli.main, ["calculate", "-a", "0.5", "-b", "0.5"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["P(A) * P(B) = 0.50 * 0.50", "0.2500"]
    request, timeout, verify = calls[0]
    assert request.url == "https://localhost:7001/api/probabilities/combinedwith"
    assert timeout == 10.0
    assert verify is True


def test_calculate_either_with_overrides(sent):
    calls, responses = sent
    responses["outcome"] = json_outcome({"result": 0.75})
    result = CliRunner().invoke(
        cli.main,
        [
            "calculate", "-a", "0.5", "-b", "0.5", "--operation", "either",
            "--api-url", "http://calc.local/api/probabilities/", "--timeout", "2", "--insecure",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "0.7500" in result.output
    request, timeout, verify = calls[0]
    assert request.url == "http://calc.local/api/probabilities/either"
    assert timeout == 2.0
    assert verify is False


def test_calculate_validation_error_exits_nonzero(sent):
    calls, _ = sent
    result = CliRunner().invoke(cli.main, ["calculate", "-a", "0.5", "-b", "abc"])

    assert result.exit_code == 1
    assert "Error: Probability B must be between 0 and 1." in result.output
    assert calls == []


def test_calculate_unreachable_service(sent):
    _, responses = sent
    responses["outcome"] = HttpOutcome.unreachable("connection refused")
    result = CliRunner().invoke(cli.main, ["calculate", "-a", "0.1", "-b", "0.2"])

    assert result.exit_code == 1
    assert "Could not connect to the backend API" in result.output
