import pytest

from prob_calculator.config import DEFAULT_API_URL, Settings, load_settings


def test_defaults_when_unset():
    assert load_settings({}) == Settings(api_url=DEFAULT_API_URL, timeout=10.0, verify_tls=True)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PROB_CALCULATOR_API_URL", "http://example.test/api/probabilities/")
    monkeypatch.setenv("PROB_CALCULATOR_TIMEOUT", "2.5")
    monkeypatch.setenv("PROB_CALCULATOR_VERIFY_TLS", "false")

    settings = load_settings()

    assert settings.api_url == "http://example.test/api/probabilities"
    assert settings.timeout == 2.5
    assert settings.verify_tls is False


@pytest.mark.parametrize("value", ["soon", "0", "-3"])
def test_bad_timeout(value):
    with pytest.raises(ValueError, match="PROB_CALCULATOR_TIMEOUT"):
        load_settings({"PROB_CALCULATOR_TIMEOUT": value})
