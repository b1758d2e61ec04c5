import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_URL = "https://localhost:7001/api/probabilities"
DEFAULT_TIMEOUT = 10.0

API_URL_ENV = "PROB_CALCULATOR_API_URL"
TIMEOUT_ENV = "PROB_CALCULATOR_TIMEOUT"
VERIFY_TLS_ENV = "PROB_CALCULATOR_VERIFY_TLS"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(slots=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    verify_tls: bool = True


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read calculator settings from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings with the base URL stripped of any trailing slash

    Raises:
        ValueError: If the timeout variable is not a positive number
    """
    env = os.environ if environ is None else environ

    api_url = env.get(API_URL_ENV) or DEFAULT_API_URL

    raw_timeout = env.get(TIMEOUT_ENV)
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ValueError(f"{TIMEOUT_ENV} must be positive, got {raw_timeout!r}")

    verify_tls = env.get(VERIFY_TLS_ENV, "true").strip().lower() not in _FALSE_VALUES

    return Settings(api_url=api_url.rstrip("/"), timeout=timeout, verify_tls=verify_tls)
