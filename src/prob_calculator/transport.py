import logging
from typing import Optional

import requests

from .calc_types import HttpOutcome, RequestDescriptor
from .config import DEFAULT_TIMEOUT

LOG = logging.getLogger(__name__)


def send_request(
    descriptor: RequestDescriptor,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
    verify: bool = True,
) -> HttpOutcome:
    """
    Issue a calculation request.

    HTTP error statuses are returned as-is for the interpreter; network-level
    failures (refused connection, DNS, TLS, timeout) become a transport error
    outcome instead of an exception.

    Args:
        descriptor: Request to send
        session: Optional requests session to reuse connections
        timeout: Seconds before giving up on the service
        verify: Whether to verify the service's TLS certificate

    Returns:
        HttpOutcome with status and body, or with transport_error set
    """
    http = session if session is not None else requests
    try:
        response = http.request(
            descriptor.method,
            descriptor.url,
            json=descriptor.body,
            headers=dict(descriptor.headers),
            timeout=timeout,
            verify=verify,
        )
    except requests.RequestException as e:
        LOG.warning("Request to %s failed: %s", descriptor.url, e)
        return HttpOutcome.unreachable(str(e))

    LOG.debug("POST %s -> %s", descriptor.url, response.status_code)
    return HttpOutcome(status_code=response.status_code, body=response.text)
