import logging
from typing import Optional

import click

from .calc_types import Failure, Operation, Success
from .config import load_settings
from .controller import CalculatorFormController


def _settings(api_url: Optional[str], timeout: Optional[float], insecure: bool):
    settings = load_settings()
    if api_url:
        settings.api_url = api_url.rstrip("/")
    if timeout is not None:
        settings.timeout = timeout
    if insecure:
        settings.verify_tls = False
    return settings


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("-a", "--probability-a", "probability_a", required=True, help="P(A), between 0 and 1")
@click.option("-b", "--probability-b", "probability_b", required=True, help="P(B), between 0 and 1")
@click.option(
    "--operation",
    type=click.Choice([op.value for op in Operation], case_sensitive=False),
    default=Operation.COMBINED_WITH.value,
    show_default=True,
    help="Combination to ask the service for",
)
@click.option("--api-url", default=None, help="Calculation service base URL")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--insecure", is_flag=True, default=False, help="Skip TLS certificate verification")
def calculate(
    probability_a: str,
    probability_b: str,
    operation: str,
    api_url: Optional[str],
    timeout: Optional[float],
    insecure: bool,
) -> None:
    controller = CalculatorFormController(_settings(api_url, timeout, insecure))
    controller.set_probability_a(probability_a)
    controller.set_probability_b(probability_b)
    controller.set_operation(operation)

    outcome = controller.submit()
    if isinstance(outcome, Success):
        state = controller.snapshot()
        click.echo(state["formula"])
        click.echo(state["formatted_result"])
        return

    message = outcome.message if isinstance(outcome, Failure) else "No result"
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Host to bind to")
@click.option("--port", default=5000, show_default=True, help="Port to bind to")
@click.option("--api-url", default=None, help="Calculation service base URL")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--insecure", is_flag=True, default=False, help="Skip TLS certificate verification")
def serve(host: str, port: int, api_url: Optional[str], timeout: Optional[float], insecure: bool) -> None:
    """Serve the calculator form."""
    from .webapp.server import run

    logging.getLogger().setLevel(logging.INFO)
    run(host, port, _settings(api_url, timeout, insecure))


if __name__ == "__main__":  # pragma: no cover
    main()
