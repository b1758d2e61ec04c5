"""
Flask server for the probability calculator form.

Serves the form and provides JSON endpoints that drive the form controller.
"""

import logging
from typing import Optional

from flask import Flask, jsonify, render_template, request

from ..config import API_URL_ENV, Settings, load_settings
from ..controller import CalculatorFormController, SubmitInProgressError
from .worker import dispatch

LOG = logging.getLogger(__name__)

app = Flask(__name__)

# Single form instance, as in a browser tab; built on first use
controller: Optional[CalculatorFormController] = None


def _form() -> CalculatorFormController:
    global controller

    if controller is None:
        controller = CalculatorFormController(load_settings())
    return controller


def _json_object() -> Optional[dict]:
    """Return the request body if it is a JSON object, else None."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _apply_inputs(data: dict):
    """
    Copy any field values present in a request payload onto the form.

    Raises:
        ValueError: If the operation name is unknown
    """
    form = _form()
    if "operation" in data:
        form.set_operation(data["operation"])
    if "probability_a" in data:
        form.set_probability_a(str(data["probability_a"]))
    if "probability_b" in data:
        form.set_probability_b(str(data["probability_b"]))


@app.route("/")
def index():
    """Render the calculator form."""
    return render_template("index.html", state=_form().snapshot())


@app.route("/api/state", methods=["GET"])
def get_state():
    """
    Get the current form state.

    Returns:
        {
            "probability_a": "0.5",
            "probability_b": "0.5",
            "probability_a_invalid": false,
            "probability_b_invalid": false,
            "operation": "CombinedWith|Either",
            "state": "idle|loading|success|failure",
            "loading": false,
            "error": "...",  # failure only
            "result": 0.25,  # success only
            "formatted_result": "0.2500",  # success only
            "formula": "P(A) * P(B) = 0.50 * 0.50"  # success only
        }
    """
    return jsonify(_form().snapshot())


@app.route("/api/inputs", methods=["POST"])
def update_inputs():
    """
    Update field texts and/or the selected operation.

    Expected JSON payload (all keys optional):
        {"probability_a": "0.5", "probability_b": "0.3", "operation": "Either"}
    """
    data = _json_object()

    if not data:
        return jsonify({"error": "No data provided"}), 400

    try:
        _apply_inputs(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(_form().snapshot())


@app.route("/api/calculate", methods=["POST"])
def calculate():
    """
    Submit the form.

    Accepts the same optional payload as /api/inputs, applied before
    validation. Validation failures come back immediately as a failure state;
    otherwise the request runs in the background and the state is loading.
    A refused submit (409) leaves the inputs untouched.
    """
    form = _form()

    data = {}
    if request.get_data():
        data = _json_object()
        if data is None:
            return jsonify({"error": "Request body must be a JSON object"}), 400

    if form.is_loading:
        return jsonify({"error": "A calculation is already in progress"}), 409

    try:
        _apply_inputs(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        ticket = form.begin_submit()
    except SubmitInProgressError as e:
        return jsonify({"error": str(e)}), 409

    if ticket is not None:
        dispatch(form, ticket)

    return jsonify(form.snapshot())


@app.route("/api/reset", methods=["POST"])
def reset():
    """Reset the form to its initial state."""
    form = _form()
    form.reset()
    return jsonify(form.snapshot())


def main():
    """Run the Flask development server."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the probability calculator web form")
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=5000,
        help="Port to bind to (default: 5000)",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help=f"Calculation service base URL (default: ${API_URL_ENV} or the local service)",
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = load_settings()
    if args.api_url:
        settings.api_url = args.api_url.rstrip("/")
    run(args.host, args.port, settings)


def run(host: str, port: int, settings: Optional[Settings] = None, debug: bool = False):
    """Point the form at a calculation service and serve it."""
    global controller

    controller = CalculatorFormController(settings or load_settings())

    LOG.info("Calculation service: %s", controller.settings.api_url)
    LOG.info("Access at: http://%s:%s", host, port)

    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
