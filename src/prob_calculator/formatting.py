from typing import Optional, Union

from .calc_types import Operation


def format_result(result: Optional[float]) -> str:
    """Format a service result to four decimal places ("0.0000" when absent)."""
    if result is None:
        return "0.0000"
    return f"{result:.4f}"


def formula(operation: Union[Operation, str], probability_a: float, probability_b: float) -> str:
    """Describe the submitted calculation; the number shown always comes from the service."""
    a = f"{probability_a:.2f}"
    b = f"{probability_b:.2f}"
    if Operation.parse(operation) is Operation.COMBINED_WITH:
        return f"P(A) * P(B) = {a} * {b}"
    return f"P(A) + P(B) - P(A)P(B) = {a} + {b} - ({a} * {b})"
