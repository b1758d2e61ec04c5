from typing import Optional

from .calc_types import Invalid, Valid, ValidationResult

EMPTY_MESSAGE = "Please enter values for both probabilities."
PROBABILITY_A_MESSAGE = "Probability A must be between 0 and 1."
PROBABILITY_B_MESSAGE = "Probability B must be between 0 and 1."


def parse_probability(text: str) -> Optional[float]:
    """Parse a field's text, returning None unless it is a number in [0, 1]."""
    # float() also takes digit separators, which form input never contains
    if "_" in str(text):
        return None
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    # NaN fails both comparisons
    if 0.0 <= value <= 1.0:
        return value
    return None


def is_valid_probability(text: str) -> bool:
    return parse_probability(text) is not None


def validate(probability_a_text: str, probability_b_text: str) -> ValidationResult:
    """
    Check both probability fields before anything is sent.

    The first applicable rule wins: emptiness, then field A, then field B.

    Args:
        probability_a_text: Raw text of the first field
        probability_b_text: Raw text of the second field

    Returns:
        Valid, or Invalid carrying the message to show the user
    """
    if probability_a_text == "" or probability_b_text == "":
        return Invalid(EMPTY_MESSAGE)
    if not is_valid_probability(probability_a_text):
        return Invalid(PROBABILITY_A_MESSAGE)
    if not is_valid_probability(probability_b_text):
        return Invalid(PROBABILITY_B_MESSAGE)
    return Valid()
