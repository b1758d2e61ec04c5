from typing import Union

from .calc_types import Operation, RequestDescriptor


def build_request(
    base_url: str,
    operation: Union[Operation, str],
    probability_a: float,
    probability_b: float,
) -> RequestDescriptor:
    """
    Build the POST request for one calculation.

    Args:
        base_url: Calculation service root, e.g. https://localhost:7001/api/probabilities
        operation: Operation (or its display name) selecting the endpoint
        probability_a: Parsed value of field A
        probability_b: Parsed value of field B

    Returns:
        RequestDescriptor targeting {base_url}/{combinedwith|either}
    """
    op = Operation.parse(operation)
    return RequestDescriptor(
        url=f"{base_url}/{op.path_segment}",
        body={"probabilityA": probability_a, "probabilityB": probability_b},
    )
