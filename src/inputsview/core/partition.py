from __future__ import annotations

from collections.abc import Iterable

from inputsview.core.models import Input
from inputsview.core.natural_sort import natural_sorted
from inputsview.errors import InvalidInputError


def partition_inputs(inputs: Iterable[Input]) -> tuple[tuple[Input, ...], tuple[Input, ...]]:
    """Splits inputs into (global, local), each in natural title order.

    Raises InvalidInputError if any input's flag is not exactly True or False;
    nothing is returned for a partially valid collection.
    """
    global_inputs: list[Input] = []
    local_inputs: list[Input] = []
    for item in inputs:
        if item.global_ is True:
            global_inputs.append(item)
        elif item.global_ is False:
            local_inputs.append(item)
        else:
            raise InvalidInputError(item.id, item.global_)

    return (
        tuple(natural_sorted(global_inputs, key=lambda i: i.title)),
        tuple(natural_sorted(local_inputs, key=lambda i: i.title)),
    )
