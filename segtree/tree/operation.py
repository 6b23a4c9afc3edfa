import operator
from collections import namedtuple
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

from segtree.utils import Registry, one_time_warning

Operation = namedtuple('Operation', ['fn', 'neutral_element'])

OPERATION_REGISTRY = Registry()
OPERATION_REGISTRY.register('sum', Operation(operator.add, 0))
OPERATION_REGISTRY.register('prod', Operation(operator.mul, 1))
OPERATION_REGISTRY.register('min', Operation(min, np.inf))
OPERATION_REGISTRY.register('max', Operation(max, -np.inf))


def resolve_operation(operation: Union[str, Callable],
                      neutral_element: Optional[Any] = None) -> Tuple[Callable, Any]:
    """
    Overview:
        Turn the ``operation`` argument of a tree into a ``(fn, neutral_element)`` pair.
    Arguments:
        - operation (:obj:`str` or :obj:`Callable`): Registered name in ``OPERATION_REGISTRY`` (e.g. sum, min, \
            max, prod), or an associative binary function.
        - neutral_element (:obj:`Any`): The identity of ``operation``. Optional for registered names, where it \
            overrides the registered default; required for callables.
    Returns:
        - fn (:obj:`Callable`): The binary function.
        - neutral_element (:obj:`Any`): Its identity element.
    """
    if isinstance(operation, str):
        if operation not in OPERATION_REGISTRY:
            raise ValueError(
                "operation argument should be in {} or a callable, but got '{}'".format(
                    list(OPERATION_REGISTRY.query()), operation
                )
            )
        fn, default_neutral = OPERATION_REGISTRY.get(operation)
        if neutral_element is None:
            return fn, default_neutral
        if neutral_element != default_neutral:
            one_time_warning(
                "neutral_element {} overrides the default {} of operation '{}'".format(
                    neutral_element, default_neutral, operation
                )
            )
        return fn, neutral_element
    if not callable(operation):
        raise ValueError("operation should be a str or a callable, but got {}".format(type(operation)))
    if neutral_element is None:
        raise ValueError("neutral_element is required for the custom operation {}".format(operation))
    return operation, neutral_element
