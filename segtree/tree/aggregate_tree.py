import copy
import operator
from typing import Any, Callable, Iterator, Optional, Sequence, Union

import numpy as np
from ditk import logging
from easydict import EasyDict

from segtree.utils import deep_merge_dicts
from .exception import InvalidIndexError
from .operation import resolve_operation


class AggregateTree:
    """
    Overview:
        Segment tree data structure, implemented by the tree-like array. The root node is at index 0 and covers \
        ``[0, capacity - 1]``. For a node covering ``[start, end]`` with ``mid = start + (end - start) // 2``, the \
        left child is at ``node + 1`` and covers ``[start, mid]``, the right child is right after the whole left \
        subtree, at ``node + 2 * (mid - start + 1)``, and covers ``[mid + 1, end]``. So the array holds exactly \
        ``2 * capacity - 1`` nodes for any capacity, not only powers of 2.
        Only the leaf nodes are real values, non-leaf nodes hold ``operation(left, right)``. Leaves beyond the \
        current length are padded with the neutral element.
    Interface:
        ``__init__``, ``default_config``, ``get``, ``set``, ``query_range``, ``add``, ``resize``, ``count``, \
        ``__len__``, ``__getitem__``, ``__setitem__``, ``__iter__``
    Property:
        ``capacity``, ``identity``, ``operation``
    """

    config = dict(
        # Capacity after a full ``add`` is ``int(capacity * load_factor) + 1``.
        load_factor=2.0,
    )

    @classmethod
    def default_config(cls: type) -> EasyDict:
        cfg = EasyDict(copy.deepcopy(cls.config))
        cfg.cfg_type = cls.__name__ + 'Dict'
        return cfg

    def __init__(
            self,
            values: Sequence,
            operation: Union[str, Callable],
            neutral_element: Optional[Any] = None,
            cfg: Optional[dict] = None,
            dtype: Optional[Any] = None,
    ) -> None:
        """
        Overview:
            Build the tree bottom-up from ``values``, capacity and length are both ``len(values)``.
        Arguments:
            - values (:obj:`Sequence`): The initial leaf values.
            - operation (:obj:`str` or :obj:`Callable`): An associative binary function, or the name of a \
                registered one, e.g. sum, min, max, prod.
            - neutral_element (:obj:`Any`): The two-sided identity of ``operation``, which is the result of an \
                empty or disjoint range. Can be omitted for registered operations.
            - cfg (:obj:`dict`): Overrides of ``default_config()``.
            - dtype (:obj:`Any`): Numpy dtype of the backing array, default is ``object`` which accepts any value.
        """
        self._cfg = deep_merge_dicts(self.default_config(), cfg)
        if self._cfg.load_factor < 1:
            raise ValueError("load_factor should be >= 1, but got {}".format(self._cfg.load_factor))
        self._operation, neutral_element = resolve_operation(operation, neutral_element)
        self._dtype = np.dtype(object if dtype is None else dtype)
        self._neutral_element = self._fit_neutral_element(neutral_element)
        values = list(values)
        self._length = self._capacity = len(values)
        self.value = self._allocate(self._capacity)
        if self._capacity > 0:
            self._build(0, self._capacity - 1, 0, values)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def identity(self) -> Any:
        return self._neutral_element

    @property
    def operation(self) -> Callable:
        return self._operation

    def count(self) -> int:
        return self._length

    def get(self, idx: int) -> Any:
        """
        Overview:
            Get the value at logical position ``idx``.
        """
        self._check_index(idx)
        return self.query_range(idx, idx)

    def set(self, idx: int, val: Any) -> None:
        """
        Overview:
            Set ``leaf[idx] = val``; Then update all of its ancestors.
        """
        self._check_index(idx)
        self._set(idx, 0, self._capacity - 1, 0, val)

    def query_range(self, start: int, end: int) -> Any:
        """
        Overview:
            Reduce the tree in the closed range ``[start, end]``, operands are combined from left to right, so \
            non-commutative operations are supported.
        Arguments:
            - start (:obj:`int`): Start index, should be in ``[0, length)``.
            - end (:obj:`int`): End index (inclusive), should be in ``[0, length)``.
        Returns:
            - reduce_result (:obj:`Any`): The reduce result, the neutral element if ``start > end``.
        """
        self._check_index(start, 'start')
        self._check_index(end, 'end')
        if start > end:
            return self._neutral_element
        return self._query_range(start, end, 0, self._capacity - 1, 0)

    def add(self, val: Any) -> None:
        """
        Overview:
            Append ``val`` after the last logical position, growing the backing array when it is full.
        """
        if self._length == self._capacity:
            self.resize(int(self._capacity * self._cfg.load_factor) + 1)
        self._length += 1
        self.set(self._length - 1, val)

    def resize(self, new_capacity: int) -> None:
        """
        Overview:
            Reallocate the backing array for ``new_capacity`` leaves and rebuild the whole tree. The logical \
            values are kept, the new leaves are the neutral element. ``length`` is not changed.
        Arguments:
            - new_capacity (:obj:`int`): The new number of leaves, should not be less than the current capacity.
        """
        if new_capacity < self._capacity:
            raise ValueError("can't shrink tree capacity from {} to {}".format(self._capacity, new_capacity))
        values = list(self)
        values += [self._neutral_element] * (new_capacity - len(values))
        logging.debug('resize {} from capacity {} to {}'.format(type(self).__name__, self._capacity, new_capacity))
        self.value = self._allocate(new_capacity)
        if new_capacity > 0:
            self._build(0, new_capacity - 1, 0, values)
        self._capacity = new_capacity

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, idx: int) -> Any:
        return self.get(idx)

    def __setitem__(self, idx: int, val: Any) -> None:
        self.set(idx, val)

    def __iter__(self) -> Iterator:
        for i in range(self._length):
            yield self.get(i)

    def __repr__(self) -> str:
        return '{}(count={}, capacity={}, identity={})'.format(
            type(self).__name__, self._length, self._capacity, self._neutral_element
        )

    def _allocate(self, capacity: int) -> np.ndarray:
        return np.empty(max(2 * capacity - 1, 0), dtype=self._dtype)

    def _fit_neutral_element(self, neutral_element: Any) -> Any:
        """
        Overview:
            Cast the neutral element into the backing dtype. An infinite neutral element (e.g. of min or max) \
            becomes the largest or smallest value of an integer dtype.
        """
        if self._dtype.kind == 'O':
            return neutral_element
        if self._dtype.kind in 'iu' and isinstance(neutral_element, float) and np.isinf(neutral_element):
            info = np.iinfo(self._dtype)
            return self._dtype.type(info.max if neutral_element > 0 else info.min)
        try:
            fitted = np.array(neutral_element, dtype=self._dtype)
        except (OverflowError, TypeError, ValueError) as e:
            raise ValueError("neutral_element {} doesn't fit dtype {}".format(neutral_element, self._dtype)) from e
        if fitted.shape != () or fitted != neutral_element:
            raise ValueError("neutral_element {} doesn't fit dtype {}".format(neutral_element, self._dtype))
        return fitted[()]

    def _check_index(self, idx: int, name: str = 'index') -> None:
        try:
            operator.index(idx)
        except TypeError:
            raise InvalidIndexError(idx, self._length, name) from None
        if not 0 <= idx < self._length:
            raise InvalidIndexError(idx, self._length, name)

    @staticmethod
    def _mid(start: int, end: int) -> int:
        return start + (end - start) // 2

    @staticmethod
    def _right_child(node: int, start: int, mid: int) -> int:
        # skip the left subtree, which holds 2 * leaves - 1 nodes
        return node + 2 * (mid - start + 1)

    def _build(self, start: int, end: int, node: int, values: list) -> None:
        if start == end:
            self.value[node] = values[start]
            return
        mid = self._mid(start, end)
        left, right = node + 1, self._right_child(node, start, mid)
        self._build(start, mid, left, values)
        self._build(mid + 1, end, right, values)
        self.value[node] = self._operation(self.value[left], self.value[right])

    def _set(self, idx: int, start: int, end: int, node: int, val: Any) -> None:
        if start == end:
            self.value[node] = val
            return
        mid = self._mid(start, end)
        left, right = node + 1, self._right_child(node, start, mid)
        if idx <= mid:
            self._set(idx, start, mid, left, val)
        else:
            self._set(idx, mid + 1, end, right, val)
        # Update from the changed child back to the root
        self.value[node] = self._operation(self.value[left], self.value[right])

    def _query_range(self, query_start: int, query_end: int, start: int, end: int, node: int) -> Any:
        # The node range is fully contained in the query
        if query_start <= start and end <= query_end:
            return self.value[node]
        # The node range has no overlap with the query
        if query_start > end or start > query_end:
            return self._neutral_element
        mid = self._mid(start, end)
        left_value = self._query_range(query_start, query_end, start, mid, node + 1)
        right_value = self._query_range(query_start, query_end, mid + 1, end, self._right_child(node, start, mid))
        return self._operation(left_value, right_value)
