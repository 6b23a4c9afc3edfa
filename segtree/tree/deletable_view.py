import copy
import operator
from typing import Any, Callable, Iterator, Optional, Sequence, Union

import numpy as np
from easydict import EasyDict

from segtree.utils import deep_merge_dicts
from .aggregate_tree import AggregateTree
from .exception import InvalidIndexError, UnderflowError


class DeletableView:
    """
    Overview:
        A dense view over an ``AggregateTree`` which supports deletion. Deleted slots keep their physical \
        position and are masked with the neutral element, so they never contribute to any aggregate. A second \
        sum tree over the same physical indices counts the deleted slots, and is used to translate logical \
        indices (rank among the alive elements) into physical ones.
        Deleted slots are never reclaimed.
    Interface:
        ``__init__``, ``default_config``, ``get``, ``set``, ``query_range``, ``add``, ``delete``, ``count``, \
        ``__len__``, ``__getitem__``, ``__setitem__``, ``__delitem__``, ``__iter__``
    Property:
        ``capacity``, ``identity``, ``operation``, ``value_tree``, ``deleted_flags``
    """

    config = dict(load_factor=2.0)

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
            Build the value tree over ``values`` and an all-zero deletion tree of the same length.
        Arguments:
            - values (:obj:`Sequence`): The initial values, all alive.
            - operation (:obj:`str` or :obj:`Callable`): Same as ``AggregateTree``.
            - neutral_element (:obj:`Any`): Same as ``AggregateTree``.
            - cfg (:obj:`dict`): Overrides of ``default_config()``, shared by both trees.
            - dtype (:obj:`Any`): Numpy dtype of the value tree.
        """
        self._cfg = deep_merge_dicts(self.default_config(), cfg)
        tree_cfg = dict(load_factor=self._cfg.load_factor)
        self._value_tree = AggregateTree(values, operation, neutral_element, cfg=tree_cfg, dtype=dtype)
        self._deleted_flags = AggregateTree(
            [0] * self._value_tree.count(), operator.add, 0, cfg=tree_cfg, dtype=np.int64
        )
        self._length = self._value_tree.count()

    @property
    def value_tree(self) -> AggregateTree:
        return self._value_tree

    @property
    def deleted_flags(self) -> AggregateTree:
        return self._deleted_flags

    @property
    def identity(self) -> Any:
        return self._value_tree.identity

    @property
    def operation(self) -> Callable:
        return self._value_tree.operation

    @property
    def capacity(self) -> int:
        """
        Overview:
            Physical capacity minus the number of deleted slots, i.e. how many elements can be alive before \
            the next resize of the backing array.
        """
        return self._value_tree.capacity - self._deleted_count()

    def count(self) -> int:
        return self._length

    def get(self, idx: int) -> Any:
        self._check_index(idx)
        return self._value_tree.get(self._translate_index(idx))

    def set(self, idx: int, val: Any) -> None:
        self._check_index(idx)
        self._value_tree.set(self._translate_index(idx), val)

    def query_range(self, start: int, end: int) -> Any:
        """
        Overview:
            Reduce the alive elements whose logical indices are in ``[start, end]``. Deleted slots between \
            them hold the neutral element, so reducing the physical range gives the same result.
        """
        self._check_index(start, 'start')
        self._check_index(end, 'end')
        return self._value_tree.query_range(self._translate_index(start), self._translate_index(end))

    def add(self, val: Any) -> None:
        self._value_tree.add(val)
        # the new slot starts alive
        self._deleted_flags.add(0)
        self._length += 1

    def delete(self, idx: int) -> None:
        """
        Overview:
            Delete the element at logical index ``idx``; the following elements shift left by one logical \
            position while keeping their physical positions.
        Arguments:
            - idx (:obj:`int`): The logical index, should be in ``[0, count())``.
        """
        if self._length == 0:
            raise UnderflowError()
        self._check_index(idx)
        physical_idx = self._translate_index(idx)
        # mask the value first, a failing write leaves the view unchanged
        self._value_tree.set(physical_idx, self._value_tree.identity)
        self._deleted_flags.set(physical_idx, 1)
        self._length -= 1

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, idx: int) -> Any:
        return self.get(idx)

    def __setitem__(self, idx: int, val: Any) -> None:
        self.set(idx, val)

    def __delitem__(self, idx: int) -> None:
        self.delete(idx)

    def __iter__(self) -> Iterator:
        for i in range(self._length):
            yield self.get(i)

    def __repr__(self) -> str:
        return '{}(count={}, capacity={}, identity={})'.format(
            type(self).__name__, self._length, self.capacity, self.identity
        )

    def _check_index(self, idx: int, name: str = 'index') -> None:
        try:
            operator.index(idx)
        except TypeError:
            raise InvalidIndexError(idx, self._length, name) from None
        if not 0 <= idx < self._length:
            raise InvalidIndexError(idx, self._length, name)

    def _deleted_count(self) -> int:
        used = self._deleted_flags.count()
        return int(self._deleted_flags.query_range(0, used - 1)) if used > 0 else 0

    def _translate_index(self, idx: int) -> int:
        # physical:  [ a z b s c d ]   (z, s deleted)
        # deleted:   [ 0 1 0 1 0 0 ]
        # logical 2 (c) -> physical 4, where 4 - 2 == number of deleted slots in [0, 4]
        low, high = idx, self._value_tree.count() - 1
        while low <= high:
            mid = low + (high - low) // 2
            deleted_count = self._deleted_flags.query_range(0, mid)
            if mid - idx < deleted_count:
                low = mid + 1
            else:
                high = mid - 1
        return low
