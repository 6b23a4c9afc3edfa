from typing import Optional


class SegmentTreeError(Exception):
    """
    Overview:
        Base class of the errors raised by ``AggregateTree`` and ``DeletableView``.
    """
    pass


class InvalidIndexError(SegmentTreeError, IndexError):
    """
    Overview:
        An index or range bound outside ``[0, length)``.
    Properties:
        ``index``, ``length``, ``name``
    """

    def __init__(self, index: int, length: int, name: Optional[str] = 'index') -> None:
        self.index = index
        self.length = length
        self.name = name
        super(InvalidIndexError, self).__init__('{}: {} not in [0, {})'.format(name, index, length))


class UnderflowError(SegmentTreeError, IndexError):
    """
    Overview:
        Deletion requested on a view without any alive element.
    """

    def __init__(self, message: str = 'Underflow: segment tree is empty') -> None:
        super(UnderflowError, self).__init__(message)
