from .exception import SegmentTreeError, InvalidIndexError, UnderflowError
from .operation import OPERATION_REGISTRY, Operation, resolve_operation
from .aggregate_tree import AggregateTree
from .deletable_view import DeletableView
