from typing import Any, Dict, Optional

import numpy as np
from ditk import logging
from tabulate import tabulate

from .log_helper import LoggerFactory, pretty_print


def tree_to_str(tree: Any) -> str:
    """
    Overview:
        Show the logical values of an ``AggregateTree``, followed by one ``_`` per unused slot, \
        e.g. ``[ 1 2 3 _ _ _ _ ]``.
    """
    items = [str(v) for v in tree] + ['_'] * (tree.capacity - tree.count())
    return '[ ' + ' '.join(items + [']'])


def backing_to_str(tree: Any) -> str:
    """
    Overview:
        Show every node of the backing array of an ``AggregateTree`` in a grid, node 0 is the root.
    """
    data = [[node, value] for node, value in enumerate(tree.value)]
    return tabulate(data, headers=['Node', 'Value'], tablefmt='grid')


def view_to_str(view: Any) -> str:
    """
    Overview:
        Show the value tree, the deletion flags and the apparent (alive only) array of a ``DeletableView``.
    """
    lines = [
        tree_to_str(view.value_tree),
        tree_to_str(view.deleted_flags),
        'Apparent Array ' + '[ ' + ' '.join([str(v) for v in view] + [']']),
    ]
    return '\n'.join(lines)


def summary(obj: Any) -> Dict[str, Any]:
    """
    Overview:
        Collect the public counters of a tree or a view, ``total`` is the reduce result of all logical values.
    """
    count = obj.count()
    total = obj.query_range(0, count - 1) if count > 0 else obj.identity
    identity = obj.identity
    total, identity = [v.item() if isinstance(v, np.generic) else v for v in (total, identity)]
    return {
        'type': type(obj).__name__,
        'count': count,
        'capacity': obj.capacity,
        'identity': identity,
        'total': total,
    }


def display(obj: Any, direct_print: bool = True, logger: Optional[logging.Logger] = None) -> str:
    """
    Overview:
        Render a tree (``AggregateTree``) or a view (``DeletableView``) together with its summary.
    Arguments:
        - obj (:obj:`Any`): The tree or view to render.
        - direct_print (:obj:`bool`): Whether to print directly.
        - logger (:obj:`Optional[logging.Logger]`): If given, e.g. built by ``LoggerFactory.create_logger``, \
            the dump and a table of the summary are also written to it.
    Returns:
        - string (:obj:`str`): The rendered text.
    """
    body = view_to_str(obj) if hasattr(obj, 'deleted_flags') else tree_to_str(obj)
    string = body + '\n' + pretty_print(summary(obj), direct_print=False)
    if direct_print:
        print(string)
    if logger is not None:
        logger.info(body + LoggerFactory.get_tabulate_vars(summary(obj)))
    return string
