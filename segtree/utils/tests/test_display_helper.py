import os

import numpy as np
import pytest

from segtree.tree import AggregateTree, DeletableView
from segtree.utils.log_helper import LoggerFactory
from segtree.utils.display_helper import tree_to_str, backing_to_str, view_to_str, summary, display

INT_MAX = 2 ** 31 - 1


@pytest.mark.unittest
class TestDisplayHelper:

    def test_tree(self):
        tree = AggregateTree([1, 2, 3], min, INT_MAX)
        tree.add(40)
        assert tree_to_str(tree) == '[ 1 2 3 40 _ _ _ ]'
        assert tree_to_str(AggregateTree([], 'sum')) == '[ ]'
        table = backing_to_str(tree)
        assert 'Node' in table and 'Value' in table
        assert str(INT_MAX) in table

    def test_view(self):
        view = DeletableView([1, 2, 3], min, INT_MAX)
        view.delete(0)
        lines = view_to_str(view).split('\n')
        assert lines == ['[ {} 2 3 ]'.format(INT_MAX), '[ 1 0 0 ]', 'Apparent Array [ 2 3 ]']

    def test_summary(self):
        view = DeletableView([5, 6, 7], 'sum')
        view.delete(1)
        info = summary(view)
        assert info == {'type': 'DeletableView', 'count': 2, 'capacity': 2, 'identity': 0, 'total': 12}
        assert summary(AggregateTree([], 'max'))['total'] == float('-inf')
        string = display(view, direct_print=False)
        assert 'Apparent Array [ 5 7 ]' in string
        assert 'total: 12' in string

    def test_display_to_logger(self, tmpdir):
        path = str(tmpdir)
        logger = LoggerFactory.create_logger(path, name='display_test')
        view = DeletableView([3, 1, 2], 'min', dtype=np.int64)
        view.delete(1)
        string = display(view, direct_print=False, logger=logger)
        assert 'Apparent Array [ 3 2 ]' in string
        with open(os.path.join(path, 'display_test_logger.txt'), 'r') as f:
            content = f.read()
        assert 'Apparent Array [ 3 2 ]' in content
        assert 'capacity' in content
