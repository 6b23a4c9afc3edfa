from functools import reduce

import numpy as np
import pytest

from segtree.tree import AggregateTree, InvalidIndexError

INT_MAX = 2 ** 31 - 1


@pytest.mark.unittest
class TestAggregateTree:

    def test_create(self):
        tree = AggregateTree([1, 5, 4, 7, 2], 'sum')
        assert (tree.count() == 5)
        assert (len(tree) == 5)
        assert (tree.capacity == 5)
        assert (tree.identity == 0)
        assert (len(tree.value) == 2 * 5 - 1)
        assert (tree.value[0] == 19)
        assert (list(tree) == [1, 5, 4, 7, 2])

        tree = AggregateTree([], min, INT_MAX)
        assert (tree.count() == 0)
        assert (tree.capacity == 0)
        assert (len(tree.value) == 0)

        with pytest.raises(ValueError):
            AggregateTree([1, 2], 'median')
        with pytest.raises(ValueError):
            AggregateTree([1, 2], lambda a, b: a + b)
        with pytest.raises(ValueError):
            AggregateTree([1, 2], 'sum', cfg=dict(load_factor=0.5))

    def test_default_config(self):
        cfg = AggregateTree.default_config()
        assert (cfg.load_factor == 2.0)
        assert (cfg.cfg_type == 'AggregateTreeDict')
        with pytest.raises(KeyError):
            AggregateTree([1], 'sum', cfg=dict(growth=3))

    def test_set_get_item(self):
        elements = [1, -10, 10, 7, 3, 8]
        tree = AggregateTree(elements, 'min')
        for idx, val in enumerate([4, 9, -3, 0, 11, 2]):
            before = list(tree)
            tree[idx] = val
            assert (tree[idx] == val)
            expected = before[:idx] + [val] + before[idx + 1:]
            assert (list(tree) == expected)
            assert (tree.query_range(0, len(tree) - 1) == min(expected))

    def test_query_range(self):
        elements = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
        tree = AggregateTree(elements, 'sum')
        for start in range(len(elements)):
            for end in range(start, len(elements)):
                assert (tree.query_range(start, end) == sum(elements[start:end + 1]))
        assert (tree.query_range(5, 2) == 0)

        tree = AggregateTree(elements, 'max')
        assert (tree.identity == -np.inf)
        assert (tree.query_range(0, 4) == 5)
        assert (tree.query_range(3, 3) == 1)

    def test_non_commutative_operation(self):
        letters = list('segmenttree')
        tree = AggregateTree(letters, lambda a, b: a + b, '')
        assert (tree.query_range(0, len(letters) - 1) == 'segmenttree')
        assert (tree.query_range(2, 6) == 'gment')
        tree[0] = 'S'
        assert (tree.query_range(0, 2) == 'Seg')

        # affine maps x -> a * x + b, composed left to right
        def compose(f, g):
            return f[0] * g[0], g[0] * f[1] + g[1]

        maps = [(i % 3 + 1, i) for i in range(7)]
        tree = AggregateTree(maps, compose, (1, 0))
        assert (tree.query_range(1, 5) == reduce(compose, maps[1:6]))
        assert (tree.query_range(1, 5) != reduce(compose, maps[5:0:-1]))

    def test_invalid_index(self):
        tree = AggregateTree([1, 2, 3], 'sum')
        for idx in [-1, 3, 10]:
            with pytest.raises(InvalidIndexError) as e:
                tree.get(idx)
            assert (e.value.index == idx)
            assert (e.value.length == 3)
            with pytest.raises(IndexError):
                tree[idx] = 0
        with pytest.raises(InvalidIndexError) as e:
            tree.query_range(0, 3)
        assert (e.value.name == 'end')
        with pytest.raises(InvalidIndexError) as e:
            tree.query_range(-2, 1)
        assert (e.value.name == 'start')
        assert (list(tree) == [1, 2, 3])

    def test_add(self):
        tree = AggregateTree([], 'sum')
        capacities = []
        for i in range(20):
            prev_count, prev_capacity = tree.count(), tree.capacity
            tree.add(i)
            assert (tree.count() == i + 1)
            assert (tree.get(i) == i)
            if prev_count == prev_capacity:
                assert (tree.capacity == int(prev_capacity * 2.0) + 1)
            else:
                assert (tree.capacity == prev_capacity)
            capacities.append(tree.capacity)
        assert (capacities[:4] == [1, 3, 3, 7])
        assert (tree.query_range(0, 19) == sum(range(20)))

        tree = AggregateTree([1, 2], 'sum', cfg=dict(load_factor=1.5))
        tree.add(3)
        assert (tree.capacity == 4)

    def test_resize_with_min(self):
        tree = AggregateTree([1, 2, 3], min, INT_MAX)
        for _ in range(4):
            tree.add(40)
        assert (tree.capacity > 3)
        assert ([tree.get(i) for i in range(7)] == [1, 2, 3, 40, 40, 40, 40])
        assert (tree.query_range(0, 6) == 1)
        assert (tree.query_range(3, 6) == 40)

    def test_resize(self):
        tree = AggregateTree([5, 6], 'sum')
        tree.resize(9)
        assert (tree.capacity == 9)
        assert (tree.count() == 2)
        assert (len(tree.value) == 17)
        assert (tree.value[0] == 11)
        with pytest.raises(InvalidIndexError):
            tree.get(2)
        with pytest.raises(ValueError):
            tree.resize(3)
        tree.add(7)
        assert (tree.capacity == 9)
        assert (list(tree) == [5, 6, 7])

    def test_dtype(self):
        tree = AggregateTree(np.zeros(4), 'sum', dtype=np.float64)
        assert (tree.value.dtype == np.float64)
        tree[2] = 0.5
        tree.add(1.5)
        assert (tree.value.dtype == np.float64)
        assert (tree.query_range(0, 4) == 2.0)

    def test_integer_dtype_min_max(self):
        tree = AggregateTree([3, 1], 'min', dtype=np.int64)
        assert (tree.identity == np.iinfo(np.int64).max)
        tree.add(2)
        assert (tree.capacity == 5)
        assert (list(tree) == [3, 1, 2])
        assert (tree.query_range(0, 2) == 1)
        assert (tree.query_range(2, 2) == 2)

        tree = AggregateTree([-5, 7], 'max', dtype=np.int32)
        assert (tree.identity == np.iinfo(np.int32).min)
        for val in [4, -9, 6]:
            tree.add(val)
        assert (tree.query_range(2, 4) == 6)
        assert (tree.query_range(0, 4) == 7)

        tree = AggregateTree([1.5, 0.5], 'min', dtype=np.float32)
        assert (tree.identity == np.inf)
        tree.add(2.5)
        assert (tree.query_range(0, 2) == 0.5)

        with pytest.raises(ValueError):
            AggregateTree([1, 2], 'sum', 0.5, dtype=np.int64)
        with pytest.raises(ValueError):
            AggregateTree([1, 2], min, 2 ** 70, dtype=np.int64)

    def test_non_integer_index(self):
        tree = AggregateTree([1, 2, 3], 'sum')
        for idx in [1.5, 1.0, '1', None]:
            with pytest.raises(InvalidIndexError) as e:
                tree.get(idx)
            assert (e.value.index == idx)
            with pytest.raises(InvalidIndexError):
                tree[idx] = 4
        with pytest.raises(InvalidIndexError) as e:
            tree.query_range(0, 2.0)
        assert (e.value.name == 'end')
        assert (tree.get(np.int64(1)) == 2)
        assert (list(tree) == [1, 2, 3])

    def test_reference_fold(self):
        rng = np.random.RandomState(12)
        elements = list(rng.randint(-100, 100, size=37))
        tree = AggregateTree(elements[:5], 'max')
        for e in elements[5:]:
            tree.add(e)
        for _ in range(200):
            idx = rng.randint(len(elements))
            val = rng.randint(-100, 100)
            elements[idx] = val
            tree[idx] = val
            start, end = sorted(rng.randint(len(elements), size=2))
            assert (tree.query_range(start, end) == reduce(max, elements[start:end + 1], -np.inf))
        assert (tree.query_range(0, len(elements) - 1) == reduce(max, elements, tree.identity))
