import pytest
from easydict import EasyDict

from segtree.utils.default_helper import deep_merge_dicts, deep_update, one_time_warning


@pytest.mark.unittest
class TestDefaultHelper():

    def test_deep_merge_dicts(self):
        original = {'load_factor': 2.0, 'nested': {'a': 1, 'b': 2}}
        merged = deep_merge_dicts(original, {'nested': {'b': 3}})
        assert isinstance(merged, EasyDict)
        assert merged.load_factor == 2.0
        assert merged.nested.a == 1 and merged.nested.b == 3
        assert original['nested']['b'] == 2
        assert deep_merge_dicts(original, None) == original

    def test_deep_update(self):
        original = {'a': 1}
        with pytest.raises(KeyError):
            deep_update(original, {'b': 2})
        assert deep_update(original, {'b': 2}, new_keys_allowed=True) == {'a': 1, 'b': 2}

    def test_one_time_warning(self):
        one_time_warning('test_one_time_warning')
        one_time_warning('test_one_time_warning')
        assert one_time_warning.cache_info().hits >= 1
