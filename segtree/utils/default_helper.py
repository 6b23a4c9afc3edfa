import copy
from functools import lru_cache
from typing import Optional

from ditk import logging
from easydict import EasyDict


@lru_cache()
def one_time_warning(warning_msg: str) -> None:
    """
    Overview:
        Print warning message only once.
    Arguments:
        - warning_msg (:obj:`str`): Warning message.
    """
    logging.warning(warning_msg)


def deep_merge_dicts(original: dict, new_dict: Optional[dict]) -> EasyDict:
    """
    Overview:
        Merge two dicts by calling ``deep_update``, neither input is modified.
    Arguments:
        - original (:obj:`dict`): Dict 1, usually the default config.
        - new_dict (:obj:`Optional[dict]`): Dict 2, usually the user config, ``None`` means no override.
    Returns:
        - merged_dict (:obj:`EasyDict`): A new dict that is d1 and d2 deeply merged.
    """
    merged = copy.deepcopy(dict(original))
    if new_dict:
        deep_update(merged, copy.deepcopy(dict(new_dict)))
    return EasyDict(merged)


def deep_update(original: dict, new_dict: dict, new_keys_allowed: bool = False) -> dict:
    """
    Overview:
        Update ``original`` dict with values from ``new_dict`` recursively.
    Arguments:
        - original (:obj:`dict`): Dictionary with default values.
        - new_dict (:obj:`dict`): Dictionary with values to be updated.
        - new_keys_allowed (:obj:`bool`): Whether new keys are allowed.
    Raises:
        - KeyError: If a key of ``new_dict`` is unknown to ``original`` and ``new_keys_allowed`` is False.
    """
    for k, v in new_dict.items():
        if k not in original and not new_keys_allowed:
            raise KeyError("Key '{}' is not defined in the original config: {}".format(k, list(original.keys())))
        if isinstance(original.get(k), dict) and isinstance(v, dict):
            deep_update(original[k], v, new_keys_allowed)
        else:
            original[k] = v
    return original
