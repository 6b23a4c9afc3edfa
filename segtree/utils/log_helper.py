import json
import os
from typing import Union, Dict, Any

import ditk.logging
import numpy as np
import yaml
from ditk import logging
from hbutils.system import touch
from tabulate import tabulate


class LoggerFactory(object):

    @classmethod
    def create_logger(cls, path: str, name: str = 'default', level: Union[int, str] = logging.INFO) -> logging.Logger:
        r"""
        Overview:
            Create a logger which writes both to the terminal and to ``<path>/<name>_logger.txt``.
        Arguments:
            - path (:obj:`str`): Logger's save dir
            - name (:obj:`str`): Logger's name
            - level (:obj:`int` or :obj:`str`): Used to set the level. Reference: ``Logger.setLevel`` method.
        Returns:
            - (:obj:`logging.Logger`): new logging logger
        """
        ditk.logging.try_init_root(level)

        logger_name = f'{name}_logger'
        logger_file_path = os.path.join(path, f'{logger_name}.txt')
        touch(logger_file_path)

        logger = ditk.logging.getLogger(logger_name, level, [logger_file_path])
        logger.get_tabulate_vars = LoggerFactory.get_tabulate_vars
        return logger

    @staticmethod
    def get_tabulate_vars(variables: Dict[str, Any]) -> str:
        r"""
        Overview:
            Get the text description in tabular form of all vars
        Arguments:
            - variables (:obj:`Dict[str, Any]`): Names and values of the vars to show.
        Returns:
            - string (:obj:`str`): Text description in tabular form of all vars
        """
        headers = ["Name", "Value"]
        data = []
        for k, v in variables.items():
            if not isinstance(v, str) and np.isscalar(v) and not isinstance(v, (int, np.integer)):
                v = "{:.6f}".format(v)
            data.append([k, v])
        return "\n" + tabulate(data, headers=headers, tablefmt='grid')


def pretty_print(result: dict, direct_print: bool = True) -> str:
    r"""
    Overview:
        Print a dict ``result`` in a pretty way, ``None`` values are dropped.
    Arguments:
        - result (:obj:`dict`): The result to print
        - direct_print (:obj:`bool`): Whether to print directly
    Returns:
        - string (:obj:`str`): The pretty-printed result in str format
    """
    out = {k: v for k, v in result.items() if v is not None}
    cleaned = json.dumps(out, default=str)
    string = yaml.safe_dump(json.loads(cleaned), default_flow_style=False)
    if direct_print:
        print(string)
    return string
