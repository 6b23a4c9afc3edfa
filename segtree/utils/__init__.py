from .default_helper import deep_merge_dicts, one_time_warning
from .log_helper import LoggerFactory, pretty_print
from .registry import Registry
