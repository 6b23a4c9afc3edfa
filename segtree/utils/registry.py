from collections import OrderedDict
from typing import Optional, Iterable, Any, Callable


class Registry(dict):
    """
    Overview:
        A helper class for registering named objects, it extends a dictionary
        and provides a register function usable both directly and as a decorator.
    Interfaces:
        ``__init__``, ``register``, ``get``, ``query``, ``query_details``
    Examples (creating):
        >>> some_registry = Registry({"default": default_module})

    Examples (registering: normal way):
        >>> some_registry.register("sum", Operation(operator.add, 0))

    Examples (registering: decorator way):
        >>> @some_registry.register("concat")
        >>> def concat(a, b):
        >>>     ...

    Examples (accessing):
        >>> op = some_registry["sum"]
    """

    def __init__(self, *args, **kwargs) -> None:
        super(Registry, self).__init__(*args, **kwargs)

    def register(self, module_name: Optional[str] = None, module: Optional[Any] = None, force_overwrite: bool = False):
        """
        Overview:
            Register the module.
        Arguments:
            - module_name (:obj:`Optional[str]`): The name of the module.
            - module (:obj:`Optional[Any]`): The object to be registered. If ``None``, a decorator is returned.
            - force_overwrite (:obj:`bool`): Whether to overwrite the module with the same name.
        """
        # used as function call
        if module is not None:
            assert module_name is not None
            Registry._register_generic(self, module_name, module, force_overwrite)
            return

        # used as decorator
        def register_fn(fn: Callable) -> Callable:
            name = fn.__name__ if module_name is None else module_name
            Registry._register_generic(self, name, fn, force_overwrite)
            return fn

        return register_fn

    @staticmethod
    def _register_generic(module_dict: dict, module_name: str, module: Any, force_overwrite: bool = False) -> None:
        if not force_overwrite:
            assert module_name not in module_dict, module_name
        module_dict[module_name] = module

    def get(self, module_name: str) -> Any:
        return self[module_name]

    def query(self) -> Iterable:
        """
        Overview:
            All registered module names.
        """
        return self.keys()

    def query_details(self, aliases: Optional[Iterable] = None) -> OrderedDict:
        """
        Overview:
            Get the registered objects of the given aliases (all aliases by default), in registration order.
        """
        if aliases is None:
            aliases = self.keys()
        return OrderedDict((alias, self[alias]) for alias in aliases)
