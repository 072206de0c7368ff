from ._component import Component
from ._context import Context
from ._decorators import operation
from ._loader import Loader
from ._log_helper import get_logger, warn
from ._operation import Operation
from ._provider import Provider
from ._response import Response
from ._type_converter import TypeConverter
from .data_model import DataModel

__all__ = [
    "Component",
    "Context",
    "DataModel",
    "Loader",
    "Operation",
    "Provider",
    "Response",
    "TypeConverter",
    "get_logger",
    "operation",
    "warn",
]
