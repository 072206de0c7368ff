import asyncio
from typing import Any

from ._context import Context
from ._log_helper import get_logger
from ._operation import Operation
from ._type_converter import TypeConverter
from .exceptions import NotSupportedError

logger = get_logger(__name__)


class Provider:
    __component__: Any
    __handle__: str | None
    __type__: str

    def __init__(self, **kwargs):
        self.__handle__ = kwargs.pop("__handle__", None)
        self.__type__ = kwargs.pop("__type__", self.__class__.__module__)
        for key, value in kwargs.items():
            setattr(self, key, value)

    def __setup__(self, context: Context | None = None) -> None:
        pass

    async def __asetup__(self, context: Context | None = None) -> None:
        self.__setup__(context=context)

    def __run__(
        self,
        operation: Operation | None = None,
        context: Context | None = None,
        **kwargs,
    ) -> Any:
        if operation and operation.name:
            func = getattr(self, operation.name, None)
            if func and callable(func):
                logger.debug(
                    "Running %s on %s", operation.name, self.__type__
                )
                self.__setup__(context=context)
                args = TypeConverter.convert_args(func, operation.args or {})
                return func(**args)
        raise NotSupportedError(
            operation.to_json() if operation is not None else None
        )

    async def __arun__(
        self,
        operation: Operation | None = None,
        context: Context | None = None,
        **kwargs,
    ) -> Any:
        if operation and operation.name:
            afunc = getattr(self, f"a{operation.name}", None)
            if afunc and callable(afunc):
                logger.debug(
                    "Running a%s on %s", operation.name, self.__type__
                )
                await self.__asetup__(context=context)
                args = TypeConverter.convert_args(afunc, operation.args or {})
                return await afunc(**args)

        return await asyncio.to_thread(
            self.__run__,
            operation=operation,
            context=context,
            **kwargs,
        )
