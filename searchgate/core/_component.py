from __future__ import annotations

import uuid
from typing import Any

from ._context import Context
from ._operation import Operation
from ._provider import Provider
from ._response import Response
from .exceptions import NotSupportedError


class Component:
    __provider__: Provider
    __handle__: str | None
    __type__: str
    __unpack__: bool
    __native__: bool

    def __init__(
        self,
        **kwargs,
    ):
        self.__native__ = kwargs.pop("__native__", False)
        self.__unpack__ = kwargs.pop("__unpack__", False)
        self.__handle__ = kwargs.pop("__handle__", None)
        self.__type__ = kwargs.pop("__type__", self.__class__.__module__)
        if "__provider__" in kwargs:
            self.__bind__(kwargs.pop("__provider__"))

    def __bind__(
        self,
        provider: Provider | dict | str | None,
    ) -> None:
        if provider is None:
            return
        if isinstance(provider, Provider):
            provider.__component__ = self
            self.__provider__ = provider
            return
        if isinstance(provider, dict):
            provider = dict(provider)
            type = provider.pop("type")
            parameters = provider.pop("parameters", dict())
        else:
            type = provider
            parameters = dict()
        from ._loader import Loader

        package_name = self.__class__.__module__.rsplit(".", 1)[0]
        provider_instance = Loader.load_provider_instance(
            path=Loader.get_provider_path(package_name, type),
            parameters=parameters,
        )
        self.__bind__(provider=provider_instance)

    def __setup__(self, context: Context | None = None) -> None:
        self.__provider__.__setup__(context=context)

    async def __asetup__(self, context: Context | None = None) -> None:
        await self.__provider__.__asetup__(context=context)

    def __run__(
        self,
        operation: dict | str | Operation | None = None,
        context: dict | Context | None = None,
        **kwargs,
    ) -> Any:
        if not hasattr(self, "__provider__"):
            raise NotSupportedError("No provider bound to the component.")
        response = self.__provider__.__run__(
            operation=self._convert_operation(operation),
            context=self._init_context(context),
            **kwargs,
        )
        return self._finalize(response)

    async def __arun__(
        self,
        operation: dict | str | Operation | None = None,
        context: dict | Context | None = None,
        **kwargs,
    ) -> Any:
        if not hasattr(self, "__provider__"):
            raise NotSupportedError("No provider bound to the component.")
        response = await self.__provider__.__arun__(
            operation=self._convert_operation(operation),
            context=self._init_context(context),
            **kwargs,
        )
        return self._finalize(response)

    def _finalize(self, response: Any) -> Any:
        if not isinstance(response, Response):
            return response
        if not self.__native__:
            response.native = None
        if self.__unpack__:
            return response.result
        return response

    def _convert_operation(
        self,
        operation: dict | str | Operation | None,
    ) -> Operation | None:
        if isinstance(operation, dict):
            return Operation.from_dict(operation)
        elif isinstance(operation, str):
            return Operation(name=operation)
        return operation

    def _init_context(
        self,
        context: dict | Context | None,
    ) -> Context:
        if isinstance(context, dict):
            context = Context.from_dict(context)
        return Context(
            id=context.id if context and context.id else str(uuid.uuid4()),
            data=context.data if context else None,
        )
