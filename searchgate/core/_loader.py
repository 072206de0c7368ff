from __future__ import annotations

import copy
import importlib
import inspect
import os
import re
from typing import Any

from ._component import Component, Provider
from ._log_helper import warn
from ._type_converter import TypeConverter
from .exceptions import LoadError
from .manifest import MANIFEST_FILE, Manifest

REF_PATTERN = re.compile(r"^\$\{(.+)\}$")


class Loader:
    """Load components and their providers from a YAML manifest."""

    path: str
    manifest_path: str
    manifest: Manifest

    def __init__(
        self,
        path: str = ".",
        manifest: str = MANIFEST_FILE,
    ):
        self.path = path
        self.manifest_path = os.path.join(path, manifest)
        self.manifest = Manifest.parse(path=self.manifest_path)

    def load_component(
        self,
        handle: str,
        provider: str | None = None,
    ) -> Component:
        if handle not in self.manifest.components:
            raise LoadError(f"Component handle {handle} not found")
        config = self.manifest.components[handle]
        if not config.providers:
            raise LoadError(f"No providers configured for {handle}")
        if provider is None:
            provider = next(iter(config.providers.keys()))
            if len(config.providers) > 1:
                warn(
                    "No provider selected for %s. Using provider %s.",
                    handle,
                    provider,
                )
        elif provider not in config.providers:
            raise LoadError(f"Provider {provider} not found for {handle}")
        pconfig = config.providers[provider]
        provider_instance = Loader.load_provider_instance(
            path=Loader.get_provider_path(config.type, pconfig.type),
            parameters=self._resolve_param(copy.deepcopy(pconfig.parameters)),
        )
        provider_instance.__handle__ = provider
        component = Loader.load_component_instance(
            path=Loader.get_component_path(config.type),
            parameters=self._resolve_param(copy.deepcopy(config.parameters)),
            provider=provider_instance,
        )
        component.__handle__ = handle
        return component

    def _resolve_param(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: self._resolve_param(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [self._resolve_param(item) for item in value]
        elif isinstance(value, str):
            match = REF_PATTERN.match(value)
            if match:
                return self._resolve_ref(match.group(1))
        return value

    def _resolve_ref(self, ref: str) -> Any:
        if ref.startswith("env."):
            name = ref[len("env.") :]
            value = os.getenv(name)
            if value is None:
                raise LoadError(f"Environment variable {name} is not set")
            return value
        if ref.startswith("variables."):
            name = ref[len("variables.") :]
            if name not in self.manifest.variables:
                raise LoadError(f"Variable {name} not found")
            return self.manifest.variables[name]
        raise LoadError(f"Unsupported reference ${{{ref}}}")

    @staticmethod
    def get_component_path(component_type: str) -> str:
        if ":" in component_type:
            return component_type
        return f"{component_type}.component"

    @staticmethod
    def get_provider_path(component_type: str, provider_type: str) -> str:
        if ":" in provider_type or ".providers." in provider_type:
            return provider_type
        return f"{component_type}.providers.{provider_type}"

    @staticmethod
    def load_provider_instance(
        path: str,
        parameters: dict[str, Any] | None = None,
    ) -> Provider:
        provider = Loader.load_class(path, Provider)
        converted_parameters = TypeConverter.convert_args(
            provider.__init__, parameters or {}
        )
        return provider(**converted_parameters)

    @staticmethod
    def load_component_instance(
        path: str,
        parameters: dict[str, Any],
        provider: Provider | None,
    ) -> Component:
        component = Loader.load_class(path, Component)
        converted_parameters = TypeConverter.convert_args(
            component.__init__, parameters
        )
        return component(__provider__=provider, **converted_parameters)

    @staticmethod
    def load_class(path: str, type: Any) -> Any:
        module_name, _, class_name = path.partition(":")
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise LoadError(f"Module {module_name} could not be loaded") from e
        if class_name:
            cls = getattr(module, class_name, None)
            if cls is None:
                raise LoadError(f"{class_name} not found in {module_name}")
            return cls
        for _, cls in inspect.getmembers(module, inspect.isclass):
            if issubclass(cls, type) and cls.__module__ == module_name:
                return cls
        raise LoadError(f"{type.__name__} not found at {module_name}")
