from __future__ import annotations

from typing import Any

import yaml

from .data_model import DataModel
from .exceptions import LoadError

__all__ = [
    "ComponentConfig",
    "Manifest",
    "ProviderConfig",
    "MANIFEST_FILE",
]


MANIFEST_FILE = "searchgate.yaml"


class ProviderConfig(DataModel):
    """Provider entry of a component.

    ``type`` is a module under the component's providers package,
    or a full ``module:Class`` path.
    """

    type: str
    parameters: dict[str, Any] = dict()


class ComponentConfig(DataModel):
    """Component entry, keyed by its handle in the manifest."""

    type: str
    parameters: dict[str, Any] = dict()
    providers: dict[str, ProviderConfig] = dict()


class Manifest(DataModel):
    variables: dict[str, Any] = dict()
    components: dict[str, ComponentConfig] = dict()

    @staticmethod
    def parse(path: str) -> Manifest:
        try:
            with open(path, "r") as file:
                obj = yaml.safe_load(file) or {}
        except FileNotFoundError as e:
            raise LoadError(f"Manifest {path} not found") from e
        except yaml.YAMLError as e:
            raise LoadError(f"Manifest {path} is not valid YAML") from e
        return Manifest.from_dict(obj)
