from __future__ import annotations

import json
from typing import Any

from .data_model import DataModel


class Operation(DataModel):
    """Operation dispatched from a component to its provider.

    Attributes:
        name: Operation name, without the async prefix.
        args: Operation arguments. Arguments that were None
            are not carried so the provider defaults apply.
    """

    name: str | None = None
    args: dict[str, Any] | None = None

    @staticmethod
    def normalize(
        name: str | None,
        args: dict[str, Any] | None,
    ) -> Operation:
        if args is None:
            return Operation(name=name)
        rargs: dict = {}
        for k, v in args.items():
            if k == "self":
                continue
            if k == "kwargs":
                rargs.update(v)
            elif v is not None:
                rargs[k] = v
        return Operation(name=name, args=rargs)

    def __str__(self) -> str:
        if not self.args:
            return self.name or ""
        args = ", ".join(
            f"{k}={self._str_value(v)}" for k, v in self.args.items()
        )
        return f"{self.name or ''}({args})"

    def _str_value(self, value: Any) -> str:
        if isinstance(value, DataModel):
            return value.to_json()
        try:
            return json.dumps(value, default=str)
        except (TypeError, ValueError):
            return str(value)
