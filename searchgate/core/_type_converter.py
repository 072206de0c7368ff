import inspect
import json
import types
from enum import Enum
from typing import Any, Union, get_args, get_origin, get_type_hints


class TypeConverter:
    @staticmethod
    def convert_value(value: Any, expected_type: Any) -> Any:
        if value is None or expected_type is None or expected_type is Any:
            return value

        origin = get_origin(expected_type)
        if origin in (Union, types.UnionType):
            members = [
                t for t in get_args(expected_type) if t is not type(None)
            ]
            # Leave the value alone when it already matches a member.
            for member in members:
                check = get_origin(member) or member
                if isinstance(check, type) and isinstance(value, check):
                    return value
            for member in members:
                converted = TypeConverter.convert_value(value, member)
                if converted is not value:
                    return converted
            return value

        if isinstance(value, list) and origin in (list, tuple):
            args = get_args(expected_type)
            elem_type = args[0] if args else Any
            return [TypeConverter.convert_value(v, elem_type) for v in value]

        if isinstance(value, dict) and origin is dict:
            args = get_args(expected_type)
            key_type, val_type = args if args else (Any, Any)
            return {
                TypeConverter.convert_value(
                    k, key_type
                ): TypeConverter.convert_value(v, val_type)
                for k, v in value.items()
            }

        if inspect.isclass(expected_type) and issubclass(expected_type, Enum):
            if isinstance(value, expected_type):
                return value
            try:
                return expected_type(value)
            except ValueError:
                return value

        if hasattr(expected_type, "from_dict") and callable(
            getattr(expected_type, "from_dict")
        ):
            if isinstance(value, dict):
                return expected_type.from_dict(value)
            if isinstance(value, str):
                return expected_type.from_dict(json.loads(value))

        try:
            if expected_type is bool and isinstance(value, str):
                lowered = value.strip().lower()
                if lowered in ("true", "1", "yes"):
                    return True
                if lowered in ("false", "0", "no"):
                    return False
                return value
            if expected_type is int and isinstance(value, (str, float)):
                return int(value)
            if expected_type is float and isinstance(value, (str, int)):
                return float(value)
            if expected_type is str and isinstance(value, (int, float)):
                return str(value)
            if expected_type is dict and isinstance(value, (str, bytes)):
                return json.loads(value)
            if expected_type is list and isinstance(value, tuple):
                return list(value)
        except (ValueError, TypeError):
            pass  # Unconvertible values are passed through as is.

        return value

    @staticmethod
    def convert_args(method, args: dict) -> dict:
        sig = inspect.signature(method)
        hints = get_type_hints(method)
        converted_args: dict = {}
        for param_name in sig.parameters:
            if param_name in args:
                converted_args[param_name] = TypeConverter.convert_value(
                    args[param_name], hints.get(param_name, None)
                )
        return args | converted_args
