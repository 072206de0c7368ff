from typing import Any

from searchgate.core import DataModel
from searchgate.core.exceptions import BadRequestError

from ._models import RefreshPolicy


class Helper:
    @staticmethod
    def get_body(response: Any) -> Any:
        # ObjectApiResponse and friends keep the decoded payload in body.
        return getattr(response, "body", response)

    @staticmethod
    def get_value(value: dict[str, Any] | DataModel) -> dict[str, Any]:
        if isinstance(value, DataModel):
            return value.to_dict()
        return value

    @staticmethod
    def get_id(
        value: dict[str, Any],
        id_field: str,
    ) -> str:
        if id_field not in value or value[id_field] in (None, ""):
            raise BadRequestError(
                f"Document id field '{id_field}' not found in document"
            )
        return str(value[id_field])

    @staticmethod
    def get_refresh(
        refresh: RefreshPolicy | bool | None,
    ) -> str | bool | None:
        if refresh is None or refresh is False:
            return None
        if isinstance(refresh, RefreshPolicy):
            return refresh.value
        return refresh
