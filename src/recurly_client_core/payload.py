"""Request payloads."""

from collections.abc import Mapping
from typing import Any


class XmlPayload(dict):
    """Ordered request body with the name of its root XML element.

    Example:
        ```python
        payload = XmlPayload("account", account_code="acme", email="billing@acme.test")
        # <account><account_code>acme</account_code><email>...</email></account>
        ```
    """

    def __init__(self, root_name: str, mapping: Mapping[str, Any] | None = None, /, **fields: Any):
        super().__init__(mapping or {}, **fields)
        self.root_name = root_name

    def __repr__(self) -> str:
        return f"XmlPayload({self.root_name!r}, {dict.__repr__(self)})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, XmlPayload):
            return self.root_name == other.root_name and dict.__eq__(self, other)
        return dict.__eq__(self, other)

    __hash__ = None  # type: ignore[assignment]
