"""XML codec for request payloads and typed responses.

Wire conventions:
    - integers are decimal text content
    - timestamps are ISO-8601 (``2015-11-25T00:35:16Z``)
    - money is an integer count of minor units (cents), never a float; amounts
      in several currencies are nested per currency code::

          <unit_amount_in_cents><USD>1000</USD><EUR>800</EUR></unit_amount_in_cents>

Example:
    ```python
    from recurly_client_core.models import Account
    from recurly_client_core.serialize import XmlPayload, decode, encode

    body = encode(XmlPayload("account", account_code="acme"))
    account = decode(b"<account><account_code>acme</account_code></account>", Account)
    ```
"""

import dataclasses
import re
import types
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints
from xml.etree import ElementTree

import iso8601

from recurly_client_core.errors.exceptions import DecodingError, EncodingError
from recurly_client_core.models.base import RecurlyObject, RecurlyObjects
from recurly_client_core.payload import XmlPayload

AMOUNT_SUFFIX = "_in_cents"

# Anything outside the XML 1.0 Char production
_INVALID_CHAR = re.compile(r"[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
# XML Name production, without namespace prefixes
_NAME = re.compile(r"[^\W\d][\w.\-]*")

T = TypeVar("T")


# =============================================================================
# Encoding
# =============================================================================


def encode(payload: XmlPayload | RecurlyObject) -> bytes:
    """Serialize a payload to UTF-8 XML.

    The root element is the payload's ``root_name`` (or the model's
    ``xml_root``).

    Raises:
        EncodingError: If a value has no XML representation.
    """
    if isinstance(payload, RecurlyObject):
        payload = payload.to_payload()
    if not isinstance(payload, XmlPayload):
        raise EncodingError(f"Cannot encode {type(payload).__name__} as a request payload")
    if not payload.root_name:
        raise EncodingError("Payload has no root element name")

    root = ElementTree.Element(_element_name(payload.root_name))
    for key, value in payload.items():
        _append(root, str(key), value, amount=str(key).endswith(AMOUNT_SUFFIX))
    return ElementTree.tostring(root, encoding="UTF-8", xml_declaration=True)


def _append(parent: ElementTree.Element, tag: str, value: Any, *, amount: bool) -> None:
    if value is None:
        return
    el = ElementTree.SubElement(parent, _element_name(tag))

    if isinstance(value, RecurlyObject):
        value = value.to_payload()

    if isinstance(value, Mapping):
        for key, child in value.items():
            _append(el, str(key), child, amount=amount or str(key).endswith(AMOUNT_SUFFIX))
        return

    if isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, RecurlyObject):
                item = item.to_payload()
            if not isinstance(item, XmlPayload):
                raise EncodingError(
                    f"List items under <{tag}> need a root element name, got {type(item).__name__}"
                )
            _append(el, item.root_name, item, amount=amount)
        return

    el.text = _text(tag, value, amount=amount)


def _element_name(name: str) -> str:
    if not _NAME.fullmatch(name):
        raise EncodingError(f"{name!r} is not a valid XML element name")
    return name


def _text(tag: str, value: Any, *, amount: bool) -> str:
    if isinstance(value, Enum):
        value = value.value
    if amount:
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodingError(f"Amount <{tag}> must be an integer number of cents, got {value!r}")
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        invalid = _INVALID_CHAR.search(value)
        if invalid:
            raise EncodingError(f"Value of <{tag}> contains {invalid.group()!r}, which XML 1.0 cannot represent")
        return value
    if isinstance(value, datetime):
        text = value.isoformat()
        return text[:-6] + "Z" if text.endswith("+00:00") else text
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (Decimal, float)):
        return str(value)
    raise EncodingError(f"Cannot represent {type(value).__name__} value of <{tag}> as XML")


# =============================================================================
# Decoding
# =============================================================================


def decode(data: bytes | str, target_type: type[T]) -> T:
    """Deserialize one XML document into ``target_type``.

    Raises:
        DecodingError: If the document is malformed or its root element does
            not belong to ``target_type``.
    """
    if not data or not data.strip():
        raise DecodingError(f"Empty response body, expected <{_root_of(target_type)}>")
    try:
        root = ElementTree.fromstring(data)
    except ElementTree.ParseError as e:
        raise DecodingError(f"Malformed XML while decoding {target_type.__name__}: {e}") from e

    expected = _root_of(target_type)
    if root.tag != expected:
        raise DecodingError(f"Expected <{expected}> document for {target_type.__name__}, got <{root.tag}>")
    return _decode_element(root, target_type)


def _root_of(target_type: type) -> str:
    root = getattr(target_type, "xml_root", "")
    if not root:
        raise DecodingError(f"{target_type.__name__} does not declare an xml_root")
    return root


def _decode_element(el: ElementTree.Element, target_type: type[T]) -> T:
    if issubclass(target_type, RecurlyObjects):
        item_type = target_type.item_type
        return target_type(
            objects=[_decode_element(child, item_type) for child in el if child.tag == item_type.xml_root]
        )

    if not issubclass(target_type, RecurlyObject):
        raise DecodingError(f"{target_type.__name__} is not a Recurly resource type")

    hints = _field_hints(target_type)
    values: dict[str, Any] = {}
    for child in el:
        hint = hints.get(child.tag)
        if hint is None or child.tag == "href":
            continue
        values[child.tag] = _decode_value(child, hint)
    return target_type(href=el.get("href"), **values)


@lru_cache(maxsize=None)
def _field_hints(target_type: type) -> dict[str, Any]:
    hints = get_type_hints(target_type)
    return {f.name: _unwrap_optional(hints[f.name]) for f in dataclasses.fields(target_type)}


def _unwrap_optional(hint: Any) -> Any:
    if get_origin(hint) in (Union, types.UnionType):
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _decode_value(el: ElementTree.Element, hint: Any) -> Any:
    if el.get("nil") is not None:
        return None

    origin = get_origin(hint)
    if origin is list:
        (item_type,) = get_args(hint)
        return [_decode_element(child, item_type) for child in el if child.tag == item_type.xml_root]
    if origin is dict:
        return {child.tag: _scalar(child, int) for child in el}
    if isinstance(hint, type) and issubclass(hint, (RecurlyObject, RecurlyObjects)):
        return _decode_element(el, hint)
    return _scalar(el, hint)


def _scalar(el: ElementTree.Element, hint: Any) -> Any:
    text = el.text
    if hint is str:
        return text or ""
    if text is None or not text.strip():
        return None
    text = text.strip()

    try:
        if hint is bool:
            lowered = text.lower()
            if lowered not in ("true", "false"):
                raise ValueError(f"not a boolean: {text!r}")
            return lowered == "true"
        if hint is int:
            return int(text)
        if hint is datetime:
            return iso8601.parse_date(text, default_timezone=None)
        if hint is date:
            return date.fromisoformat(text)
        if hint is Decimal:
            return Decimal(text)
        if isinstance(hint, type) and issubclass(hint, Enum):
            return hint(text)
    except (ValueError, ArithmeticError, iso8601.ParseError) as e:
        raise DecodingError(f"Invalid value for <{el.tag}>: {e}") from e

    raise DecodingError(f"Unsupported field type {hint!r} for <{el.tag}>")
