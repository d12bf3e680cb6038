"""Base classes for typed Recurly resources."""

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from recurly_client_core.payload import XmlPayload


@dataclass
class RecurlyObject:
    """A single resource, serialized as ``<{xml_root}>...</{xml_root}>``.

    Subclasses declare one optional field per XML element, named exactly like
    the element. ``href`` is filled from the element attribute on responses
    and is never sent back.
    """

    xml_root: ClassVar[str] = ""

    href: str | None = field(default=None, kw_only=True, compare=False)

    def to_payload(self) -> XmlPayload:
        """Request body for this object, skipping unset fields."""
        payload = XmlPayload(self.xml_root)
        for f in dataclasses.fields(self):
            if f.name == "href":
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            payload[f.name] = _payload_value(value)
        return payload


def _payload_value(value: Any) -> Any:
    if isinstance(value, RecurlyObject):
        return value.to_payload()
    if isinstance(value, list):
        return [_payload_value(item) for item in value]
    return value


T = TypeVar("T", bound=RecurlyObject)


@dataclass
class RecurlyObjects(Generic[T]):
    """A list response such as ``<accounts type="array">``.

    Pages of the same list are merged by extending ``objects``.
    """

    xml_root: ClassVar[str] = ""
    item_type: ClassVar[type[RecurlyObject]] = RecurlyObject

    objects: list[T] = field(default_factory=list)

    def __iter__(self) -> Iterator[T]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __getitem__(self, index: int) -> T:
        return self.objects[index]
