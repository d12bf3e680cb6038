"""Recurly XML error documents.

Recurly reports failures either as a single error::

    <error>
      <symbol>not_found</symbol>
      <description lang="en-US">Couldn't find Account with account_code = abc</description>
    </error>

or as a list of field errors::

    <errors>
      <error field="account.email" symbol="invalid_email">is not a valid email</error>
    </errors>
"""

import dataclasses
from dataclasses import dataclass
from xml.etree import ElementTree


@dataclass
class ErrorDetail:
    """Parsed Recurly error document."""

    symbol: str | None = None
    description: str | None = None
    field: str | None = None
    # Per-field errors from an <errors> document
    errors: list[dict[str, str | None]] = dataclasses.field(default_factory=list)

    @classmethod
    def from_text(cls, text: str | None) -> "ErrorDetail | None":
        """Parse an error body.

        Returns:
            ErrorDetail, or None if the body is empty or not a Recurly error document.
        """
        if not text or not text.strip():
            return None
        try:
            doc = ElementTree.fromstring(text)
        except ElementTree.ParseError:
            return None

        if doc.tag == "error":
            return cls(
                symbol=doc.findtext("symbol"),
                description=doc.findtext("description") or (doc.text or "").strip() or None,
                field=doc.get("field") or doc.findtext("field"),
            )

        if doc.tag == "errors":
            errors = [
                {
                    "field": el.get("field"),
                    "symbol": el.get("symbol") or el.findtext("symbol"),
                    "message": (el.text or "").strip() or el.findtext("description"),
                }
                for el in doc.findall("error")
            ]
            first = errors[0] if errors else {}
            return cls(
                symbol=first.get("symbol"),
                description=first.get("message"),
                field=first.get("field"),
                errors=errors,
            )

        return None

    def to_exception_message(self) -> str:
        """Human readable one-line summary."""
        parts = []
        if self.symbol:
            parts.append(f"[{self.symbol}]")
        if self.field:
            parts.append(f"{self.field}:")
        if self.description:
            parts.append(self.description)
        return " ".join(parts) if parts else "Unknown API error"
