"""XML payload codec."""

from recurly_client_core.payload import XmlPayload
from recurly_client_core.serialize.codec import decode, encode

__all__ = ["XmlPayload", "decode", "encode"]
