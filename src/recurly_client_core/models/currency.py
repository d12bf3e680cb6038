"""Currencies supported by Recurly."""

from enum import Enum


class RecurlyCurrency(str, Enum):
    USD = "USD"  # United States Dollars
    AUD = "AUD"  # Australian Dollars
    CAD = "CAD"  # Canadian Dollars
    EUR = "EUR"  # Euros
    GBP = "GBP"  # British Pounds
    CZK = "CZK"  # Czech Korunas
    DKK = "DKK"  # Danish Krones
    HUF = "HUF"  # Hungarian Forints
    NOK = "NOK"  # Norwegian Krones
    NZD = "NZD"  # New Zealand Dollars
    PLN = "PLN"  # Polish Zloty
    SGD = "SGD"  # Singapore Dollars
    SEK = "SEK"  # Swedish Kronas
    CHF = "CHF"  # Swiss Francs
    ZAR = "ZAR"  # South African Rand

    @classmethod
    def from_code(cls, code: str | None) -> "RecurlyCurrency | None":
        """Look up a currency by code; None for unknown codes."""
        try:
            return cls(code)
        except ValueError:
            return None
