"""Static ISO 4217 code to display symbol table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        "USD": "$",
        "EUR": "€",
        "GBP": "£",
        "JPY": "¥",
        "CAD": "C$",
        "AUD": "A$",
        "CHF": "CHF",
        "CNY": "¥",
        "INR": "₹",
        "KRW": "₩",
        "RUB": "₽",
        "BRL": "R$",
        "MXN": "$",
        "SGD": "S$",
        "HKD": "HK$",
        "SEK": "kr",
        "NOK": "kr",
        "DKK": "kr",
        "PLN": "zł",
        "CZK": "Kč",
        "HUF": "Ft",
        "RON": "lei",
        "BGN": "лв",
        "HRK": "kn",
        "RSD": "дин.",
        "UAH": "₴",
        "TRY": "₺",
        "ILS": "₪",
        "AED": "د.إ",
        "SAR": "ر.س",
        "QAR": "ر.ق",
        "KWD": "د.ك",
        "BHD": ".د.ب",
        "OMR": "ر.ع.",
        "JOD": "د.ا",
        "LBP": "ل.ل",
        "EGP": "ج.م",
        "ZAR": "R",
        "NGN": "₦",
        "KES": "KSh",
        "GHS": "GH₵",
        "UGX": "USh",
        "TZS": "TSh",
        "ZMW": "ZK",
        "BWP": "P",
        "MUR": "₨",
        "MAD": "د.م.",
        "TND": "د.ت",
        "DZD": "د.ج",
        "LYD": "ل.د",
        "SDG": "ج.س.",
        "ETB": "Br",
        "DJF": "Fdj",
        "KMF": "CF",
        "MGA": "Ar",
        "BIF": "FBu",
        "RWF": "FRw",
        "MWK": "MK",
        "ZWL": "Z$",
    }
)
