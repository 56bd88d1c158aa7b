"""
cep_weather.zipcode

Postal code (CEP) validation shared by both services.

Responsibilities:
- Decide whether a raw string is a well-formed CEP.
- Normalize a valid CEP to the 8-digit form external providers expect.
"""

from __future__ import annotations

import re

from cep_weather.errors import InvalidZipcode

# Eight ASCII digits with an optional hyphen after the fifth one.
ZIPCODE_PATTERN = re.compile(r"[0-9]{5}-?[0-9]{3}")


def is_valid_zipcode(value: str) -> bool:
    return ZIPCODE_PATTERN.fullmatch(value) is not None


def ensure_valid_zipcode(value: str) -> str:
    if not is_valid_zipcode(value):
        raise InvalidZipcode()
    return value


def normalize_zipcode(value: str) -> str:
    return value.replace("-", "")
