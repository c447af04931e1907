"""Shared annotated field types."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, StringConstraints


def _check_phone(value: str) -> str:
    if sum(ch.isdigit() for ch in value) < 10:
        raise ValueError("Phone number must contain at least 10 digits")
    return value


# Required free text: surrounding whitespace stripped, must not be blank.
Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Phone = Annotated[Text, AfterValidator(_check_phone)]
