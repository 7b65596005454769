"""Normalise the two status encodings served by SmartControl firmware.

Older firmware answers with a JSON document whose ``C.ch`` array holds the
four channel percentages. Newer firmware serves ``statusvars.js``, a flat
list of ``key=value;`` assignments in which ``brightness=[w,b,g,r]``
carries the same information.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ParseError
from .models import ChannelReading

_LOGGER = logging.getLogger(__name__)

BRIGHTNESS_KEY = "brightness"


class ChannelBlock(BaseModel):
    """The ``C`` section of a structured status document."""

    model_config = ConfigDict(extra="ignore")

    ch: list[float | str]
    no: int | None = None


class StatusPayload(BaseModel):
    """Structured status document returned by JSON firmware."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    channels: ChannelBlock = Field(alias="C")


@dataclass(frozen=True, slots=True)
class StructuredReading:
    """A decoded JSON status document."""

    payload: Mapping[str, Any]

    def channels(self) -> ChannelReading:
        """Extract the channel array from ``C.ch``."""

        try:
            status = StatusPayload.model_validate(self.payload)
        except ValidationError as exc:
            raise ParseError(f"Invalid structured status payload: {exc}") from exc
        return ChannelReading.from_values(status.channels.ch)


@dataclass(frozen=True, slots=True)
class FlatStringReading:
    """A ``key=value;`` status string."""

    text: str

    def assignments(self) -> dict[str, str]:
        """Split the text into its individual assignments."""

        result: dict[str, str] = {}
        for entry in self.text.split(";"):
            key, sep, value = entry.partition("=")
            if not sep:
                continue
            result[key.strip()] = value.strip()
        return result

    def channels(self) -> ChannelReading:
        """Extract the bracketed ``brightness`` tuple."""

        raw = self.assignments().get(BRIGHTNESS_KEY)
        if raw is None:
            raise ParseError("Status string has no brightness entry")
        raw = raw.strip("'\"").strip()
        if not (raw.startswith("[") and raw.endswith("]")):
            raise ParseError(f"Brightness entry {raw!r} is not a bracketed tuple")
        values = [item.strip() for item in raw[1:-1].split(",")]
        return ChannelReading.from_values(values)


StatusReading = StructuredReading | FlatStringReading


def classify(payload: Any) -> StatusReading:
    """Return the reading variant matching the shape of ``payload``."""

    if isinstance(payload, Mapping):
        return StructuredReading(payload)
    if isinstance(payload, str) and ";" in payload and "=" in payload:
        return FlatStringReading(payload)
    raise ParseError(f"Unrecognised status payload: {payload!r:.80}")


def normalize(payload: Any) -> ChannelReading:
    """Convert a raw status payload into a canonical channel reading."""

    reading = classify(payload)
    channels = reading.channels()
    _LOGGER.debug("Normalised %s to %s", type(reading).__name__, channels)
    return channels
