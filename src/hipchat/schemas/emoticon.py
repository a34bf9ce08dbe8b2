"""
Emoticon Schema Definitions

This module defines the emoticon catalog record.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import DecodeError
from .base import BaseResponse


def decode_pixels(value: Any, name: str) -> int:
    """
    Decode a pixel size reported either as a number or a numeric string.

    Raises:
        DecodeError: For floats, booleans or any other value.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isdecimal():
        return int(value)
    raise DecodeError(f"invalid type for Emoticon.{name}")


@dataclass(frozen=True)
class Emoticon(BaseResponse):
    """
    A single emoticon from the group catalog.

    Attributes:
        id: Numeric emoticon identifier
        shortcut: Text that is replaced by the emoticon, without parentheses
        width: Image width in pixels
        height: Image height in pixels
        url: URL of the image, if reported
        audio_path: Path of the sound played with the emoticon, if any
    """

    id: int
    shortcut: str
    width: int
    height: int
    url: Optional[str] = None
    audio_path: Optional[str] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Emoticon":
        """Create from response data dictionary."""
        return cls(
            id=data["id"],
            shortcut=data["shortcut"],
            width=decode_pixels(data["width"], "width"),
            height=decode_pixels(data["height"], "height"),
            url=data.get("url"),
            audio_path=data.get("audio_path"),
        )
