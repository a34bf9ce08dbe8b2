"""
Common Schema Definitions

Enumerations shared by room, user and message records, plus the link
records embedded in most responses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .base import BaseResponse, WireEnum


class Color(WireEnum):
    """Background color of a message."""

    YELLOW = "yellow"
    GREEN = "green"
    RED = "red"
    PURPLE = "purple"
    GRAY = "gray"
    RANDOM = "random"

    @classmethod
    def default(cls) -> "Color":
        return cls.YELLOW


class Privacy(WireEnum):
    """Whether a room is visible to the whole group."""

    PUBLIC = "public"
    PRIVATE = "private"

    @classmethod
    def default(cls) -> "Privacy":
        return cls.PUBLIC


class MessageFormat(WireEnum):
    """How message text is rendered by clients."""

    HTML = "html"
    TEXT = "text"

    @classmethod
    def wire_label(cls) -> str:
        return "message_format"

    @classmethod
    def default(cls) -> "MessageFormat":
        return cls.HTML


class MessageType(WireEnum):
    """Kind of an item in a room or private history."""

    MESSAGE = "message"
    GUEST_ACCESS = "guest_access"
    TOPIC = "topic"
    NOTIFICATION = "notification"

    @classmethod
    def wire_label(cls) -> str:
        return "message type"

    @classmethod
    def default(cls) -> "MessageType":
        return cls.MESSAGE


@dataclass(frozen=True)
class SelfLinks(BaseResponse):
    """
    Links object carrying only the URL of the resource itself.

    Attributes:
        self_: URL of the resource (wire name ``self``)
    """

    self_: str = field(metadata={"wire": "self"})

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "SelfLinks":
        """Create from response data dictionary."""
        return cls(self_=data["self"])


@dataclass(frozen=True)
class PageLinks(BaseResponse):
    """
    Links object of a paginated list response.

    The prev/next cursors are opaque URLs and are passed through as-is.

    Attributes:
        self_: URL of the current page (wire name ``self``)
        prev: URL of the previous page, if any
        next: URL of the next page, if any
    """

    self_: str = field(metadata={"wire": "self"})
    prev: Optional[str] = None
    next: Optional[str] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "PageLinks":
        """Create from response data dictionary."""
        return cls(
            self_=data["self"],
            prev=data.get("prev"),
            next=data.get("next"),
        )
