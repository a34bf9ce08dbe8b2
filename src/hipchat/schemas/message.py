"""
Message Schema Definitions

This module defines the records for room and private chat history.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..errors import DecodeError
from .base import BaseQuery, BaseResponse, decode_list, decode_optional
from .common import Color, MessageFormat, MessageType, PageLinks
from .user import UserDetail


@dataclass
class MessagesRequest(BaseQuery):
    """
    Filters for fetching history. Every field is optional.

    Attributes:
        start_index: Offset of the first message to return
        max_results: Maximum number of messages to return
        reversed: Return oldest messages first
        date: Latest date to fetch from, ISO 8601 or "recent"
        include_deleted: Include messages from deleted users
        timezone: Timezone used to interpret dates
        end_date: Earliest date to fetch to
    """

    start_index: Optional[int] = None
    max_results: Optional[int] = None
    reversed: Optional[bool] = None
    date: Optional[str] = None
    include_deleted: Optional[bool] = None
    timezone: Optional[str] = None
    end_date: Optional[str] = None


@dataclass(frozen=True)
class MessageFile(BaseResponse):
    """
    File attached to a message.

    Attributes:
        url: Download URL
        name: File name
        size: Size in bytes
        thumb_url: Thumbnail URL, for images
    """

    url: str
    name: str
    size: int
    thumb_url: Optional[str] = None


@dataclass(frozen=True)
class Message(BaseResponse):
    """
    One item of a room or private history.

    Attributes:
        id: Message identifier
        date: ISO 8601 time the message was sent
        message: Message text
        message_type: Kind of item (wire name ``type``)
        mentions: Mention names referenced by the message
        from_: Sender (wire name ``from``). A UserDetail for user messages,
            the integration label for notifications, None for system items.
        message_format: Rendering format, notifications only
        color: Background color, notifications only
        file: Attached file, if any
    """

    id: str
    date: str
    message: str
    message_type: MessageType = field(metadata={"wire": "type"})
    mentions: List[str] = field(default_factory=list)
    from_: Union[UserDetail, str, None] = field(
        default=None, metadata={"wire": "from"}
    )
    message_format: Optional[MessageFormat] = None
    color: Optional[Color] = None
    file: Optional[MessageFile] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Message":
        """Create from response data dictionary."""
        sender = data.get("from")
        if isinstance(sender, dict):
            sender = UserDetail._from_data(sender)

        mentions = data.get("mentions", [])
        if not isinstance(mentions, list):
            raise DecodeError("invalid type for Message.mentions")
        mentions = [
            item["mention_name"] if isinstance(item, dict) else item
            for item in mentions
        ]
        message_format = data.get("message_format")
        color = data.get("color")

        return cls(
            id=data["id"],
            date=data["date"],
            message=data["message"],
            message_type=MessageType.decode(data["type"]),
            mentions=mentions,
            from_=sender,
            message_format=(
                MessageFormat.decode(message_format)
                if message_format is not None
                else None
            ),
            color=Color.decode(color) if color is not None else None,
            file=decode_optional(MessageFile, data.get("file")),
        )


@dataclass(frozen=True)
class Messages(BaseResponse):
    """
    One page of history.

    Attributes:
        start_index: Offset of the first item (wire name ``startIndex``)
        max_results: Page size requested (wire name ``maxResults``)
        items: Messages on this page
        links: Pagination links
    """

    start_index: int = field(metadata={"wire": "startIndex"})
    max_results: int = field(metadata={"wire": "maxResults"})
    items: List[Message]
    links: PageLinks

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Messages":
        """Create from response data dictionary."""
        return cls(
            start_index=data["startIndex"],
            max_results=data["maxResults"],
            items=decode_list(Message, data["items"]),
            links=PageLinks._from_data(data["links"]),
        )
