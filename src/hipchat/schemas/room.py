"""
Room Schema Definitions

This module defines the records for room operations: the summary and
detail forms of a room, the paginated room list, the sparse update body,
and the notification and message payloads sent to a room.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import (
    BaseQuery,
    BaseRequest,
    BaseResponse,
    decode_list,
    decode_optional,
)
from .common import Color, MessageFormat, PageLinks, Privacy, SelfLinks


@dataclass
class RoomsRequest(BaseQuery):
    """
    Filters for listing rooms. Every field is optional.

    Attributes:
        start_index: Offset of the first room to return
        max_results: Maximum number of rooms to return
        include_private: Include private rooms
        include_archived: Include archived rooms
    """

    start_index: Optional[int] = None
    max_results: Optional[int] = None
    include_private: Optional[bool] = None
    include_archived: Optional[bool] = None


@dataclass(frozen=True)
class RoomDetailLinks(BaseResponse):
    """
    Links embedded in a room record.

    Attributes:
        self_: URL of the room (wire name ``self``)
        webhooks: URL of the room's webhooks
        participants: URL of the room's participants
        members: URL of the room's members, only present for private rooms
    """

    self_: str = field(metadata={"wire": "self"})
    webhooks: str
    participants: str
    members: Optional[str] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "RoomDetailLinks":
        """Create from response data dictionary."""
        return cls(
            self_=data["self"],
            webhooks=data["webhooks"],
            participants=data["participants"],
            members=data.get("members"),
        )


@dataclass(frozen=True)
class Room(BaseResponse):
    """
    Summary form of a room, as returned in list results.

    Attributes:
        id: Numeric room identifier
        name: Room name, usable in place of the id in paths
        links: Links of the room
    """

    id: int
    name: str
    links: RoomDetailLinks

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Room":
        """Create from response data dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            links=RoomDetailLinks._from_data(data["links"]),
        )


@dataclass(frozen=True)
class Rooms(BaseResponse):
    """
    One page of rooms.

    Attributes:
        start_index: Offset of the first item (wire name ``startIndex``)
        max_results: Page size requested (wire name ``maxResults``)
        items: Rooms on this page
        links: Pagination links
    """

    start_index: int = field(metadata={"wire": "startIndex"})
    max_results: int = field(metadata={"wire": "maxResults"})
    items: List[Room]
    links: PageLinks

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Rooms":
        """Create from response data dictionary."""
        return cls(
            start_index=data["startIndex"],
            max_results=data["maxResults"],
            items=decode_list(Room, data["items"]),
            links=PageLinks._from_data(data["links"]),
        )


@dataclass(frozen=True)
class RoomDetailStatistics(BaseResponse):
    """Pointer to the room's statistics resource."""

    links: SelfLinks

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "RoomDetailStatistics":
        """Create from response data dictionary."""
        return cls(links=SelfLinks._from_data(data["links"]))


@dataclass(frozen=True)
class RoomDetailOwner(BaseResponse):
    """
    Owner of a room.

    Attributes:
        id: Numeric user identifier
        name: Display name
        mention_name: Name used to @mention the user
        links: Links of the user
    """

    id: int
    name: str
    mention_name: str
    links: SelfLinks

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "RoomDetailOwner":
        """Create from response data dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            mention_name=data["mention_name"],
            links=SelfLinks._from_data(data["links"]),
        )


@dataclass(frozen=True)
class RoomDetail(BaseResponse):
    """
    Expanded form of a room, as returned by a single-room fetch.

    Attributes:
        id: Numeric room identifier
        name: Room name
        xmpp_jid: XMPP JID of the room
        created: ISO 8601 creation time
        is_archived: Whether the room is archived
        privacy: Public or private
        is_guest_accessible: Whether guests may join
        topic: Current topic
        links: Links of the room
        statistics: Pointer to room statistics
        owner: Room owner, if reported
        avatar_url: URL of the room avatar, if any
        guest_access_url: Guest URL, only set when guest access is on
    """

    id: int
    name: str
    xmpp_jid: str
    created: str
    is_archived: bool
    privacy: Privacy
    is_guest_accessible: bool
    topic: str
    links: RoomDetailLinks
    statistics: RoomDetailStatistics
    owner: Optional[RoomDetailOwner] = None
    avatar_url: Optional[str] = None
    guest_access_url: Optional[str] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "RoomDetail":
        """Create from response data dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            xmpp_jid=data["xmpp_jid"],
            created=data["created"],
            is_archived=data["is_archived"],
            privacy=Privacy.decode(data["privacy"]),
            is_guest_accessible=data["is_guest_accessible"],
            topic=data["topic"],
            links=RoomDetailLinks._from_data(data["links"]),
            statistics=RoomDetailStatistics._from_data(data["statistics"]),
            owner=decode_optional(RoomDetailOwner, data.get("owner")),
            avatar_url=data.get("avatar_url"),
            guest_access_url=data.get("guest_access_url"),
        )


@dataclass
class RoomUpdateOwner(BaseRequest):
    """
    New owner of a room.

    Attributes:
        id: User id, email or @mention name of the new owner
    """

    id: Optional[str] = None


@dataclass
class RoomUpdate(BaseRequest):
    """
    Sparse patch for a room. Absent fields keep their current value.

    Attributes:
        name: New room name
        privacy: New privacy setting
        is_archived: Archive or unarchive the room
        is_guest_accessible: Enable or disable guest access
        topic: New topic
        owner: New owner
    """

    name: Optional[str] = None
    privacy: Optional[Privacy] = None
    is_archived: Optional[bool] = None
    is_guest_accessible: Optional[bool] = None
    topic: Optional[str] = None
    owner: Optional[RoomUpdateOwner] = None


@dataclass
class SendMessageRequest(BaseRequest):
    """
    Plain chat message sent to a room or user.

    Attributes:
        message: Message text
    """

    message: str


@dataclass(frozen=True)
class RoomMessage(BaseResponse):
    """
    Result of sending a message to a room.

    Attributes:
        id: Identifier of the created message
        timestamp: ISO 8601 time the message was stored
    """

    id: str
    timestamp: str


@dataclass
class Notification(BaseRequest):
    """
    Notification sent to a room by an integration.

    Attributes:
        color: Background color
        message: Notification text
        notify: Whether the notification should trigger user alerts
        message_format: How the text is rendered
        from_: Label shown next to the sender (wire name ``from``)
    """

    color: Color = Color.YELLOW
    message: str = ""
    notify: bool = False
    message_format: MessageFormat = MessageFormat.HTML
    from_: Optional[str] = field(default=None, metadata={"wire": "from"})


@dataclass
class RoomAvatarUpdate(BaseRequest):
    """
    New avatar for a room.

    Attributes:
        avatar: Base64 encoded image
    """

    avatar: str
