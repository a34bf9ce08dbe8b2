"""
Schemas Package

This package contains the typed records exchanged with the REST API.
Schemas are organized by resource: room, user, message and emoticon, with
shared enumerations and link records in `common`.

The package provides base classes (BaseRequest, BaseQuery, BaseResponse,
WireEnum) that hold the serialization and deserialization rules.
"""

from .base import BaseQuery, BaseRequest, BaseResponse, WireEnum
from .common import (
    Color,
    MessageFormat,
    MessageType,
    PageLinks,
    Privacy,
    SelfLinks,
)
from .emoticon import Emoticon
from .room import (
    Notification,
    Room,
    RoomAvatarUpdate,
    RoomDetail,
    RoomDetailLinks,
    RoomDetailOwner,
    RoomDetailStatistics,
    RoomMessage,
    Rooms,
    RoomsRequest,
    RoomUpdate,
    RoomUpdateOwner,
    SendMessageRequest,
)
from .user import (
    User,
    UserClient,
    UserDetail,
    UserPresence,
    Users,
    UsersRequest,
)
from .message import Message, MessageFile, Messages, MessagesRequest

__all__ = [
    # Base classes
    "BaseQuery",
    "BaseRequest",
    "BaseResponse",
    "WireEnum",
    # Enumerations and links
    "Color",
    "MessageFormat",
    "MessageType",
    "PageLinks",
    "Privacy",
    "SelfLinks",
    # Emoticon schemas
    "Emoticon",
    # Room schemas
    "Notification",
    "Room",
    "RoomAvatarUpdate",
    "RoomDetail",
    "RoomDetailLinks",
    "RoomDetailOwner",
    "RoomDetailStatistics",
    "RoomMessage",
    "Rooms",
    "RoomsRequest",
    "RoomUpdate",
    "RoomUpdateOwner",
    "SendMessageRequest",
    # User schemas
    "User",
    "UserClient",
    "UserDetail",
    "UserPresence",
    "Users",
    "UsersRequest",
    # Message schemas
    "Message",
    "MessageFile",
    "Messages",
    "MessagesRequest",
]
