"""
HipChat REST Client Package

This package provides a typed, synchronous client for the v2 REST API of
the chat service: rooms, users, history, emoticons and notifications.

Schemas are organized in the `schemas` subpackage by resource:
    - room: Room records, room filters, updates and notifications
    - user: User records and user filters
    - message: History records and history filters
    - emoticon: Emoticon catalog entries
"""

from .client import Client
from .config import ClientConfig
from .errors import (
    ClientError,
    DecodeError,
    HttpStatusError,
    ResponseReadError,
    TransportError,
)
from .schemas import (
    # Enumerations
    Color,
    MessageFormat,
    MessageType,
    Privacy,
    # Emoticon schemas
    Emoticon,
    # Room schemas
    Notification,
    Room,
    RoomDetail,
    RoomMessage,
    Rooms,
    RoomsRequest,
    RoomUpdate,
    RoomUpdateOwner,
    # User schemas
    User,
    UserDetail,
    Users,
    UsersRequest,
    # Message schemas
    Message,
    Messages,
    MessagesRequest,
)

__version__ = "0.1.0"

__all__ = [
    # Client classes
    "Client",
    "ClientConfig",
    # Errors
    "ClientError",
    "DecodeError",
    "HttpStatusError",
    "ResponseReadError",
    "TransportError",
    # Enumerations
    "Color",
    "MessageFormat",
    "MessageType",
    "Privacy",
    # Emoticon schemas
    "Emoticon",
    # Room schemas
    "Notification",
    "Room",
    "RoomDetail",
    "RoomMessage",
    "Rooms",
    "RoomsRequest",
    "RoomUpdate",
    "RoomUpdateOwner",
    # User schemas
    "User",
    "UserDetail",
    "Users",
    "UsersRequest",
    # Message schemas
    "Message",
    "Messages",
    "MessagesRequest",
]
