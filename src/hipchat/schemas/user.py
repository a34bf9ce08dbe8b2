"""
User Schema Definitions

This module defines the records for user operations: the summary and
detail forms of a user, presence information and the paginated user list.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import BaseQuery, BaseResponse, decode_list, decode_optional
from .common import PageLinks, SelfLinks


@dataclass
class UsersRequest(BaseQuery):
    """
    Filters for listing users. Every field is optional.

    Attributes:
        start_index: Offset of the first user to return
        max_results: Maximum number of users to return
        include_guests: Include guest users
        include_deleted: Include deleted users
    """

    start_index: Optional[int] = None
    max_results: Optional[int] = None
    include_guests: Optional[bool] = None
    include_deleted: Optional[bool] = None


@dataclass(frozen=True)
class User(BaseResponse):
    """
    Summary form of a user, as returned in list results.

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
    def _from_data(cls, data: Dict[str, Any]) -> "User":
        """Create from response data dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            mention_name=data["mention_name"],
            links=SelfLinks._from_data(data["links"]),
        )


@dataclass(frozen=True)
class Users(BaseResponse):
    """
    One page of users.

    Attributes:
        start_index: Offset of the first item (wire name ``startIndex``)
        max_results: Page size requested (wire name ``maxResults``)
        items: Users on this page
        links: Pagination links
    """

    start_index: int = field(metadata={"wire": "startIndex"})
    max_results: int = field(metadata={"wire": "maxResults"})
    items: List[User]
    links: PageLinks

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "Users":
        """Create from response data dictionary."""
        return cls(
            start_index=data["startIndex"],
            max_results=data["maxResults"],
            items=decode_list(User, data["items"]),
            links=PageLinks._from_data(data["links"]),
        )


@dataclass(frozen=True)
class UserClient(BaseResponse):
    """
    Client the user is connected with.

    Attributes:
        version: Client version
        client_type: Client kind, e.g. "http://hipchat.com/client/mac"
            (wire name ``type``)
    """

    version: Optional[str] = None
    client_type: Optional[str] = field(default=None, metadata={"wire": "type"})

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "UserClient":
        """Create from response data dictionary."""
        return cls(version=data.get("version"), client_type=data.get("type"))


@dataclass(frozen=True)
class UserPresence(BaseResponse):
    """
    Presence of a user.

    Attributes:
        show: Availability, e.g. "chat", "away", "dnd"
        is_online: Whether the user is connected
        status: Free-form status text
        idle: Seconds the user has been idle
        client: Client the user is connected with
    """

    show: Optional[str]
    is_online: bool
    status: Optional[str] = None
    idle: Optional[int] = None
    client: Optional[UserClient] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "UserPresence":
        """Create from response data dictionary."""
        return cls(
            show=data.get("show"),
            is_online=data["is_online"],
            status=data.get("status"),
            idle=data.get("idle"),
            client=decode_optional(UserClient, data.get("client")),
        )


@dataclass(frozen=True)
class UserDetail(BaseResponse):
    """
    Expanded form of a user.

    Also used as the sender of history messages, where the server only
    sends the identifying fields.
    """

    id: int
    name: str
    mention_name: str
    links: SelfLinks
    xmpp_jid: Optional[str] = None
    email: Optional[str] = None
    title: Optional[str] = None
    timezone: Optional[str] = None
    photo_url: Optional[str] = None
    presence: Optional[UserPresence] = None
    is_deleted: Optional[bool] = None
    is_guest: Optional[bool] = None
    is_group_admin: Optional[bool] = None
    created: Optional[str] = None
    last_active: Optional[str] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "UserDetail":
        """Create from response data dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            mention_name=data["mention_name"],
            links=SelfLinks._from_data(data["links"]),
            xmpp_jid=data.get("xmpp_jid"),
            email=data.get("email"),
            title=data.get("title"),
            timezone=data.get("timezone"),
            photo_url=data.get("photo_url"),
            presence=decode_optional(UserPresence, data.get("presence")),
            is_deleted=data.get("is_deleted"),
            is_guest=data.get("is_guest"),
            is_group_admin=data.get("is_group_admin"),
            created=data.get("created"),
            last_active=data.get("last_active"),
        )
