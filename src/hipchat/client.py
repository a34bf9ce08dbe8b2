"""
REST Client for the Chat Service API

This module provides the Client class that performs the typed round trips
against the v2 REST API. Every public method maps onto one endpoint: it
builds the URL, attaches the bearer token, sends an optional JSON body,
checks the status class and decodes the body into a schema record.

Architecture:
    - Synchronous httpx.Client shared by all calls
    - Supports dependency injection for the transport (for testability)
    - No caching, retries or background work; a failed call raises once

Usage:
    with Client("https://api.hipchat.com", token) as client:
        room = client.get_room("general")
        client.send_notification("general", Notification(message="hi"))
"""

import logging
from typing import Any, Optional, Type, TypeVar

import httpx

from .config import DEFAULT_TIMEOUT, ClientConfig
from .errors import (
    DecodeError,
    HttpStatusError,
    ResponseReadError,
    TransportError,
)
from .schemas import (
    BaseQuery,
    BaseRequest,
    BaseResponse,
    Emoticon,
    Messages,
    MessagesRequest,
    Notification,
    RoomAvatarUpdate,
    RoomDetail,
    RoomMessage,
    Rooms,
    RoomsRequest,
    RoomUpdate,
    SendMessageRequest,
    UserDetail,
    Users,
    UsersRequest,
)

logger = logging.getLogger(__name__)

API_VERSION = "v2"

T = TypeVar("T", bound=BaseResponse)


class Client:
    """
    Typed client for the chat service REST API.

    The client only holds immutable configuration and the underlying
    httpx.Client, so one instance can be shared between threads.

    Attributes:
        origin: Scheme and host the client talks to
        base_url: Origin joined with the API version prefix
        timeout: Read/write timeout in seconds applied to every call
    """

    def __init__(
        self,
        origin: str,
        token: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            origin: Base scheme and host, e.g. https://api.hipchat.com
            token: Bearer token sent with every request
            timeout: Timeout in seconds, None disables it
            transport: Optional httpx transport (for dependency
                       injection/testing)
        """
        self.origin = origin.rstrip("/")
        self.base_url = f"{self.origin}/{API_VERSION}"
        self.timeout = timeout
        self._http = httpx.Client(
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

        logger.info("Client initialized for origin: %s", self.origin)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "Client":
        """Create a client from a loaded ClientConfig."""
        return cls(
            config.origin,
            config.token,
            timeout=config.timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _send(
        self,
        method: str,
        path: str,
        body: Optional[BaseRequest] = None,
        query: Optional[BaseQuery] = None,
        allow_redirect_status: bool = False,
    ) -> httpx.Response:
        """
        Send one request and return the fully read response.

        Args:
            method: HTTP verb
            path: Path below the versioned base URL
            body: Optional request body, sent as JSON
            query: Optional filters appended to the query string
            allow_redirect_status: Accept 3xx as well as 2xx

        Returns:
            The response, with its body already read.

        Raises:
            TransportError: If the request could not be sent
            HttpStatusError: If the status is not a success
            ResponseReadError: If the body could not be read
        """
        url = self._url(path)
        params = query.to_params() if query is not None else []
        json_body = body.to_dict() if body is not None else None

        request = self._http.build_request(
            method,
            url,
            params=params or None,
            json=json_body,
        )
        logger.debug("%s %s", method, request.url)

        try:
            response = self._http.send(request, stream=True)
        except httpx.TransportError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TransportError(f"Could not reach {url}: {e}") from e

        try:
            logger.debug("%s %s -> %d", method, url, response.status_code)
            success = response.is_success or (
                allow_redirect_status and response.is_redirect
            )
            if not success:
                logger.warning(
                    "%s %s returned status %d",
                    method,
                    url,
                    response.status_code,
                )
                raise HttpStatusError(
                    response.status_code, response.reason_phrase, url
                )

            try:
                response.read()
            except (httpx.HTTPError, httpx.StreamError, OSError) as e:
                raise ResponseReadError(
                    f"Failed reading response from {url}: {e}"
                ) from e
        finally:
            response.close()

        return response

    def _decode(self, response: httpx.Response, schema: Type[T]) -> T:
        """Decode a response body into the given schema."""
        try:
            data = response.json()
        except ValueError as e:
            logger.warning(
                "Malformed JSON in response from %s: %s", response.url, e
            )
            raise DecodeError(f"malformed JSON: {e}") from e
        try:
            return schema.from_dict(data)
        except DecodeError as e:
            logger.warning(
                "Response from %s does not match %s: %s",
                response.url,
                schema.__name__,
                e,
            )
            raise

    def _get(
        self, path: str, schema: Type[T], query: Optional[BaseQuery] = None
    ) -> T:
        response = self._send("GET", path, query=query)
        return self._decode(response, schema)

    # ------------------------------------------------------------------
    # Emoticons
    # ------------------------------------------------------------------

    def get_emoticon(self, emoticon_id_or_shortcut: Any) -> Emoticon:
        """
        Fetch a single emoticon.

        Args:
            emoticon_id_or_shortcut: Numeric id or shortcut of the emoticon

        Returns:
            The Emoticon record.
        """
        return self._get(f"/emoticon/{emoticon_id_or_shortcut}", Emoticon)

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------

    def get_room(self, room_id_or_name: Any) -> RoomDetail:
        """
        Fetch the details of a room.

        Args:
            room_id_or_name: Numeric id or name of the room

        Returns:
            The RoomDetail record.
        """
        return self._get(f"/room/{room_id_or_name}", RoomDetail)

    def update_room(self, room_id_or_name: Any, update: RoomUpdate) -> None:
        """
        Apply a sparse update to a room.

        Only the fields set on the update are sent; the server keeps the
        current value of everything else. The server answers with an empty
        body, so nothing is returned.

        Args:
            room_id_or_name: Numeric id or name of the room
            update: Fields to change
        """
        self._send("PUT", f"/room/{room_id_or_name}", body=update)

    def delete_room(self, room_id_or_name: Any) -> None:
        """
        Delete a room.

        Args:
            room_id_or_name: Numeric id or name of the room
        """
        self._send("DELETE", f"/room/{room_id_or_name}")

    def get_rooms(self, request: Optional[RoomsRequest] = None) -> Rooms:
        """
        List rooms.

        Args:
            request: Optional pagination and visibility filters

        Returns:
            One page of rooms. Follow links.next to fetch the next page.
        """
        return self._get("/room", Rooms, query=request)

    def send_message(self, room_id_or_name: Any, message: str) -> RoomMessage:
        """
        Send a plain chat message to a room as the token's user.

        Args:
            room_id_or_name: Numeric id or name of the room
            message: Message text

        Returns:
            Id and timestamp of the stored message.
        """
        response = self._send(
            "POST",
            f"/room/{room_id_or_name}/message",
            body=SendMessageRequest(message),
        )
        return self._decode(response, RoomMessage)

    def send_notification(
        self, room_id_or_name: Any, notification: Notification
    ) -> None:
        """
        Send a notification to a room.

        Args:
            room_id_or_name: Numeric id or name of the room
            notification: Notification payload
        """
        self._send(
            "POST",
            f"/room/{room_id_or_name}/notification",
            body=notification,
        )

    def get_recent_history(self, room_id_or_name: Any) -> Messages:
        """
        Fetch the latest messages of a room.

        Args:
            room_id_or_name: Numeric id or name of the room

        Returns:
            The most recent history items.
        """
        return self._get(f"/room/{room_id_or_name}/history/latest", Messages)

    def get_room_avatar(self, room_id_or_name: Any) -> str:
        """
        Look up the avatar image of a room.

        The server answers with a redirect to the image; the redirect is not
        followed and its target is returned instead.

        Args:
            room_id_or_name: Numeric id or name of the room

        Returns:
            URL of the avatar image.

        Raises:
            DecodeError: If the response carries no Location header
        """
        response = self._send(
            "GET",
            f"/room/{room_id_or_name}/avatar",
            allow_redirect_status=True,
        )
        location = response.headers.get("Location")
        if not location:
            raise DecodeError("missing Location header in avatar response")
        return location

    def update_room_avatar(self, room_id_or_name: Any, avatar: str) -> None:
        """
        Replace the avatar of a room.

        Args:
            room_id_or_name: Numeric id or name of the room
            avatar: Base64 encoded image
        """
        self._send(
            "PUT",
            f"/room/{room_id_or_name}/avatar",
            body=RoomAvatarUpdate(avatar),
        )

    def delete_room_avatar(self, room_id_or_name: Any) -> None:
        """Remove the avatar of a room."""
        self._send("DELETE", f"/room/{room_id_or_name}/avatar")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_users(self, request: Optional[UsersRequest] = None) -> Users:
        """
        List users of the group.

        Args:
            request: Optional pagination and inclusion filters

        Returns:
            One page of users.
        """
        return self._get("/user", Users, query=request)

    def get_user(self, user_id_or_email: Any) -> UserDetail:
        """
        Fetch the details of a user.

        Args:
            user_id_or_email: Numeric id, email or @mention name

        Returns:
            The UserDetail record.
        """
        return self._get(f"/user/{user_id_or_email}", UserDetail)

    def get_private_messages(
        self,
        user_id_or_email: Any,
        request: Optional[MessagesRequest] = None,
    ) -> Messages:
        """
        Fetch the private chat history with a user.

        Args:
            user_id_or_email: Numeric id, email or @mention name
            request: Optional date and pagination filters

        Returns:
            History items of the one-to-one conversation.
        """
        return self._get(
            f"/user/{user_id_or_email}/history", Messages, query=request
        )

    def send_private_message(
        self, user_id_or_email: Any, message: str
    ) -> None:
        """
        Send a one-to-one message to a user.

        Args:
            user_id_or_email: Numeric id, email or @mention name
            message: Message text
        """
        self._send(
            "POST",
            f"/user/{user_id_or_email}/message",
            body=SendMessageRequest(message),
        )

    def __repr__(self) -> str:
        return f"Client(origin={self.origin!r})"

