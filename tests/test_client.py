"""
Tests for Client Endpoint Operations

Each operation is checked for its URL, verb, headers, body and decoded
result against canned responses from a mock transport.
"""

import json

import httpx
import pytest

from hipchat import (
    Client,
    ClientConfig,
    Color,
    Emoticon,
    HttpStatusError,
    MessagesRequest,
    MessageType,
    Notification,
    Privacy,
    RoomDetail,
    RoomMessage,
    RoomsRequest,
    RoomUpdate,
    UserDetail,
    UsersRequest,
)

BASE = "https://chat.example.com/v2"


# ===== Construction Tests =====


def test_client_builds_versioned_base_url():
    """Test that the API version is appended to the origin."""
    client = Client("https://chat.example.com/", "token")
    assert client.base_url == BASE
    assert "token" not in repr(client)
    client.close()


def test_client_from_config(api):
    """Test that a client can be created from a ClientConfig."""
    config = ClientConfig(
        origin="https://other.example.com", token="abc", timeout=5.0
    )
    transport = httpx.MockTransport(api.handler)

    with Client.from_config(config, transport=transport) as client:
        assert client.timeout == 5.0
        api.reply(204)
        client.delete_room("general")

    assert str(api.last.url) == "https://other.example.com/v2/room/general"
    assert api.last.headers["Authorization"] == "Bearer abc"


# ===== Emoticon Tests =====


def test_get_emoticon(client, api):
    """Test fetching an emoticon by shortcut."""
    api.reply(
        200,
        json={"id": 34, "shortcut": "shrug", "width": 25, "height": 20},
    )

    emoticon = client.get_emoticon("shrug")

    assert api.last.method == "GET"
    assert str(api.last.url) == f"{BASE}/emoticon/shrug"
    assert emoticon == Emoticon(id=34, shortcut="shrug", width=25, height=20)


# ===== Room Tests =====


def test_get_room_by_name(client, api, room_detail_body):
    """Test fetching a room by name."""
    api.reply(200, json=room_detail_body)

    room = client.get_room("general")

    assert isinstance(room, RoomDetail)
    assert room.name == "general"
    assert api.last.method == "GET"
    assert str(api.last.url) == f"{BASE}/room/general"


def test_get_room_by_id(client, api, room_detail_body):
    """Test that a numeric id is inserted into the path as-is."""
    api.reply(200, json=room_detail_body)

    client.get_room(42)

    assert api.last.url.path == "/v2/room/42"


def test_room_name_is_percent_encoded_by_url_layer(
    client, api, room_detail_body
):
    """Test that names with spaces reach the server percent-encoded."""
    api.reply(200, json=room_detail_body)

    client.get_room("dev ops")

    assert api.last.url.raw_path == b"/v2/room/dev%20ops"


def test_every_request_carries_bearer_token(client, api, room_detail_body):
    """Test that the authorization header is attached for each verb."""
    api.reply(200, json=room_detail_body)
    client.get_room("general")
    api.reply(204)
    client.delete_room("general")
    client.update_room("general", RoomUpdate(topic="x"))

    assert len(api.requests) == 3
    for request in api.requests:
        assert request.headers["Authorization"] == "Bearer secret-token"


def test_get_requests_carry_no_body(client, api, room_detail_body):
    """Test that GET requests have no body and no content type."""
    api.reply(200, json=room_detail_body)

    client.get_room("general")

    assert api.last.content == b""
    assert "Content-Type" not in api.last.headers


def test_update_room_sends_sparse_body(client, api):
    """Test that only the fields set on the update are sent."""
    api.reply(204)

    result = client.update_room(
        "general", RoomUpdate(topic="Release day", privacy=Privacy.PRIVATE)
    )

    assert result is None
    assert api.last.method == "PUT"
    assert str(api.last.url) == f"{BASE}/room/general"
    assert api.last.headers["Content-Type"] == "application/json"
    assert api.last_body() == {"privacy": "private", "topic": "Release day"}


def test_delete_room(client, api):
    """Test deleting a room."""
    api.reply(204)

    assert client.delete_room("general") is None
    assert api.last.method == "DELETE"
    assert str(api.last.url) == f"{BASE}/room/general"
    assert api.last.content == b""


def test_get_rooms_without_filters(client, api, rooms_body):
    """Test listing rooms with no query string."""
    api.reply(200, json=rooms_body)

    rooms = client.get_rooms()

    assert str(api.last.url) == f"{BASE}/room"
    assert api.last.url.query == b""
    assert len(rooms.items) == 2
    assert rooms.links.self_ == rooms_body["links"]["self"]


def test_get_rooms_with_empty_filters(client, api, rooms_body):
    """Test that a filter with nothing set adds no query string."""
    api.reply(200, json=rooms_body)

    client.get_rooms(RoomsRequest())

    assert str(api.last.url) == f"{BASE}/room"


def test_get_rooms_with_filters(client, api, rooms_body):
    """Test that filters become hyphenated query parameters."""
    api.reply(200, json=rooms_body)

    client.get_rooms(
        RoomsRequest(start_index=100, max_results=50, include_archived=True)
    )

    assert api.last.url.params.multi_items() == [
        ("start-index", "100"),
        ("max-results", "50"),
        ("include-archived", "true"),
    ]


def test_send_message(client, api):
    """Test sending a chat message to a room."""
    api.reply(201, json={"id": "m-1", "timestamp": "2015-04-01T10:00:00Z"})

    result = client.send_message("general", "hello")

    assert result == RoomMessage(id="m-1", timestamp="2015-04-01T10:00:00Z")
    assert api.last.method == "POST"
    assert str(api.last.url) == f"{BASE}/room/general/message"
    assert api.last_body() == {"message": "hello"}


def test_send_notification_with_defaults(client, api):
    """Test that a default notification sends the default metadata."""
    api.reply(204)

    result = client.send_notification("general", Notification(message="hi"))

    assert result is None
    assert api.last.method == "POST"
    assert str(api.last.url) == f"{BASE}/room/general/notification"
    assert api.last.headers["Content-Type"] == "application/json"
    assert api.last_body() == {
        "color": "yellow",
        "message": "hi",
        "notify": False,
        "message_format": "html",
    }


def test_send_notification_with_color(client, api):
    """Test a notification with explicit metadata."""
    api.reply(204)

    client.send_notification(
        42, Notification(message="red alert", color=Color.RED, notify=True)
    )

    body = api.last_body()
    assert api.last.url.path == "/v2/room/42/notification"
    assert body["color"] == "red"
    assert body["notify"] is True


def test_get_recent_history(client, api, messages_body):
    """Test fetching the latest room history."""
    api.reply(200, json=messages_body)

    messages = client.get_recent_history("general")

    assert str(api.last.url) == f"{BASE}/room/general/history/latest"
    assert len(messages.items) == 2
    assert messages.items[1].message_type is MessageType.NOTIFICATION


def test_get_room_avatar_returns_redirect_target(client, api):
    """Test that the avatar redirect is not followed."""
    api.reply(302, headers={"Location": "https://cdn.example.com/a.png"})

    url = client.get_room_avatar("general")

    assert url == "https://cdn.example.com/a.png"
    assert len(api.requests) == 1
    assert str(api.last.url) == f"{BASE}/room/general/avatar"


def test_update_room_avatar(client, api):
    """Test replacing a room avatar."""
    api.reply(204)

    client.update_room_avatar("general", "aGVsbG8=")

    assert api.last.method == "PUT"
    assert str(api.last.url) == f"{BASE}/room/general/avatar"
    assert api.last_body() == {"avatar": "aGVsbG8="}


def test_delete_room_avatar(client, api):
    """Test removing a room avatar."""
    api.reply(204)

    client.delete_room_avatar("general")

    assert api.last.method == "DELETE"
    assert str(api.last.url) == f"{BASE}/room/general/avatar"


# ===== User Tests =====


def test_get_users_with_filters(client, api):
    """Test listing users with filters."""
    api.reply(
        200,
        json={
            "startIndex": 0,
            "maxResults": 10,
            "items": [],
            "links": {"self": f"{BASE}/user"},
        },
    )

    users = client.get_users(
        UsersRequest(max_results=10, include_guests=False)
    )

    assert api.last.url.path == "/v2/user"
    assert api.last.url.params.multi_items() == [
        ("max-results", "10"),
        ("include-guests", "false"),
    ]
    assert users.items == []


def test_get_user_by_email(client, api, user_detail_body):
    """Test fetching a user by email."""
    api.reply(200, json=user_detail_body)

    user = client.get_user("alice@example.com")

    assert isinstance(user, UserDetail)
    assert user.email == "alice@example.com"
    assert api.last.url.path == "/v2/user/alice@example.com"


def test_get_private_messages(client, api, messages_body):
    """Test fetching private history with filters."""
    api.reply(200, json=messages_body)

    messages = client.get_private_messages(
        "@alice", MessagesRequest(max_results=2, reversed=False)
    )

    assert api.last.url.path == "/v2/user/@alice/history"
    assert api.last.url.params.multi_items() == [
        ("max-results", "2"),
        ("reversed", "false"),
    ]
    assert messages.items[0].from_.name == "Alice Example"


def test_send_private_message(client, api):
    """Test sending a one-to-one message."""
    api.reply(204)

    assert client.send_private_message(7, "ping") is None
    assert api.last.method == "POST"
    assert api.last.url.path == "/v2/user/7/message"
    assert json.loads(api.last.content) == {"message": "ping"}


# ===== Independence Tests =====


def test_each_call_returns_a_fresh_value(client, api, room_detail_body):
    """Test that results are not shared between calls."""
    api.reply(200, json=room_detail_body)

    first = client.get_room("general")
    second = client.get_room("general")

    assert first == second
    assert first is not second
    assert len(api.requests) == 2


def test_failed_call_is_not_retried(client, api):
    """Test that a failure is reported once and not repeated."""
    api.reply(500)

    with pytest.raises(HttpStatusError):
        client.delete_room("general")

    assert len(api.requests) == 1
