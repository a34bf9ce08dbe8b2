"""
Shared fixtures for the client tests.

The client is wired to an httpx.MockTransport so every request is recorded
and answered with a canned response, without touching the network.
"""

import json

import httpx
import pytest

from hipchat import Client

ORIGIN = "https://chat.example.com"
TOKEN = "secret-token"


class MockAPI:
    """
    Records requests and answers them with a configurable response.

    Attributes:
        requests: Every request received, in order
    """

    def __init__(self):
        self.requests = []
        self._status = 200
        self._kwargs = {"json": {}}
        self._error = None

    def reply(self, status=200, **kwargs):
        """Answer subsequent requests with httpx.Response(status, **kwargs)."""
        self._status = status
        self._kwargs = kwargs
        self._error = None

    def fail(self, error_factory):
        """Raise error_factory(request) from the transport instead."""
        self._error = error_factory

    def handler(self, request):
        self.requests.append(request)
        if self._error is not None:
            raise self._error(request)
        return httpx.Response(self._status, **self._kwargs)

    @property
    def last(self):
        return self.requests[-1]

    def last_body(self):
        return json.loads(self.last.content)


@pytest.fixture
def api():
    return MockAPI()


@pytest.fixture
def client(api):
    transport = httpx.MockTransport(api.handler)
    with Client(ORIGIN, TOKEN, transport=transport) as c:
        yield c


# ----------------------------------------------------------------------------
# Canned response bodies
# ----------------------------------------------------------------------------


def room_links(room_id):
    base = f"{ORIGIN}/v2/room/{room_id}"
    return {
        "self": base,
        "webhooks": f"{base}/webhook",
        "participants": f"{base}/participant",
    }


@pytest.fixture
def room_detail_body():
    return {
        "id": 42,
        "name": "general",
        "xmpp_jid": "1_general@conf.example.com",
        "created": "2015-04-01T10:00:00+00:00",
        "is_archived": False,
        "privacy": "public",
        "is_guest_accessible": False,
        "topic": "Anything goes",
        "avatar_url": None,
        "guest_access_url": None,
        "links": room_links(42),
        "statistics": {"links": {"self": f"{ORIGIN}/v2/room/42/statistics"}},
        "owner": {
            "id": 7,
            "name": "Alice Example",
            "mention_name": "alice",
            "links": {"self": f"{ORIGIN}/v2/user/7"},
        },
    }


@pytest.fixture
def rooms_body():
    return {
        "startIndex": 0,
        "maxResults": 100,
        "items": [
            {"id": 42, "name": "general", "links": room_links(42)},
            {"id": 43, "name": "random", "links": room_links(43)},
        ],
        "links": {"self": f"{ORIGIN}/v2/room"},
    }


@pytest.fixture
def user_detail_body():
    return {
        "id": 7,
        "name": "Alice Example",
        "mention_name": "alice",
        "email": "alice@example.com",
        "xmpp_jid": "1_7@chat.example.com",
        "title": "Engineer",
        "timezone": "UTC",
        "photo_url": None,
        "is_deleted": False,
        "is_guest": False,
        "is_group_admin": True,
        "created": "2014-01-01T00:00:00+00:00",
        "last_active": "1430000000",
        "presence": {
            "status": "coding",
            "idle": 120,
            "show": "away",
            "is_online": True,
            "client": {
                "version": "3.1",
                "type": "http://hipchat.com/client/mac",
            },
        },
        "links": {"self": f"{ORIGIN}/v2/user/7"},
    }


@pytest.fixture
def messages_body():
    return {
        "startIndex": 0,
        "maxResults": 75,
        "items": [
            {
                "id": "m-1",
                "date": "2015-04-01T10:00:00.000000+00:00",
                "from": {
                    "id": 7,
                    "name": "Alice Example",
                    "mention_name": "alice",
                    "links": {"self": f"{ORIGIN}/v2/user/7"},
                },
                "message": "hello @bob",
                "type": "message",
                "mentions": [
                    {
                        "id": 8,
                        "name": "Bob",
                        "mention_name": "bob",
                        "links": {"self": f"{ORIGIN}/v2/user/8"},
                    }
                ],
            },
            {
                "id": "m-2",
                "date": "2015-04-01T10:01:00.000000+00:00",
                "from": "CI",
                "message": "<b>Build passed</b>",
                "type": "notification",
                "color": "green",
                "message_format": "html",
                "mentions": [],
            },
        ],
        "links": {"self": f"{ORIGIN}/v2/room/42/history/latest"},
    }
