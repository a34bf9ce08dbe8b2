#!/usr/bin/env python3
"""
Command Line Client

Small command line front end over the Client, mainly useful for checking a
token and poking at rooms from a shell. Results are printed as JSON.

Usage:
    hipchat rooms --max-results 10
    hipchat room general
    hipchat notify general "Build passed" --color green --notify
    hipchat --settings ./settings.json history general
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from .client import Client
from .config import ClientConfig
from .errors import ClientError
from .schemas import (
    BaseResponse,
    Color,
    MessageFormat,
    MessagesRequest,
    Notification,
    RoomsRequest,
    UsersRequest,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the hipchat command."""
    parser = argparse.ArgumentParser(
        prog="hipchat", description="Chat service REST API client"
    )
    parser.add_argument(
        "--settings",
        help="JSON settings file with token/origin (default: environment)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    rooms = commands.add_parser("rooms", help="List rooms")
    rooms.add_argument("--start-index", type=int)
    rooms.add_argument("--max-results", type=int)
    rooms.add_argument("--include-private", action="store_true", default=None)
    rooms.add_argument("--include-archived", action="store_true", default=None)

    room = commands.add_parser("room", help="Show a room")
    room.add_argument("room", nargs="?", help="Room id or name")

    users = commands.add_parser("users", help="List users")
    users.add_argument("--start-index", type=int)
    users.add_argument("--max-results", type=int)
    users.add_argument("--include-guests", action="store_true", default=None)
    users.add_argument("--include-deleted", action="store_true", default=None)

    user = commands.add_parser("user", help="Show a user")
    user.add_argument("user", help="User id, email or @mention name")

    history = commands.add_parser("history", help="Latest room history")
    history.add_argument("room", nargs="?", help="Room id or name")

    private = commands.add_parser("private-history", help="Private history")
    private.add_argument("user", help="User id, email or @mention name")
    private.add_argument("--max-results", type=int)
    private.add_argument("--date")

    emoticon = commands.add_parser("emoticon", help="Show an emoticon")
    emoticon.add_argument("emoticon", help="Emoticon id or shortcut")

    notify = commands.add_parser("notify", help="Send a room notification")
    notify.add_argument("room", help="Room id or name")
    notify.add_argument("message")
    notify.add_argument(
        "--color",
        choices=[c.value for c in Color],
        default=Color.default().value,
    )
    notify.add_argument(
        "--format",
        dest="message_format",
        choices=[f.value for f in MessageFormat],
        default=MessageFormat.default().value,
    )
    notify.add_argument("--notify", action="store_true")
    notify.add_argument("--from", dest="sender")

    send = commands.add_parser("send", help="Send a chat message to a room")
    send.add_argument("room", help="Room id or name")
    send.add_argument("message")

    return parser


def to_jsonable(value: Any) -> Any:
    """Convert schema records to plain JSON values keyed by wire names."""
    if isinstance(value, BaseResponse):
        return value.to_dict()
    return value


def load_config(settings: Optional[str]) -> ClientConfig:
    if settings:
        return ClientConfig.from_file(settings)
    return ClientConfig.from_env()


def run(
    client: Client, config: ClientConfig, args: argparse.Namespace
) -> Any:
    """
    Execute one command against the client.

    Returns:
        The decoded result, or None for commands with no response body.
    """
    command = args.command

    if command in ("room", "history"):
        room = args.room or config.room
        if not room:
            raise ValueError("No room given and HIPCHAT_ROOM is not set")
        if command == "room":
            return client.get_room(room)
        return client.get_recent_history(room)

    if command == "rooms":
        return client.get_rooms(
            RoomsRequest(
                start_index=args.start_index,
                max_results=args.max_results,
                include_private=args.include_private,
                include_archived=args.include_archived,
            )
        )
    if command == "users":
        return client.get_users(
            UsersRequest(
                start_index=args.start_index,
                max_results=args.max_results,
                include_guests=args.include_guests,
                include_deleted=args.include_deleted,
            )
        )
    if command == "user":
        return client.get_user(args.user)
    if command == "private-history":
        return client.get_private_messages(
            args.user,
            MessagesRequest(max_results=args.max_results, date=args.date),
        )
    if command == "emoticon":
        return client.get_emoticon(args.emoticon)
    if command == "notify":
        notification = Notification(
            color=Color.decode(args.color),
            message=args.message,
            notify=args.notify,
            message_format=MessageFormat.decode(args.message_format),
            from_=args.sender,
        )
        client.send_notification(args.room, notification)
        return None
    if command == "send":
        return client.send_message(args.room, args.message)

    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the hipchat command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.settings)
        with Client.from_config(config) as client:
            result = run(client, config, args)
    except ClientError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nExiting...")
        return 0

    if result is not None:
        print(json.dumps(to_jsonable(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
