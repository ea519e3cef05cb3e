"""
Rooms Service

Endpoints under ``/rooms``: the rooms themselves, their members, read and
unread counters, files and tasks.

ChatWork API docs: https://developer.chatwork.com/reference/rooms
"""

import logging
from typing import List, Optional, Tuple

from ..schemas import (
    File,
    FileGetParams,
    FileListParams,
    Member,
    MembersUpdatedResponse,
    MessageCounts,
    MessagesReadParams,
    Room,
    RoomCreateParams,
    RoomDeleteParams,
    RoomMembersUpdateParams,
    RoomUpdateParams,
    Task,
    TaskListParams,
    ROOM_ACTION_DELETE,
    ROOM_ACTION_LEAVE,
    ROOM_ACTIONS,
)
from ..transport import Response
from .base import BaseService

logger = logging.getLogger(__name__)


class RoomsService(BaseService):
    """Room related methods of the ChatWork API."""

    async def list(self) -> Tuple[List[Room], Response]:
        """
        List all rooms the authenticated user participates in.

        Returns:
            tuple: (rooms, response)
        """
        request = self._transport.new_request("GET", "rooms")
        return await self._send(request, List[Room])

    async def create(self, params: RoomCreateParams) -> Tuple[Room, Response]:
        """
        Create a group chat room.

        The authenticated user becomes an admin of the new room. The
        returned Room only has ``room_id`` set.
        """
        request = self._transport.new_form_request("POST", "rooms", params)
        return await self._send(request, Room)

    async def get(self, room_id: int) -> Tuple[Room, Response]:
        """Get information about a room."""
        request = self._transport.new_request("GET", f"rooms/{room_id}")
        return await self._send(request, Room)

    async def update(
        self, room_id: int, params: RoomUpdateParams
    ) -> Tuple[Room, Response]:
        """Update the name, description or icon of a room. Admins only."""
        request = self._transport.new_form_request(
            "PUT", f"rooms/{room_id}", params
        )
        return await self._send(request, Room)

    async def delete(self, room_id: int, action_type: str) -> Response:
        """
        Leave or delete a room.

        Args:
            room_id: ID of the room
            action_type: "leave" to leave the room (any member) or "delete"
                to delete it (room creator only)

        Raises:
            ValueError: If action_type is not "leave" or "delete"
        """
        if action_type not in ROOM_ACTIONS:
            raise ValueError(
                f"action_type must be one of {ROOM_ACTIONS}, got {action_type!r}"
            )
        logger.debug("Room %s: %s", room_id, action_type)
        request = self._transport.new_form_request(
            "DELETE", f"rooms/{room_id}", RoomDeleteParams(action_type=action_type)
        )
        _, response = await self._send(request)
        return response

    async def leave(self, room_id: int) -> Response:
        """Leave a room."""
        return await self.delete(room_id, ROOM_ACTION_LEAVE)

    async def delete_room(self, room_id: int) -> Response:
        """Delete a room. Only the room creator can do this."""
        return await self.delete(room_id, ROOM_ACTION_DELETE)

    async def get_members(self, room_id: int) -> Tuple[List[Member], Response]:
        """List the members of a room."""
        request = self._transport.new_request("GET", f"rooms/{room_id}/members")
        return await self._send(request, List[Member])

    async def update_members(
        self, room_id: int, params: RoomMembersUpdateParams
    ) -> Tuple[MembersUpdatedResponse, Response]:
        """
        Replace the members of a room.

        The given lists replace the whole membership, so include every
        member that should stay. Admins only.
        """
        request = self._transport.new_form_request(
            "PUT", f"rooms/{room_id}/members", params
        )
        return await self._send(request, MembersUpdatedResponse)

    async def get_messages_read_status(
        self, room_id: int, message_id: str
    ) -> Tuple[MessageCounts, Response]:
        """Get the unread and mention counters as of a given message."""
        request = self._transport.new_request(
            "GET",
            f"rooms/{room_id}/messages/read",
            params={"message_id": message_id},
        )
        return await self._send(request, MessageCounts)

    async def mark_messages_as_read(
        self, room_id: int, message_id: str = ""
    ) -> Tuple[MessageCounts, Response]:
        """
        Mark messages as read.

        Args:
            room_id: ID of the room
            message_id: Mark everything up to and including this message;
                empty marks every message in the room

        Returns:
            tuple: (counters after the update, response)
        """
        request = self._transport.new_form_request(
            "PUT",
            f"rooms/{room_id}/messages/read",
            MessagesReadParams(message_id=message_id),
        )
        return await self._send(request, MessageCounts)

    async def get_messages_unread_count(
        self, room_id: int
    ) -> Tuple[MessageCounts, Response]:
        """Get the unread and mention counters of a room."""
        request = self._transport.new_request(
            "GET", f"rooms/{room_id}/messages/unread"
        )
        return await self._send(request, MessageCounts)

    async def get_files(
        self, room_id: int, account_id: int = 0
    ) -> Tuple[List[File], Response]:
        """
        List the files of a room.

        Args:
            room_id: ID of the room
            account_id: Only files uploaded by this account, when non-zero
        """
        request = self._transport.new_request(
            "GET",
            f"rooms/{room_id}/files",
            params=FileListParams(account_id=account_id).to_form(),
        )
        return await self._send(request, List[File])

    async def get_file(
        self, room_id: int, file_id: int, create_download_url: bool = False
    ) -> Tuple[File, Response]:
        """
        Get information about a file.

        Args:
            room_id: ID of the room
            file_id: ID of the file
            create_download_url: Include a temporary download URL
        """
        request = self._transport.new_request(
            "GET",
            f"rooms/{room_id}/files/{file_id}",
            params=FileGetParams(create_download_url=create_download_url).to_form(),
        )
        return await self._send(request, File)

    async def get_tasks(
        self, room_id: int, params: Optional[TaskListParams] = None
    ) -> Tuple[List[Task], Response]:
        """List the tasks of a room, optionally filtered."""
        request = self._transport.new_request(
            "GET",
            f"rooms/{room_id}/tasks",
            params=params.to_form() if params is not None else None,
        )
        return await self._send(request, List[Task])
