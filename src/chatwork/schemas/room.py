"""
Room Schema Definitions

This module defines the structures for room operations including room
creation, update, deletion and read/unread counters.
"""

from dataclasses import dataclass
from typing import List

from ..utils.encoding import form_field
from .base import BaseRequest, BaseResponse
from .common import Timestamp

ROOM_ACTION_LEAVE = "leave"
ROOM_ACTION_DELETE = "delete"
ROOM_ACTIONS = (ROOM_ACTION_LEAVE, ROOM_ACTION_DELETE)


@dataclass
class Room(BaseResponse):
    """
    A ChatWork room.

    Attributes:
        room_id: Unique identifier for the room
        name: Name of the room
        type: "my", "direct" or "group"
        role: Role of the authenticated user: "admin", "member" or "readonly"
        sticky: Whether the room is pinned
        unread_num: Number of unread messages
        mention_num: Number of unread mentions
        mytask_num: Number of open tasks assigned to the user
        message_num: Total number of messages
        file_num: Total number of files
        task_num: Total number of tasks
        icon_path: URL of the room icon
        last_update_time: When the room was last updated
        description: Room description, only returned for a single room
    """

    room_id: int = 0
    name: str = ""
    type: str = ""
    role: str = ""
    sticky: bool = False
    unread_num: int = 0
    mention_num: int = 0
    mytask_num: int = 0
    message_num: int = 0
    file_num: int = 0
    task_num: int = 0
    icon_path: str = ""
    last_update_time: Timestamp = Timestamp(0)
    description: str = ""


@dataclass
class RoomCreateParams(BaseRequest):
    """
    Parameters for creating a group chat room.

    ``name`` is required. The authenticated user becomes an admin of the
    new room.
    """

    name: str = form_field(default="")
    description: str = form_field(default="", omitempty=True)
    icon_preset: str = form_field(default="", omitempty=True)
    members_admin_ids: List[int] = form_field(default_factory=list, omitempty=True)
    members_member_ids: List[int] = form_field(default_factory=list, omitempty=True)
    members_readonly_ids: List[int] = form_field(
        default_factory=list, omitempty=True
    )


@dataclass
class RoomUpdateParams(BaseRequest):
    """Parameters for updating a room. Empty fields are left unchanged."""

    name: str = form_field(default="", omitempty=True)
    description: str = form_field(default="", omitempty=True)
    icon_preset: str = form_field(default="", omitempty=True)


@dataclass
class RoomDeleteParams(BaseRequest):
    """Form body of a room delete call: ``action_type`` is leave or delete."""

    action_type: str = form_field(default=ROOM_ACTION_LEAVE)


@dataclass
class MessagesReadParams(BaseRequest):
    """Form body for marking messages as read up to ``message_id``."""

    message_id: str = form_field(default="", omitempty=True)


@dataclass
class MessageCounts(BaseResponse):
    """
    Unread and mention counters of a room.

    Attributes:
        unread_num: Number of unread messages
        mention_num: Number of unread mentions
    """

    unread_num: int = 0
    mention_num: int = 0
