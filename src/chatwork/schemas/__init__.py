"""
Schemas Package

This package contains the request parameter and response schemas of the
ChatWork API. Schemas are organized by resource: room, member, message,
task, contact, file and user.

The package provides base classes (BaseRequest, BaseResponse) that
eliminate code duplication for serialization and deserialization methods.
"""

from .base import BaseRequest, BaseResponse
from .common import Timestamp, RateLimit
from .user import User, Me, MyStatus
from .room import (
    Room,
    RoomCreateParams,
    RoomUpdateParams,
    RoomDeleteParams,
    MessagesReadParams,
    MessageCounts,
    ROOM_ACTION_LEAVE,
    ROOM_ACTION_DELETE,
    ROOM_ACTIONS,
)
from .member import Member, RoomMembersUpdateParams, MembersUpdatedResponse
from .message import (
    Message,
    MessageListParams,
    MessageCreateParams,
    MessageUpdateParams,
    MessageCreatedResponse,
)
from .task import (
    Task,
    MyTask,
    TaskRoom,
    TaskAccount,
    TaskCreateParams,
    TaskStatusParams,
    TaskListParams,
    MyTaskListParams,
    TaskCreatedResponse,
    TASK_STATUS_OPEN,
    TASK_STATUS_DONE,
    TASK_STATUSES,
    LIMIT_TYPE_NONE,
    LIMIT_TYPE_DATE,
    LIMIT_TYPE_TIME,
)
from .contact import Contact, IncomingRequest, IncomingRequestActionResponse
from .file import File, FileListParams, FileGetParams

__all__ = [
    # Base classes
    "BaseRequest",
    "BaseResponse",
    # Common types
    "Timestamp",
    "RateLimit",
    # User schemas
    "User",
    "Me",
    "MyStatus",
    # Room schemas
    "Room",
    "RoomCreateParams",
    "RoomUpdateParams",
    "RoomDeleteParams",
    "MessagesReadParams",
    "MessageCounts",
    "ROOM_ACTION_LEAVE",
    "ROOM_ACTION_DELETE",
    "ROOM_ACTIONS",
    # Member schemas
    "Member",
    "RoomMembersUpdateParams",
    "MembersUpdatedResponse",
    # Message schemas
    "Message",
    "MessageListParams",
    "MessageCreateParams",
    "MessageUpdateParams",
    "MessageCreatedResponse",
    # Task schemas
    "Task",
    "MyTask",
    "TaskRoom",
    "TaskAccount",
    "TaskCreateParams",
    "TaskStatusParams",
    "TaskListParams",
    "MyTaskListParams",
    "TaskCreatedResponse",
    "TASK_STATUS_OPEN",
    "TASK_STATUS_DONE",
    "TASK_STATUSES",
    "LIMIT_TYPE_NONE",
    "LIMIT_TYPE_DATE",
    "LIMIT_TYPE_TIME",
    # Contact schemas
    "Contact",
    "IncomingRequest",
    "IncomingRequestActionResponse",
    # File schemas
    "File",
    "FileListParams",
    "FileGetParams",
]
