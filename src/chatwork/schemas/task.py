"""
Task Schema Definitions

This module defines the structures for room tasks and for the tasks
assigned to the authenticated user across all rooms.
"""

from dataclasses import dataclass, field
from typing import List

from ..utils.encoding import form_field
from .base import BaseRequest, BaseResponse
from .common import Timestamp
from .user import User

TASK_STATUS_OPEN = "open"
TASK_STATUS_DONE = "done"
TASK_STATUSES = (TASK_STATUS_OPEN, TASK_STATUS_DONE)

LIMIT_TYPE_NONE = "none"
LIMIT_TYPE_DATE = "date"
LIMIT_TYPE_TIME = "time"


@dataclass
class Task(BaseResponse):
    """
    A task in a room.

    Attributes:
        task_id: Unique identifier for the task
        account: Assignee of the task
        assigned_by_account: Account that created the task
        message_id: ID of the message that carries the task
        body: Task description
        limit_time: Deadline, 0 when none
        status: "open" or "done"
        limit_type: "none", "date" or "time"
    """

    task_id: int = 0
    account: User = field(default_factory=User)
    assigned_by_account: User = field(default_factory=User)
    message_id: str = ""
    body: str = ""
    limit_time: Timestamp = Timestamp(0)
    status: str = ""
    limit_type: str = ""


@dataclass
class TaskRoom(BaseResponse):
    """Minimal room information attached to a MyTask."""

    room_id: int = 0
    name: str = ""
    icon_path: str = ""


@dataclass
class TaskAccount(BaseResponse):
    """Minimal account information attached to a MyTask."""

    account_id: int = 0
    name: str = ""
    avatar_image_url: str = ""


@dataclass
class MyTask(BaseResponse):
    """
    A task assigned to the authenticated user.

    Unlike Task it carries the room the task lives in instead of the
    assignee, which is always the authenticated user.
    """

    task_id: int = 0
    room: TaskRoom = field(default_factory=TaskRoom)
    assigned_by_account: TaskAccount = field(default_factory=TaskAccount)
    message_id: str = ""
    body: str = ""
    limit_time: Timestamp = Timestamp(0)
    status: str = ""
    limit_type: str = ""


@dataclass
class TaskCreateParams(BaseRequest):
    """
    Parameters for creating tasks.

    One task is created per account in ``to_ids``.

    Attributes:
        body: Task description (required)
        to_ids: Account IDs to assign the task to (required)
        limit: Deadline as Unix time
        limit_type: "none", "date" or "time"
    """

    body: str = form_field(default="")
    to_ids: List[int] = form_field(default_factory=list)
    limit: int = form_field(default=0, omitempty=True)
    limit_type: str = form_field(default="", omitempty=True)


@dataclass
class TaskStatusParams(BaseRequest):
    """Form body of a task status update; ``body`` is "open" or "done"."""

    body: str = form_field(default=TASK_STATUS_OPEN)


@dataclass
class TaskListParams(BaseRequest):
    """
    Query filters for listing the tasks of a room.

    Attributes:
        account_id: Only tasks assigned to this account
        assigned_by_account_id: Only tasks created by this account
        status: "open" or "done"
    """

    account_id: int = form_field(default=0, omitempty=True)
    assigned_by_account_id: int = form_field(default=0, omitempty=True)
    status: str = form_field(default="", omitempty=True)


@dataclass
class MyTaskListParams(BaseRequest):
    """Query filters for listing the authenticated user's tasks."""

    assigned_by_account_id: int = form_field(default=0, omitempty=True)
    status: str = form_field(default="", omitempty=True)


@dataclass
class TaskCreatedResponse(BaseResponse):
    """Response of task creation: one ID per assignee."""

    task_ids: List[int] = field(default_factory=list)
