"""
Tasks Services

TasksService covers the tasks of a single room; MyTasksService covers the
tasks assigned to the authenticated user across all rooms.

ChatWork API docs: https://developer.chatwork.com/reference/tasks
"""

from typing import List, Optional, Sequence, Tuple

from ..schemas import (
    MyTask,
    MyTaskListParams,
    Task,
    TaskCreateParams,
    TaskCreatedResponse,
    TaskStatusParams,
    LIMIT_TYPE_TIME,
    TASK_STATUS_DONE,
    TASK_STATUS_OPEN,
    TASK_STATUSES,
)
from ..transport import Response, Transport
from .base import BaseService


class TasksService(BaseService):
    """Task related methods of the ChatWork API."""

    async def create(
        self, room_id: int, params: TaskCreateParams
    ) -> Tuple[TaskCreatedResponse, Response]:
        """
        Create tasks in a room.

        One task is created per account in ``params.to_ids``.
        """
        request = self._transport.new_form_request(
            "POST", f"rooms/{room_id}/tasks", params
        )
        return await self._send(request, TaskCreatedResponse)

    async def get(self, room_id: int, task_id: int) -> Tuple[Task, Response]:
        """Get a single task."""
        request = self._transport.new_request(
            "GET", f"rooms/{room_id}/tasks/{task_id}"
        )
        return await self._send(request, Task)

    async def update_status(
        self, room_id: int, task_id: int, status: str
    ) -> Tuple[Task, Response]:
        """
        Set the status of a task.

        Args:
            room_id: ID of the room
            task_id: ID of the task
            status: "open" or "done"

        Returns:
            tuple: (task with ``task_id`` set, response)

        Raises:
            ValueError: If status is not "open" or "done"
        """
        if status not in TASK_STATUSES:
            raise ValueError(f"status must be one of {TASK_STATUSES}, got {status!r}")
        request = self._transport.new_form_request(
            "PUT",
            f"rooms/{room_id}/tasks/{task_id}/status",
            TaskStatusParams(body=status),
        )
        return await self._send(request, Task)

    async def complete(self, room_id: int, task_id: int) -> Tuple[Task, Response]:
        """Mark a task as done."""
        return await self.update_status(room_id, task_id, TASK_STATUS_DONE)

    async def reopen(self, room_id: int, task_id: int) -> Tuple[Task, Response]:
        """Mark a task as open again."""
        return await self.update_status(room_id, task_id, TASK_STATUS_OPEN)

    async def create_simple(
        self, room_id: int, body: str, to_ids: Sequence[int]
    ) -> Tuple[TaskCreatedResponse, Response]:
        """Create tasks without a deadline."""
        return await self.create(
            room_id, TaskCreateParams(body=body, to_ids=list(to_ids))
        )

    async def create_with_deadline(
        self,
        room_id: int,
        body: str,
        to_ids: Sequence[int],
        deadline: int,
        limit_type: str = LIMIT_TYPE_TIME,
    ) -> Tuple[TaskCreatedResponse, Response]:
        """
        Create tasks with a deadline.

        Args:
            room_id: ID of the room
            body: Task description
            to_ids: Account IDs to assign the task to
            deadline: Deadline as Unix time
            limit_type: "date" or "time"
        """
        return await self.create(
            room_id,
            TaskCreateParams(
                body=body, to_ids=list(to_ids), limit=int(deadline), limit_type=limit_type
            ),
        )


class MyTasksService(BaseService):
    """
    Methods for the tasks assigned to the authenticated user.

    Status changes go through the room endpoints, so the service is
    composed with the client's TasksService.
    """

    def __init__(self, transport: Transport, tasks: TasksService):
        super().__init__(transport)
        self._tasks = tasks

    async def list(
        self, params: Optional[MyTaskListParams] = None
    ) -> Tuple[List[MyTask], Response]:
        """List tasks assigned to the authenticated user, optionally filtered."""
        request = self._transport.new_request(
            "GET",
            "my/tasks",
            params=params.to_form() if params is not None else None,
        )
        return await self._send(request, List[MyTask])

    async def get_open(self) -> Tuple[List[MyTask], Response]:
        """List open tasks assigned to the authenticated user."""
        return await self.list(MyTaskListParams(status=TASK_STATUS_OPEN))

    async def get_completed(self) -> Tuple[List[MyTask], Response]:
        """List completed tasks assigned to the authenticated user."""
        return await self.list(MyTaskListParams(status=TASK_STATUS_DONE))

    async def get_by_room(self, room_id: int) -> Tuple[List[MyTask], Response]:
        """List the user's tasks in one room, filtered locally."""
        tasks, response = await self.list()
        return [task for task in tasks if task.room.room_id == room_id], response

    async def complete_task(
        self, room_id: int, task_id: int
    ) -> Tuple[Task, Response]:
        """Mark a task as done."""
        return await self._tasks.complete(room_id, task_id)

    async def reopen_task(self, room_id: int, task_id: int) -> Tuple[Task, Response]:
        """Mark a task as open again."""
        return await self._tasks.reopen(room_id, task_id)
