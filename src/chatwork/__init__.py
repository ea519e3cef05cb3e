"""
ChatWork API Client Package

An asyncio client library for the ChatWork REST API (v2), including the
ChatworkClient facade, the request pipeline, the error types and the
resource schemas.

Schemas are organized in the `schemas` subpackage by resource:
    - room, member: Rooms and their membership
    - message: Chat messages
    - task: Room tasks and the user's own tasks
    - contact: Contacts and contact requests
    - file: Uploaded files
    - user: Accounts, profile and unread status
"""

from .client import ChatworkClient
from .config import (
    ClientConfig,
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    DEFAULT_TIMEOUT,
    TOKEN_HEADER,
)
from .errors import ChatworkError, APIError, DecodeError, RequestBuildError
from .transport import Response, Transport, check_response, process_response_body
from .schemas import (
    # Base classes
    BaseRequest,
    BaseResponse,
    # Common types
    Timestamp,
    RateLimit,
    # Resource schemas
    Room,
    Member,
    Message,
    User,
    Me,
    MyStatus,
    Task,
    MyTask,
    TaskRoom,
    TaskAccount,
    Contact,
    IncomingRequest,
    IncomingRequestActionResponse,
    File,
    MessageCounts,
    MembersUpdatedResponse,
    MessageCreatedResponse,
    TaskCreatedResponse,
    # Parameter schemas
    RoomCreateParams,
    RoomUpdateParams,
    RoomMembersUpdateParams,
    MessageListParams,
    MessageCreateParams,
    MessageUpdateParams,
    TaskCreateParams,
    TaskListParams,
    MyTaskListParams,
)

__all__ = [
    # Client
    "ChatworkClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT",
    "TOKEN_HEADER",
    # Pipeline
    "Response",
    "Transport",
    "check_response",
    "process_response_body",
    # Errors
    "ChatworkError",
    "APIError",
    "DecodeError",
    "RequestBuildError",
    # Base classes
    "BaseRequest",
    "BaseResponse",
    # Common types
    "Timestamp",
    "RateLimit",
    # Resource schemas
    "Room",
    "Member",
    "Message",
    "User",
    "Me",
    "MyStatus",
    "Task",
    "MyTask",
    "TaskRoom",
    "TaskAccount",
    "Contact",
    "IncomingRequest",
    "IncomingRequestActionResponse",
    "File",
    "MessageCounts",
    "MembersUpdatedResponse",
    "MessageCreatedResponse",
    "TaskCreatedResponse",
    # Parameter schemas
    "RoomCreateParams",
    "RoomUpdateParams",
    "RoomMembersUpdateParams",
    "MessageListParams",
    "MessageCreateParams",
    "MessageUpdateParams",
    "TaskCreateParams",
    "TaskListParams",
    "MyTaskListParams",
]
