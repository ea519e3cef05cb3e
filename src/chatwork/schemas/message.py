"""
Message Schema Definitions

This module defines the structures for chat message operations including
listing, posting, updating and deleting messages.
"""

from dataclasses import dataclass, field

from ..utils.encoding import form_field
from .base import BaseRequest, BaseResponse
from .common import Timestamp
from .user import User


@dataclass
class Message(BaseResponse):
    """
    A message in a room.

    Attributes:
        message_id: Unique identifier for the message
        account: Author of the message
        body: Message text in ChatWork notation
        send_time: When the message was posted
        update_time: When the message was last edited, 0 if never
    """

    message_id: str = ""
    account: User = field(default_factory=User)
    body: str = ""
    send_time: Timestamp = Timestamp(0)
    update_time: Timestamp = Timestamp(0)


@dataclass
class MessageListParams(BaseRequest):
    """
    Query parameters for listing messages.

    Attributes:
        force: When False (default) only messages not yet fetched are
            returned; when True the latest 100 messages are returned
            regardless, which is how older messages are reached.
    """

    force: bool = form_field(default=False, omitempty=True)


@dataclass
class MessageCreateParams(BaseRequest):
    """
    Parameters for posting a message.

    Attributes:
        body: Message text (required)
        self_unread: Leave the new message unread for the author
    """

    body: str = form_field(default="")
    self_unread: bool = form_field(default=False, omitempty=True)


@dataclass
class MessageUpdateParams(BaseRequest):
    """Parameters for editing a message."""

    body: str = form_field(default="")


@dataclass
class MessageCreatedResponse(BaseResponse):
    """Response of posting a message, carrying the new message ID."""

    message_id: str = ""
