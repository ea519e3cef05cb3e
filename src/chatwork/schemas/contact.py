"""
Contact Schema Definitions

This module defines the structures for the contact list and for pending
contact requests.
"""

from dataclasses import dataclass

from .base import BaseResponse


@dataclass
class Contact(BaseResponse):
    """
    A user in the authenticated user's contact list.

    Attributes:
        account_id: Account ID of the contact
        room_id: ID of the direct chat room with the contact
        name: Display name
    """

    account_id: int = 0
    room_id: int = 0
    name: str = ""
    chatwork_id: str = ""
    organization_id: int = 0
    organization_name: str = ""
    department: str = ""
    avatar_image_url: str = ""


@dataclass
class IncomingRequest(BaseResponse):
    """
    A pending contact request from another user.

    Attributes:
        request_id: ID used to approve or reject the request
        account_id: Account ID of the requester
        message: Message attached to the request
    """

    request_id: int = 0
    account_id: int = 0
    message: str = ""
    name: str = ""
    chatwork_id: str = ""
    organization_id: int = 0
    organization_name: str = ""
    department: str = ""
    avatar_image_url: str = ""


@dataclass
class IncomingRequestActionResponse(BaseResponse):
    """The new contact returned after approving a request."""

    account_id: int = 0
    room_id: int = 0
    name: str = ""
    chatwork_id: str = ""
    organization_id: int = 0
    organization_name: str = ""
    department: str = ""
    avatar_image_url: str = ""
