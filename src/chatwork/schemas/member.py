"""
Member Schema Definitions

This module defines the structures for room membership: the members of a
room and the parameters and result of replacing them.
"""

from dataclasses import dataclass, field
from typing import List

from ..utils.encoding import form_field
from .base import BaseRequest, BaseResponse


@dataclass
class Member(BaseResponse):
    """
    A member of a room.

    Attributes:
        account_id: Account ID of the member
        role: Role in the room: "admin", "member" or "readonly"
        name: Display name
    """

    account_id: int = 0
    role: str = ""
    name: str = ""
    chatwork_id: str = ""
    organization_id: int = 0
    organization_name: str = ""
    department: str = ""
    avatar_image_url: str = ""


@dataclass
class RoomMembersUpdateParams(BaseRequest):
    """
    Parameters for replacing the members of a room.

    The lists replace the current membership entirely, so every member that
    should stay in the room has to be included.
    """

    members_admin_ids: List[int] = form_field(default_factory=list, omitempty=True)
    members_member_ids: List[int] = form_field(default_factory=list, omitempty=True)
    members_readonly_ids: List[int] = form_field(
        default_factory=list, omitempty=True
    )


@dataclass
class MembersUpdatedResponse(BaseResponse):
    """
    Account IDs per role after a membership update.

    Attributes:
        admin: Account IDs with the admin role
        member: Account IDs with the member role
        readonly: Account IDs with the readonly role
    """

    admin: List[int] = field(default_factory=list)
    member: List[int] = field(default_factory=list)
    readonly: List[int] = field(default_factory=list)
