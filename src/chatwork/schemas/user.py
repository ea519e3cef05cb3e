"""
User Schema Definitions

This module defines the account structures returned by the ChatWork API:
other users as they appear inside messages, tasks and files, and the
authenticated user's own profile and unread status.
"""

from dataclasses import dataclass

from .base import BaseResponse


@dataclass
class User(BaseResponse):
    """
    A ChatWork user account.

    Messages, tasks and files embed a short form of this record
    (``account_id``, ``name``, ``avatar_image_url``); the profile fields
    are only filled in where the API returns them.

    Attributes:
        account_id: Unique account identifier
        name: Display name
        avatar_image_url: URL of the avatar image
        room_id: ID of the direct chat room with this user, if any
    """

    account_id: int = 0
    room_id: int = 0
    name: str = ""
    avatar_image_url: str = ""
    chatwork_id: str = ""
    organization_id: int = 0
    organization_name: str = ""
    department: str = ""
    title: str = ""
    url: str = ""
    introduction: str = ""
    mail: str = ""
    tel_organization: str = ""
    tel_extension: str = ""
    tel_mobile: str = ""
    skype: str = ""
    facebook: str = ""
    twitter: str = ""


@dataclass
class Me(BaseResponse):
    """
    Detailed profile of the authenticated user.

    Includes private details such as ``login_mail`` that are not visible
    on other users' profiles.
    """

    account_id: int = 0
    room_id: int = 0
    name: str = ""
    chatwork_id: str = ""
    organization_id: int = 0
    organization_name: str = ""
    department: str = ""
    title: str = ""
    url: str = ""
    introduction: str = ""
    mail: str = ""
    tel_organization: str = ""
    tel_extension: str = ""
    tel_mobile: str = ""
    skype: str = ""
    facebook: str = ""
    twitter: str = ""
    avatar_image_url: str = ""
    login_mail: str = ""


@dataclass
class MyStatus(BaseResponse):
    """
    Unread counts for the authenticated user across all rooms.

    Attributes:
        unread_room_num: Number of rooms with unread messages
        mention_room_num: Number of rooms with unread mentions
        mytask_room_num: Number of rooms with open tasks for the user
        unread_num: Total unread messages
        mention_num: Total unread mentions
        mytask_num: Total open tasks assigned to the user
    """

    unread_room_num: int = 0
    mention_room_num: int = 0
    mytask_room_num: int = 0
    unread_num: int = 0
    mention_num: int = 0
    mytask_num: int = 0
