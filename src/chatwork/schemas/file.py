"""
File Schema Definitions

This module defines the structures for files uploaded to rooms.
"""

from dataclasses import dataclass, field

from ..utils.encoding import form_field
from .base import BaseRequest, BaseResponse
from .common import Timestamp
from .user import User


@dataclass
class File(BaseResponse):
    """
    A file uploaded to a room.

    Attributes:
        file_id: Unique identifier for the file
        account: Uploader
        message_id: ID of the message the file was posted with
        filename: Original file name
        filesize: Size in bytes
        upload_time: When the file was uploaded
        download_url: Temporary download URL, only set when requested
    """

    file_id: int = 0
    account: User = field(default_factory=User)
    message_id: str = ""
    filename: str = ""
    filesize: int = 0
    upload_time: Timestamp = Timestamp(0)
    download_url: str = ""


@dataclass
class FileListParams(BaseRequest):
    """Query filter for listing files: only those uploaded by ``account_id``."""

    account_id: int = form_field(default=0, omitempty=True)


@dataclass
class FileGetParams(BaseRequest):
    """Query parameters for fetching a file."""

    create_download_url: bool = form_field(default=False, omitempty=True)
