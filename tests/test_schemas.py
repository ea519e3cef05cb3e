"""
Tests for Schemas

Tests for decoding resource schemas from ChatWork JSON payloads, encoding
request parameter objects, and the Timestamp type.
"""

import json

import pytest

from chatwork import (
    Me,
    MembersUpdatedResponse,
    Message,
    MessageCreateParams,
    MyTask,
    Room,
    RoomCreateParams,
    RoomMembersUpdateParams,
    RoomUpdateParams,
    Task,
    TaskCreateParams,
    TaskListParams,
    Timestamp,
    User,
)
from chatwork.schemas import File, MessageListParams, MyTaskListParams


# Timestamp Tests


def test_timestamp_converts_to_unix_seconds():
    """Test that a Timestamp round-trips through datetime."""
    ts = Timestamp(1609459200)

    assert int(ts.to_datetime().timestamp()) == 1609459200
    assert ts == 1609459200


def test_timestamp_string_rendering():
    """Test that str() of a Timestamp matches the datetime rendering."""
    ts = Timestamp(1609459200)

    assert str(ts) != ""
    assert str(ts) == str(ts.to_datetime())
    assert f"{ts}" == str(ts)
    assert repr(ts) == "Timestamp(1609459200)"


# Response Schema Tests


def test_room_from_dict():
    """Test Room can be created from an API payload."""
    data = {
        "room_id": 123,
        "name": "Group Chat Name",
        "type": "group",
        "role": "admin",
        "sticky": False,
        "unread_num": 10,
        "mention_num": 1,
        "mytask_num": 0,
        "message_num": 122,
        "file_num": 10,
        "task_num": 17,
        "icon_path": "https://example.com/ico_group.png",
        "last_update_time": 1298905200,
    }

    room = Room.from_dict(data)

    assert room.room_id == 123
    assert room.name == "Group Chat Name"
    assert room.type == "group"
    assert room.unread_num == 10
    assert isinstance(room.last_update_time, Timestamp)
    assert room.last_update_time == 1298905200
    assert room.description == ""


def test_room_ignores_unknown_keys():
    """Test that keys the schema does not declare are ignored."""
    room = Room.from_dict({"room_id": 1, "brand_new_field": "x"})

    assert room.room_id == 1
    assert not hasattr(room, "brand_new_field")


def test_from_dict_rejects_non_object():
    """Test that from_dict refuses anything but a JSON object."""
    with pytest.raises(TypeError, match="JSON object"):
        Room.from_dict([{"room_id": 1}])


def test_message_from_json_with_nested_account():
    """Test Message decoding with its embedded account."""
    json_str = json.dumps(
        {
            "message_id": "5",
            "account": {
                "account_id": 123,
                "name": "Bob",
                "avatar_image_url": "https://example.com/ico_avatar.png",
            },
            "body": "Hello Chatwork!",
            "send_time": 1384242850,
            "update_time": 0,
        }
    )

    message = Message.from_json(json_str)

    assert message.message_id == "5"
    assert isinstance(message.account, User)
    assert message.account.account_id == 123
    assert message.account.name == "Bob"
    assert message.send_time == 1384242850
    assert isinstance(message.update_time, Timestamp)


def test_message_defaults_when_account_missing():
    """Test that a missing nested object leaves an empty default."""
    message = Message.from_dict({"message_id": "9", "account": None})

    assert message.account == User()


def test_task_and_my_task_from_dict():
    """Test decoding of room tasks and the user's tasks."""
    task = Task.from_dict(
        {
            "task_id": 3,
            "account": {"account_id": 123, "name": "Bob"},
            "assigned_by_account": {"account_id": 456, "name": "Anna"},
            "message_id": "13",
            "body": "buy milk",
            "limit_time": 1384354799,
            "status": "open",
            "limit_type": "date",
        }
    )
    my_task = MyTask.from_dict(
        {
            "task_id": 4,
            "room": {"room_id": 5, "name": "Group Chat Name", "icon_path": ""},
            "assigned_by_account": {"account_id": 78, "name": "Anna"},
            "status": "done",
        }
    )

    assert task.account.account_id == 123
    assert task.assigned_by_account.name == "Anna"
    assert task.limit_time == 1384354799
    assert my_task.room.room_id == 5
    assert my_task.assigned_by_account.account_id == 78
    assert my_task.limit_time == 0


def test_list_from_json():
    """Test decoding a JSON array of schemas."""
    files = File.list_from_json(
        json.dumps(
            [
                {"file_id": 3, "filename": "README.md", "filesize": 2232},
                {"file_id": 4, "filename": "logo.png", "upload_time": 1384414750},
            ]
        )
    )

    assert [f.file_id for f in files] == [3, 4]
    assert files[1].upload_time == 1384414750


def test_me_and_members_updated_from_dict():
    """Test decoding of the profile and membership update result."""
    me = Me.from_dict({"account_id": 1, "name": "John", "login_mail": "j@example.com"})
    updated = MembersUpdatedResponse.from_dict(
        {"admin": [123], "member": [21, 344], "readonly": []}
    )

    assert me.login_mail == "j@example.com"
    assert updated.member == [21, 344]
    assert updated.readonly == []


# Request Parameter Tests


def test_room_create_params_to_form():
    """Test that lists are comma-joined and empty fields omitted."""
    params = RoomCreateParams(
        name="Website renewal",
        members_admin_ids=[123, 542],
        members_readonly_ids=[21],
    )

    assert params.to_form() == {
        "name": "Website renewal",
        "members_admin_ids": "123,542",
        "members_readonly_ids": "21",
    }


def test_required_fields_are_kept_when_empty():
    """Test that fields without omitempty are always encoded."""
    assert RoomCreateParams().to_form() == {"name": ""}
    assert TaskCreateParams(body="Review").to_form() == {"body": "Review", "to_ids": ""}


def test_optional_params_encode_to_nothing_when_empty():
    """Test that all-optional parameter objects encode to no values."""
    assert RoomUpdateParams().to_form() == {}
    assert RoomMembersUpdateParams().to_form() == {}
    assert TaskListParams().to_form() == {}
    assert MyTaskListParams().to_form() == {}
    assert MessageListParams().to_form() == {}


def test_booleans_encode_as_flags():
    """Test that booleans are sent as 1 and 0."""
    assert MessageCreateParams(body="hi", self_unread=True).to_form() == {
        "body": "hi",
        "self_unread": "1",
    }
    assert MessageListParams(force=True).to_form() == {"force": "1"}


def test_task_create_params_to_form():
    """Test task creation parameters with a deadline."""
    params = TaskCreateParams(
        body="Prepare slides", to_ids=[1, 3, 6], limit=1385996399, limit_type="time"
    )

    assert params.to_form() == {
        "body": "Prepare slides",
        "to_ids": "1,3,6",
        "limit": "1385996399",
        "limit_type": "time",
    }


def test_request_to_dict_and_json():
    """Test dictionary and JSON serialization of parameter objects."""
    params = TaskListParams(account_id=5, status="open")

    assert params.to_dict() == {"account_id": 5, "status": "open"}
    assert json.loads(params.to_json()) == {"account_id": 5, "status": "open"}
