"""
Base Schema Classes

This module provides base classes for request parameter and response
schemas with common serialization and deserialization methods to avoid
code duplication.

Response schemas are dataclasses whose fields all carry zero-value
defaults, mirroring the optional-field rules of the ChatWork JSON schema:
a key missing from the payload leaves the field at its default, and keys
the schema does not declare are ignored.
"""

import json
from dataclasses import fields
from typing import Any, Dict, List, Type, TypeVar, get_args, get_origin

from ..utils.encoding import body_items, encode_json, form_values
from .common import Timestamp

T = TypeVar("T", bound="BaseResponse")

_SCALAR_TYPES = (bool, int, float, str)


def _matches(expected: type, value: Any) -> bool:
    """Check a decoded JSON value against a declared scalar type."""
    if isinstance(value, bool):
        return expected is bool
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


def _check(owner: type, name: str, expected: type, value: Any) -> Any:
    if not _matches(expected, value):
        raise TypeError(
            f"Field {owner.__name__}.{name} expects {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


class BaseRequest:
    """
    Base class for request parameter schemas.

    Provides common serialization methods for converting parameter objects
    to form values, dictionaries and JSON.
    """

    def to_form(self) -> Dict[str, str]:
        """
        Convert to form values.

        Returns:
            Mapping of field name to encoded string value. Fields declared
            with ``omitempty`` are left out when empty.
        """
        return form_values(self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary of the fields that would be sent, with raw values.
        """
        return dict(body_items(self))

    def to_json(self) -> str:
        """
        Convert to JSON string.

        Returns:
            JSON string representation of the request.
        """
        return encode_json(self).decode("utf-8")


class BaseResponse:
    """
    Base class for response schemas.

    Provides common deserialization methods for creating response objects
    from dictionary and JSON formats.
    """

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from dictionary.

        Args:
            data: Decoded JSON object.

        Returns:
            Instance of the response class.

        Raises:
            TypeError: If data is not a JSON object or a field has the
                wrong shape.
        """
        if not isinstance(data, dict):
            raise TypeError(
                f"Expected a JSON object for {cls.__name__}, "
                f"got {type(data).__name__}"
            )
        return cls._from_data(data)

    @classmethod
    def from_json(cls: Type[T], json_str: str) -> T:
        """
        Create instance from JSON string.

        Args:
            json_str: JSON string containing response data.

        Returns:
            Instance of the response class.
        """
        data = json.loads(json_str)
        return cls.from_dict(data)

    @classmethod
    def list_from_json(cls: Type[T], json_str: str) -> List[T]:
        """Create a list of instances from a JSON array string."""
        data = json.loads(json_str)
        if not isinstance(data, list):
            raise TypeError(
                f"Expected a JSON array of {cls.__name__}, "
                f"got {type(data).__name__}"
            )
        return [cls.from_dict(item) for item in data]

    @classmethod
    def _from_data(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from response data dictionary.

        Nested response schemas and Timestamp fields are converted based on
        the declared field type; scalar and list fields are checked against
        it. Subclasses may override for custom deserialization.

        Args:
            data: Dictionary containing response data.

        Returns:
            Instance of the response class.
        """
        values = {}
        for f in fields(cls):
            if f.name not in data or data[f.name] is None:
                continue
            value = data[f.name]
            if f.type is Timestamp:
                value = Timestamp(_check(cls, f.name, int, value))
            elif isinstance(f.type, type) and issubclass(f.type, BaseResponse):
                value = f.type.from_dict(value)
            elif get_origin(f.type) is list:
                (item_type,) = get_args(f.type)
                _check(cls, f.name, list, value)
                if item_type in _SCALAR_TYPES:
                    for item in value:
                        _check(cls, f.name, item_type, item)
            elif f.type in _SCALAR_TYPES:
                _check(cls, f.name, f.type, value)
            values[f.name] = value
        return cls(**values)
