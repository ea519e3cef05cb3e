"""
Utilities for the ChatWork Client

This package contains helpers for request body encoding and for building
ChatWork message notation.
"""

from .encoding import (
    form_field,
    encode_form,
    encode_json,
    form_values,
    is_empty,
)
from .notation import mention, reply_tag, quote, info

__all__ = [
    "form_field",
    "encode_form",
    "encode_json",
    "form_values",
    "is_empty",
    "mention",
    "reply_tag",
    "quote",
    "info",
]
