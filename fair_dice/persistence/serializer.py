"""
serializer.py
JSON helpers for engine events written to the transcript.
"""

import json
from typing import Any


def dumps(obj: Any) -> str:
    """
    Serialize a Python object (including dataclasses) to a JSON string with stable key order.
    Args:
        obj: Object to serialize.
    Returns:
        str: JSON string.
    """
    return json.dumps(obj, sort_keys=True, default=lambda o: getattr(o, '__dict__', str(o)))


def loads(s: str):
    """
    Deserialize a JSON string to a Python object (dict/list).
    Args:
        s (str): JSON string.
    Returns:
        object: Deserialized Python object.
    """
    return json.loads(s)
