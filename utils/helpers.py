"""
Utility functions and helpers for the context runtime.
Includes logging setup and snapshot serialization.
"""

import json
import logging
import sys
from typing import Any, Dict, Mapping, Union

from config.settings import settings

def setup_logging():
    """Set up logging configuration for the application."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=handlers
    )

    logger = logging.getLogger(__name__)
    logger.info("Logging system initialized")

def serialize_snapshot(snapshot: Mapping[str, Any]) -> str:
    """
    Serialize a dehydrated snapshot to JSON text.

    Args:
        snapshot: Snapshot mapping as returned by ``Context.dehydrate()``

    Returns:
        JSON string

    Raises:
        TypeError: If the snapshot holds values JSON cannot represent
    """
    return json.dumps(snapshot, indent=settings.snapshot_indent(), ensure_ascii=False)

def deserialize_snapshot(data: Union[str, bytes, bytearray, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Turn a transported snapshot back into a plain mapping.

    Mappings are passed through (shallow-copied), text and bytes are parsed as
    JSON. The result is guaranteed to be a ``dict``.

    Args:
        data: Snapshot mapping, JSON string or JSON bytes

    Returns:
        Snapshot dictionary

    Raises:
        ValueError: If the payload is not valid JSON or not a JSON object
        TypeError: If the payload type is unsupported
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode(settings.SNAPSHOT_ENCODING)

    if isinstance(data, str):
        parsed = json.loads(data)
    elif isinstance(data, Mapping):
        parsed = dict(data)
    else:
        raise TypeError(f"Unsupported snapshot type: {type(data).__name__}")

    if not isinstance(parsed, dict):
        raise ValueError(f"Snapshot must be a JSON object, got {type(parsed).__name__}")
    return parsed
