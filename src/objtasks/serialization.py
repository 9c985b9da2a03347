"""JSON helpers: serialise objects and rebuild typed objects from JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["get_json", "from_json"]


def _default(obj: Any) -> Any:
    """Fallback encoder for objects the json module does not know."""
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    ``[1, 2, 3]`` becomes ``'[1,2,3]'``; objects with a ``to_dict()`` method
    (and other dataclasses) are written as JSON objects.
    """
    return json.dumps(obj, default=_default, separators=(",", ":"))


def from_json(cls: type[T], source: str) -> T:
    """Parse *source* and build an instance of *cls* from its named fields.

    Uses ``cls.from_dict(data)`` when the type provides one, otherwise
    ``cls(**data)``.  Values are matched by key, never by position.

    Raises:
        json.JSONDecodeError: *source* is not valid JSON.
        KeyError: ``from_dict`` did not find a field it needs.
        TypeError: *source* does not hold a JSON object, or its keys do not
            fit the constructor of *cls*.
    """
    data = json.loads(source)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    logger.debug("Building %s from keys %s", cls.__name__, sorted(data))
    factory = getattr(cls, "from_dict", None)
    if callable(factory):
        return factory(data)
    return cls(**data)
