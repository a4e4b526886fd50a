"""JSON serialization helpers using optional orjson."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
from typing import Any

import attrs


def to_jsonable(data: object) -> Any:
    """Convert attrs records and tuples into plain JSON structures.

    Args:
        data: Record, sequence or mapping to convert.

    Returns:
        Structure made of dicts, lists and scalars only.
    """

    if attrs.has(type(data)):
        return {
            key: to_jsonable(value)
            for key, value in attrs.asdict(
                data, recurse=False  # type: ignore[arg-type]
            ).items()
        }
    if isinstance(data, dict):
        return {str(key): to_jsonable(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_jsonable(item) for item in data]
    return data


def json_dumps(data: object) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Data structure to serialize; attrs records are converted with
            ``to_jsonable`` first.

    Returns:
        JSON representation of ``data``.
    """

    plain = to_jsonable(data)
    if orjson is not None:
        return orjson.dumps(plain).decode()
    return json.dumps(plain, ensure_ascii=False)


def json_loads(data: str | bytes) -> object:
    """Deserialize JSON data from a string or bytes.

    Args:
        data: JSON content as ``str`` or ``bytes``.

    Returns:
        Parsed JSON object.
    """

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        return json.loads(data.decode())
    return json.loads(data)
