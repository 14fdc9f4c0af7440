"""Shape checks shared by the decoders.

Each helper reads one value out of a JSON object and raises DecodeError with
the path and what was expected when it is missing or of the wrong kind.
"""

from typing import Any

from prismic_client.errors import DecodeError

_MISSING = object()


def expect_object(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise DecodeError("an object", value, path)
    return value


def expect_list(value: Any, path: str) -> list:
    if not isinstance(value, list):
        raise DecodeError("an array", value, path)
    return value


def require(obj: dict, key: str, path: str) -> Any:
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        raise DecodeError(f"a {key!r} key", obj, path)
    return value


def get_str(obj: dict, key: str, path: str) -> str:
    value = require(obj, key, path)
    if not isinstance(value, str):
        raise DecodeError("a string", value, f"{path}.{key}")
    return value


def get_optional_str(obj: dict, key: str, path: str) -> str | None:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise DecodeError("a string or null", value, f"{path}.{key}")
    return value


def get_int(obj: dict, key: str, path: str) -> int:
    value = require(obj, key, path)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError("an integer", value, f"{path}.{key}")
    return value


def get_optional_int(obj: dict, key: str, path: str) -> int | None:
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError("an integer or null", value, f"{path}.{key}")
    return value


def get_bool(obj: dict, key: str, path: str, default: bool | None = None) -> bool:
    if default is not None and key not in obj:
        return default
    value = require(obj, key, path)
    if not isinstance(value, bool):
        raise DecodeError("a boolean", value, f"{path}.{key}")
    return value


def get_object(obj: dict, key: str, path: str) -> dict:
    return expect_object(require(obj, key, path), f"{path}.{key}")


def get_str_list(obj: dict, key: str, path: str) -> list[str]:
    items = expect_list(require(obj, key, path), f"{path}.{key}")
    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise DecodeError("a string", item, f"{path}.{key}[{i}]")
    return items


def get_str_dict(obj: dict, key: str, path: str) -> dict[str, str]:
    mapping = get_object(obj, key, path)
    for name, value in mapping.items():
        if not isinstance(value, str):
            raise DecodeError("a string", value, f"{path}.{key}.{name}")
    return mapping


def get_type_tag(obj: dict, path: str) -> str:
    """Read the ``type`` discriminant of a tagged JSON object."""
    return get_str(obj, "type", path)
