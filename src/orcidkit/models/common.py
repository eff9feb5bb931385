"""Decoding helpers and value wrappers shared by the ORCID resource models.

Every field of the upstream schema is optional: a missing key or an explicit
``null`` decodes to ``None``. A value that is present but has the wrong JSON
type raises ``DecodingError`` naming the dotted path of the offending field.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from orcidkit.errors import DecodingError

T = TypeVar("T")


def json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def expect_object(data: Any, path: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodingError(f"{path}: expected object, got {json_type(data)}")
    return data


def get_str(data: dict[str, Any], key: str, path: str) -> Optional[str]:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise DecodingError(f"{path}.{key}: expected string, got {json_type(value)}")


def get_int(data: dict[str, Any], key: str, path: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    # bool is an int subclass but never a valid JSON number here
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise DecodingError(f"{path}.{key}: expected integer, got {json_type(value)}")


def get_model(
    data: dict[str, Any],
    key: str,
    path: str,
    from_dict: Callable[[Any, str], T],
) -> Optional[T]:
    value = data.get(key)
    if value is None:
        return None
    return from_dict(value, f"{path}.{key}")


def get_list(
    data: dict[str, Any],
    key: str,
    path: str,
    from_dict: Callable[[Any, str], T],
) -> Optional[list[T]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise DecodingError(f"{path}.{key}: expected array, got {json_type(value)}")
    return [from_dict(item, f"{path}.{key}[{i}]") for i, item in enumerate(value)]


@dataclass(frozen=True)
class StringValue:
    """ORCID's ``{"value": "..."}`` wrapper."""

    value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "StringValue":
        data = expect_object(data, path)
        return cls(value=get_str(data, "value", path))


@dataclass(frozen=True)
class ExternalID:
    external_id_type: Optional[str] = None
    external_id_value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "ExternalID":
        data = expect_object(data, path)
        return cls(
            external_id_type=get_str(data, "external-id-type", path),
            external_id_value=get_str(data, "external-id-value", path),
        )


@dataclass(frozen=True)
class ExternalIDs:
    external_ids: Optional[list[ExternalID]] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "ExternalIDs":
        data = expect_object(data, path)
        return cls(external_ids=get_list(data, "external-id", path, ExternalID.from_dict))

    def find(self, id_type: str) -> Optional[str]:
        """Value of the first identifier of ``id_type`` (e.g. ``"doi"``)."""
        for external_id in self.external_ids or []:
            if external_id.external_id_type == id_type:
                return external_id.external_id_value
        return None


def string_value(wrapper: Optional[StringValue]) -> Optional[str]:
    return wrapper.value if wrapper else None
