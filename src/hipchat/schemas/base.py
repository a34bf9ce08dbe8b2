"""
Base Schema Classes

This module provides base classes for request, query and response schemas
with common serialization and deserialization methods to avoid code
duplication.

Request bodies are sparse: fields left as None are omitted from the encoded
body instead of being sent as null. Fields whose wire name differs from the
attribute name (``self``, ``from``) carry it in ``metadata={"wire": ...}``.
"""

import json
from dataclasses import fields
from enum import Enum
from typing import (
    Any,
    Dict,
    List,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from ..errors import DecodeError

T = TypeVar("T", bound="BaseResponse")
E = TypeVar("E", bound="WireEnum")

QueryPairs = List[Tuple[str, str]]


def wire_name(field) -> str:
    """Return the name a dataclass field is serialized under."""
    return field.metadata.get("wire", field.name)


def encode_value(value: Any) -> Any:
    """Convert a field value to its JSON representation."""
    if isinstance(value, (BaseRequest, BaseResponse)):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [encode_value(item) for item in value]
    return value


class WireEnum(str, Enum):
    """
    Base class for closed enumerations with a fixed string encoding.

    The wire representation of a variant is its value. Decoding anything
    outside the declared set raises DecodeError naming the enumeration.
    """

    @classmethod
    def wire_label(cls) -> str:
        """Label used in decode error messages."""
        return cls.__name__.lower()

    @classmethod
    def decode(cls: Type[E], value: Any) -> E:
        """
        Decode a wire string into a variant.

        Args:
            value: The raw value found in the response body

        Returns:
            The matching variant.

        Raises:
            DecodeError: If the value is not one of the canonical strings.
        """
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise DecodeError(f"invalid value for {cls.wire_label()}: {value!r}")

    def __str__(self) -> str:
        return self.value


class BaseRequest:
    """
    Base class for request body schemas.

    Provides common serialization methods for converting request objects
    to dictionary and JSON formats.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary keyed by wire names. Fields set to None are omitted.
        """
        body = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue
            body[wire_name(field)] = encode_value(value)
        return body

    def to_json(self) -> str:
        """
        Convert to JSON string.

        Returns:
            JSON string representation of the request.
        """
        return json.dumps(self.to_dict())


class BaseQuery:
    """
    Base class for sparse filter and pagination structures.

    Each field maps to one query parameter whose key is the field name with
    underscores replaced by hyphens. Absent fields produce no parameter.
    """

    @staticmethod
    def format_value(value: Any) -> str:
        """Render a value as its plain query string form."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return value.value
        return str(value)

    def extend_query(self, params: QueryPairs) -> QueryPairs:
        """
        Append one (key, value) pair per present field, in declared order.

        Args:
            params: Accumulator to append to

        Returns:
            The same accumulator, for chaining.
        """
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue
            key = field.name.replace("_", "-")
            params.append((key, self.format_value(value)))
        return params

    def to_params(self) -> QueryPairs:
        """Build a fresh list of query parameters."""
        return self.extend_query([])


class BaseResponse:
    """
    Base class for response schemas.

    Provides common deserialization methods for creating response objects
    from dictionary and JSON formats. Any schema mismatch surfaces as a
    DecodeError.
    """

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from dictionary.

        Args:
            data: Dictionary containing response data.

        Returns:
            Instance of the response class.

        Raises:
            DecodeError: If required keys are missing or have the wrong shape.
        """
        if not isinstance(data, dict):
            raise DecodeError(
                f"expected an object for {cls.__name__}, "
                f"got {type(data).__name__}"
            )
        try:
            record = cls._from_data(data)
        except DecodeError:
            raise
        except KeyError as e:
            raise DecodeError(
                f"missing field {e.args[0]!r} in {cls.__name__}"
            ) from e
        except (TypeError, AttributeError, ValueError) as e:
            raise DecodeError(f"invalid {cls.__name__}: {e}") from e
        check_types(record)
        return record

    @classmethod
    def from_json(cls: Type[T], json_str: str) -> T:
        """
        Create instance from JSON string.

        Args:
            json_str: JSON string containing response data.

        Returns:
            Instance of the response class.
        """
        try:
            data = json.loads(json_str)
        except ValueError as e:
            raise DecodeError(f"malformed JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def _from_data(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Create instance from response data dictionary.

        Unknown keys are ignored so that fields added by the server do not
        break decoding. Should be overridden by subclasses whose wire names
        or nested records need custom handling.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert back to a dictionary keyed by wire names.

        Returns:
            Dictionary with nested records, lists and enums encoded.
        """
        return {
            wire_name(field): encode_value(getattr(self, field.name))
            for field in fields(self)
        }


def matches_type(value: Any, hint: Any) -> bool:
    """
    Check a decoded value against a field annotation.

    ``bool`` is not accepted where ``int`` is declared. Annotations other
    than scalars, records, enums, lists and unions are not checked.
    """
    origin = get_origin(hint)
    if origin is Union:
        return any(matches_type(value, arg) for arg in get_args(hint))
    if origin is list:
        (item_hint,) = get_args(hint) or (Any,)
        return isinstance(value, list) and all(
            matches_type(item, item_hint) for item in value
        )
    if hint is type(None):
        return value is None
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if isinstance(hint, type) and issubclass(hint, (bool, str, Enum)):
        return isinstance(value, hint)
    if isinstance(hint, type) and issubclass(hint, BaseResponse):
        return isinstance(value, hint)
    return True


def check_types(record: BaseResponse) -> None:
    """
    Verify every field of a decoded record, and of nested records.

    Raises:
        DecodeError: Naming the first field whose value has the wrong type.
    """
    hints = get_type_hints(type(record))
    for field in fields(record):
        value = getattr(record, field.name)
        if not matches_type(value, hints[field.name]):
            raise DecodeError(
                f"invalid type for {type(record).__name__}.{field.name}"
            )
        nested = value if isinstance(value, list) else [value]
        for item in nested:
            if isinstance(item, BaseResponse):
                check_types(item)


def decode_list(item_cls: Type[T], data: Any) -> List[T]:
    """Decode a JSON array of records."""
    if not isinstance(data, list):
        raise DecodeError(
            f"expected a list of {item_cls.__name__}, "
            f"got {type(data).__name__}"
        )
    return [item_cls._from_data(item) for item in data]


def decode_optional(item_cls: Type[T], data: Any):
    """Decode a nested record that may be absent or null."""
    if data is None:
        return None
    return item_cls._from_data(data)
