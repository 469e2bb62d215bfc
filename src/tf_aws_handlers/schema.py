"""
Resource schema declarations and the schema-driven config decoder.

A schema is a plain dict mapping field names to Field objects. Nested blocks
are lists whose elements are decoded against the field's ``elem`` schema.
"""

from typing import Any, Callable, Dict, List, Optional

from tf_aws_handlers.arn import parse_arn
from tf_aws_handlers.errors import ConfigValidationError

TYPE_STRING = 'string'
TYPE_INT = 'int'
TYPE_LIST = 'list'
TYPE_MAP = 'map'

_ZERO_VALUES = {
    TYPE_STRING: '',
    TYPE_INT: 0,
}


class Field:
    """Declaration of a single resource attribute."""

    def __init__(self, type: str, required: bool = False, optional: bool = False,
                 computed: bool = False, force_new: bool = False, max_items: Optional[int] = None,
                 elem: Optional[Dict[str, 'Field']] = None,
                 validate: Optional[Callable[[Any, str], None]] = None):
        self.type = type
        self.required = required
        self.optional = optional
        self.computed = computed
        self.force_new = force_new
        self.max_items = max_items
        self.elem = elem
        self.validate = validate

    @property
    def computed_only(self) -> bool:
        return self.computed and not (self.required or self.optional)

    def zero_value(self) -> Any:
        if self.type == TYPE_LIST:
            return []
        if self.type == TYPE_MAP:
            return {}
        return _ZERO_VALUES[self.type]


def string_in_slice(valid: List[str]) -> Callable[[Any, str], None]:
    """Validator accepting only one of the given strings (case sensitive)."""
    def validator(value, path):
        if value not in valid:
            raise ConfigValidationError(path, f"expected one of {valid}", value)
    return validator


def int_between(low: int, high: int) -> Callable[[Any, str], None]:
    """Validator accepting integers in the closed range [low, high]."""
    def validator(value, path):
        if not low <= value <= high:
            raise ConfigValidationError(path, f"expected to be in the range ({low} - {high})", value)
    return validator


def validate_arn(value: str, path: str) -> None:
    """Validator accepting well-formed ARNs."""
    try:
        parse_arn(value)
    except ValueError as e:
        raise ConfigValidationError(path, f"invalid ARN: {e}", value) from e


def _join(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)


def decode_config(schema: Dict[str, Field], raw: Optional[Dict[str, Any]], path: str = '') -> Dict[str, Any]:
    """
    Decode a loosely-typed configuration tree against a schema.

    Fails fast on the first unknown field, missing required field, type
    mismatch, max_items overflow, computed-only field or validator failure.
    Fields that are absent (or None) in the input are left out of the
    result, so callers can tell "unset" apart from "set to zero".

    Args:
        schema: Field declarations
        raw: Configuration tree, e.g. parsed from JSON
        path: Dotted path of the tree, used in error messages

    Returns:
        dict: Normalised copy of the supplied fields

    Raises:
        ConfigValidationError: If the tree does not match the schema
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(path or '<root>', "expected a block", raw)

    for key in raw:
        if key not in schema:
            raise ConfigValidationError(_join(path, key), "unsupported argument", raw[key])
        if schema[key].computed_only and raw[key] is not None:
            raise ConfigValidationError(_join(path, key), "computed attribute cannot be set", raw[key])

    for name, field in schema.items():
        if field.required and raw.get(name) is None:
            raise ConfigValidationError(_join(path, name), "required argument is missing", None)

    decoded = {}
    for key, value in raw.items():
        if value is None:
            continue
        decoded[key] = _decode_value(schema[key], value, _join(path, key))
    return decoded


def _decode_value(field: Field, value: Any, path: str) -> Any:
    if field.type == TYPE_STRING:
        if not isinstance(value, str):
            raise ConfigValidationError(path, "expected a string", value)
    elif field.type == TYPE_INT:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigValidationError(path, "expected an integer", value)
    elif field.type == TYPE_MAP:
        if not isinstance(value, dict):
            raise ConfigValidationError(path, "expected a map", value)
        for k, v in value.items():
            if not isinstance(k, str) or not isinstance(v, str):
                raise ConfigValidationError(_join(path, k), "expected a string", v)
        value = dict(value)
    elif field.type == TYPE_LIST:
        if not isinstance(value, list):
            raise ConfigValidationError(path, "expected a list of blocks", value)
        if field.max_items is not None and len(value) > field.max_items:
            raise ConfigValidationError(path, f"at most {field.max_items} item(s) allowed", value)
        # a block with every attribute unset arrives as None
        value = [decode_config(field.elem, item, _join(path, i)) for i, item in enumerate(value)]
    else:
        raise ConfigValidationError(path, f"unknown field type {field.type}", value)

    if field.validate is not None:
        field.validate(value, path)
    return value
