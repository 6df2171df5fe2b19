"""
Fields
-------

Defines some additional fields so that the Schemas can
serialize to and from additional native python data types.
"""

from enum import Enum
from typing import Union, Optional, Type

from marshmallow import Schema, fields, ValidationError


class EnumField(fields.Field):
    """
    A field that serializes an :class:`~enum.Enum` to its value and back.
    """

    def __init__(self, enum_type: Type[Enum], *args, **kwargs):
        """
        :param enum_type: the :class:`~enum.Enum` subclass
        """
        super().__init__(*args, **kwargs)
        if not issubclass(enum_type, Enum):
            raise ValidationError(f"Expected enum type, got {type(enum_type)} instead")
        self._enum_type = enum_type

    def _serialize(self, value: Union[Enum, str], attr, obj, **kwargs):
        """Converts an enum to a string representation."""
        if isinstance(value, self._enum_type):
            return value.value
        if isinstance(value, str) and value in (enum.value for enum in self._enum_type):
            return value
        return None

    def _deserialize(self, value: str, attr, data, **kwargs) -> Optional[Enum]:
        """Converts a string back to the enum type T."""
        try:
            return self._enum_type(value)
        except ValueError as error:
            raise ValidationError(f"Field does not exist on {self._enum_type}.") from error


def Many(schema: Schema, **kwargs):
    return fields.List(fields.Nested(schema), **kwargs)
