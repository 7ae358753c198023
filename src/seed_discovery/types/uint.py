"""Fixed-width unsigned integers used for ports and packed addresses."""

from __future__ import annotations

from typing import Any, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """An `int` restricted to the range of an unsigned integer of `BITS` bits."""

    BITS: ClassVar[int]
    """Width of the integer (set by subclasses)."""

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Create and validate a new instance.

        Raises:
            OverflowError: If `value` is outside [0, 2**BITS - 1].
            TypeError: If `value` is a bool or cannot be converted to int.
        """
        if isinstance(value, bool):
            raise TypeError(f"{cls.__name__} does not accept bool values")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def max_value(cls) -> int:
        """Largest value representable by this type."""
        return 2**cls.BITS - 1

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.int_schema(ge=0, lt=2**cls.BITS),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))


class Uint16(BaseUint):
    """A 16-bit unsigned integer (uint16)."""

    BITS = 16


class Uint32(BaseUint):
    """A 32-bit unsigned integer (uint32)."""

    BITS = 32
