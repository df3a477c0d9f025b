# fixed-width integer types and small value objects shared across the app

from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class IntType:
    # immutable description of a C-family integer type
    name: str
    bits: int
    signed: bool
    rank: int

    @property
    def modulus(self) -> int:
        return 1 << self.bits

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.modulus - 1

    def wrap(self, value: int) -> int:
        # reduce modulo 2**bits, two's complement for signed types
        value %= self.modulus
        if self.signed and value > self.max_value:
            value -= self.modulus
        return value

    def can_represent(self, other: "IntType") -> bool:
        return self.min_value <= other.min_value and other.max_value <= self.max_value

    def __str__(self) -> str:
        return self.name

# rank follows the width; bool sits below everything
BOOL = IntType("bool", 8, False, 0)
INT8 = IntType("int8_t", 8, True, 1)
UINT8 = IntType("uint8_t", 8, False, 1)
INT16 = IntType("int16_t", 16, True, 2)
UINT16 = IntType("uint16_t", 16, False, 2)
INT32 = IntType("int32_t", 32, True, 3)
UINT32 = IntType("uint32_t", 32, False, 3)
INT64 = IntType("int64_t", 64, True, 4)
UINT64 = IntType("uint64_t", 64, False, 4)

_BY_WIDTH = {
    16: (INT16, UINT16),
    32: (INT32, UINT32),
    64: (INT64, UINT64),
}

def native_int(bits: int = 32) -> IntType:
    # the platform "int" for a given width
    try:
        return _BY_WIDTH[bits][0]
    except KeyError:
        raise ValueError(f"unsupported native int width: {bits}") from None

def native_uint(bits: int = 32) -> IntType:
    try:
        return _BY_WIDTH[bits][1]
    except KeyError:
        raise ValueError(f"unsupported native int width: {bits}") from None

def unsigned_of(t: IntType) -> IntType:
    # only called on promoted types, which are always at least 16 bits wide
    return _BY_WIDTH[t.bits][1]

@dataclass(frozen=True)
class Operand:
    # a value already reduced into the range of its type
    value: int
    type: IntType

    @classmethod
    def of(cls, value: int, type: IntType) -> "Operand":
        # binding a value to a typed variable wraps silently, like the implicit conversion
        return cls(value=type.wrap(value), type=type)

@dataclass(frozen=True)
class EvaluationResult:
    # output value object of the evaluator
    total: int
    total_type: IntType
    average: float
    wrapped: bool
