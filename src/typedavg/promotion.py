# explicit C-family integer conversions.
# nothing here relies on python's own int semantics: every operand is widened to a
# common type first and the result is cast back into that type's range.
# arithmetic never raises, overflow wraps modulo 2**bits.

from __future__ import annotations
import logging
from .models import IntType, Operand, native_int, unsigned_of

logger = logging.getLogger(__name__)

def promote(type: IntType, native: IntType) -> IntType:
    # integral promotion: anything ranked below int becomes int when int can hold all its values
    if type.rank < native.rank:
        return native if native.can_represent(type) else unsigned_of(native)
    return type

def common_type(left: IntType, right: IntType, native: IntType) -> IntType:
    # usual arithmetic conversions, applied after promotion
    left = promote(left, native)
    right = promote(right, native)

    if left == right:
        return left
    if left.signed == right.signed:
        return left if left.rank >= right.rank else right

    signed, unsigned = (left, right) if left.signed else (right, left)
    # equal rank with different signedness resolves to unsigned
    if unsigned.rank >= signed.rank:
        return unsigned
    if signed.can_represent(unsigned):
        return signed
    return unsigned_of(signed)

def _binary(left: Operand, right: Operand, native: IntType, op) -> Operand:
    target = common_type(left.type, right.type, native)
    a = target.wrap(left.value)
    b = target.wrap(right.value)
    exact = op(a, b)
    result = Operand.of(exact, target)
    if result.value != exact:
        logger.debug("%s result %d wrapped to %d in %s", op.__name__, exact, result.value, target)
    return result

def _add(a: int, b: int) -> int:
    return a + b

def _subtract(a: int, b: int) -> int:
    return a - b

def add(left: Operand, right: Operand, native: IntType | None = None) -> Operand:
    return _binary(left, right, native or native_int(), _add)

def subtract(left: Operand, right: Operand, native: IntType | None = None) -> Operand:
    return _binary(left, right, native or native_int(), _subtract)
