# exercise logic and business rules.
# provides the typed average evaluator plus the pure pieces of the greeting and variables exercises;
# none of these functions touch the terminal

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List
from .models import INT8, UINT32, EvaluationResult, IntType, Operand, native_int, native_uint
from .promotion import add, subtract

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Platform:
    # width of the native "int"; everything else is fixed-width
    int_bits: int = 32

    @property
    def int_type(self) -> IntType:
        return native_int(self.int_bits)

    @property
    def uint_type(self) -> IntType:
        return native_uint(self.int_bits)

DEFAULT_PLATFORM = Platform()

def evaluate_detailed(native_signed: int, narrow_signed: int, wide_unsigned: int,
                      platform: Platform = DEFAULT_PLATFORM) -> EvaluationResult:
    native = platform.int_type
    # bind each argument to its parameter type first, exactly like a call through a typed signature
    a = Operand.of(native_signed, native)
    b = Operand.of(narrow_signed, INT8)
    c = Operand.of(wide_unsigned, UINT32)

    # (a + b) + c, each step under the usual arithmetic conversions
    total = add(add(a, b, native), c, native)
    exact = a.value + b.value + c.value
    wrapped = total.value != exact
    if wrapped:
        # silent by policy: logged for whoever is looking, never raised
        logger.debug("sum of %d, %d, %d evaluated in %s as %d (exact %d)",
                      a.value, b.value, c.value, total.type, total.value, exact)

    # the float divisor forces a true quotient instead of integer truncation
    average = total.value / 3.0
    return EvaluationResult(total=total.value, total_type=total.type, average=average, wrapped=wrapped)

def evaluate(native_signed: int, narrow_signed: int, wide_unsigned: int,
             platform: Platform = DEFAULT_PLATFORM) -> float:
    return evaluate_detailed(native_signed, narrow_signed, wide_unsigned, platform).average

@dataclass
class VariablesContext:
    # values that outlive a single call and are shared by the steps of the variables exercise
    a: int = 0
    b: int = 5

def run_variables(ctx: VariablesContext, platform: Platform = DEFAULT_PLATFORM) -> List[str]:
    native = platform.int_type
    lines: List[str] = []

    ctx.a = 7
    my_flag = False
    lines.append(f"a = {ctx.a}")
    lines.append(f"b = {ctx.b}")
    lines.append(f"flag = {format_bool(my_flag)}")

    my_flag = True
    lines.append(f"flag = {format_bool(my_flag)}")

    a = Operand.of(ctx.a, native)
    b = Operand.of(ctx.b, native)
    lines.append(f"a + b = {add(a, b, native).value}")
    difference = subtract(b, a, native)
    lines.append(f"b - a = {difference.value}")

    # assigning a negative int to an unsigned variable wraps around
    positive = Operand.of(difference.value, platform.uint_type)
    lines.append(f"b - a (unsigned) = {positive.value}")
    return lines

def greeting(name: str) -> str:
    return f"Nice to meet you, {name}!"

def format_double(value: float) -> str:
    # default stream formatting: six significant digits, trailing zeros dropped
    return f"{value:g}"

def format_bool(flag: bool) -> str:
    return "1" if flag else "0"
