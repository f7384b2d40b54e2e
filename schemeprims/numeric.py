"""Numeric primitives: arithmetic, comparison, rounding and number/text conversion."""

from __future__ import annotations

import enum
import math
import operator
import re
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Sequence

from .values import (
    ContractViolation,
    DivisionByZero,
    InexactNonDecimalFormat,
    MString,
    Ordering,
    ensure_arity,
    get_int,
    get_num,
    get_radix,
    get_string,
    is_exact,
)


class IntOp(enum.Enum):
    """The integer division operations."""

    QUOTIENT = "quotient"
    REMAINDER = "remainder"
    MODULO = "modulo"


def _norm(x: Any) -> Any:
    """Collapse an integral Fraction to an int."""
    if isinstance(x, Fraction) and x.denominator == 1:
        return int(x.numerator)
    return x


def _to_float(n: Any) -> float:
    try:
        return float(n)
    except OverflowError:
        return math.inf if n > 0 else -math.inf


def _binary(op: Callable[[Any, Any], Any], a: Any, b: Any) -> Any:
    if is_exact(a) and is_exact(b):
        return _norm(op(a, b))
    return op(_to_float(a), _to_float(b))


def _divide(a: Any, b: Any) -> Any:
    if is_exact(a) and is_exact(b):
        return _norm(Fraction(a) / Fraction(b))
    return _to_float(a) / _to_float(b)


def _ordering(a: Any, b: Any) -> Ordering | None:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    if a == b:
        return Ordering.EQUAL
    return None


def _map_inexact(func: Callable[[float], float], n: Any) -> float:
    x = _to_float(n)
    try:
        return func(x)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _ln(x: float) -> float:
    if x == 0:
        return -math.inf
    if x < 0 or math.isnan(x):
        return math.nan
    return math.log(x)


def _iroot(n: int, q: int) -> int:
    """The floor of the q-th root of the non-negative integer n."""
    if n < 2:
        return n
    x = 1 << -(-n.bit_length() // q)
    while True:
        y = ((q - 1) * x + n // x ** (q - 1)) // q
        if y >= x:
            return x
        x = y


def _exact_root(x: Fraction, q: int) -> Fraction | None:
    if x < 0 and q % 2 == 0:
        return None
    num, den = abs(x.numerator), x.denominator
    rnum, rden = _iroot(num, q), _iroot(den, q)
    if rnum**q != num or rden**q != den:
        return None
    root = Fraction(rnum, rden)
    return -root if x < 0 else root


def _float_pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.inf if base == 0 else math.nan
    except OverflowError:
        odd = exponent.is_integer() and int(exponent) % 2 == 1
        return -math.inf if base < 0 and odd else math.inf


def _exact_expt(base: Any, exponent: Any) -> Any:
    exponent = Fraction(exponent)
    if exponent.denominator == 1:
        power = exponent.numerator
        if power < 0 and base == 0:
            raise DivisionByZero()
        return _norm(Fraction(base) ** power)
    root = _exact_root(Fraction(base), exponent.denominator)
    if root is not None:
        return _exact_expt(root, exponent.numerator)
    b = _to_float(base)
    if b < 0 and exponent.denominator % 2 == 1:
        real_root = -math.pow(-b, 1.0 / exponent.denominator)
        return _float_pow(real_root, float(exponent.numerator))
    return _float_pow(b, float(exponent))


def _floor(n: Any) -> Any:
    if is_exact(n):
        return math.floor(n)
    return float(math.floor(n)) if math.isfinite(n) else n


def _ceil(n: Any) -> Any:
    if is_exact(n):
        return math.ceil(n)
    return float(math.ceil(n)) if math.isfinite(n) else n


def _trunc(n: Any) -> Any:
    if is_exact(n):
        return math.trunc(n)
    return float(math.trunc(n)) if math.isfinite(n) else n


def _round(n: Any) -> Any:
    if is_exact(n):
        return round(n)
    return float(round(n)) if math.isfinite(n) else n


def _numerator(n: Any) -> Any:
    if is_exact(n):
        return Fraction(n).numerator
    return float(Fraction(n).numerator) if math.isfinite(n) else n


def _denominator(n: Any) -> Any:
    if is_exact(n):
        return Fraction(n).denominator
    if math.isfinite(n):
        return float(Fraction(n).denominator)
    return math.nan if math.isnan(n) else 1.0


def _to_exact(n: Any) -> Any:
    if is_exact(n):
        return n
    if not math.isfinite(n):
        raise ContractViolation("finite number", n)
    return _norm(Fraction(n))


def _sqrt(n: Any) -> Any:
    if is_exact(n):
        root = _exact_root(Fraction(n), 2)
        if root is not None:
            return _norm(root)
    return _map_inexact(math.sqrt, n)


def integer_p(args: Sequence[Any]) -> bool:
    """integer?: whether the argument is an integer-valued number."""
    ensure_arity(args, 1)
    try:
        get_int(args[0])
    except ContractViolation:
        return False
    return True


def num_map(args: Sequence[Any], func: Callable[[Any], Any]) -> Any:
    """Apply ``func`` to the single numeric argument."""
    ensure_arity(args, 1)
    return func(get_num(args[0]))


def add(args: Sequence[Any]) -> Any:
    """+: the sum of the arguments."""
    total: Any = 0
    for arg in args:
        total = _binary(operator.add, total, get_num(arg))
    return total


def sub(args: Sequence[Any]) -> Any:
    """-: negation of one argument, or the first minus the rest."""
    ensure_arity(args, 1, None)
    first = get_num(args[0])
    if len(args) == 1:
        return -first
    result = first
    for arg in args[1:]:
        result = _binary(operator.sub, result, get_num(arg))
    return result


def mul(args: Sequence[Any]) -> Any:
    """*: the product of the arguments."""
    product: Any = 1
    for arg in args:
        product = _binary(operator.mul, product, get_num(arg))
    return product


def div(args: Sequence[Any]) -> Any:
    """/: reciprocal of one argument, or the first divided by the rest."""
    ensure_arity(args, 1, None)
    first = get_num(args[0])
    if len(args) == 1:
        if first == 0:
            raise DivisionByZero()
        return _divide(1, first)
    result = first
    for arg in args[1:]:
        n = get_num(arg)
        if n == 0:
            raise DivisionByZero()
        result = _divide(result, n)
    return result


def num_eq(args: Sequence[Any]) -> bool:
    """=: whether all arguments are numerically equal."""
    ensure_arity(args, 1, None)
    first = get_num(args[0])
    for arg in args[1:]:
        if first != get_num(arg):
            return False
    return True


def cmp(args: Sequence[Any], ord: Ordering, strict: bool) -> bool:
    """Whether each adjacent pair of arguments stands in the ordering ``ord``."""
    ensure_arity(args, 1, None)
    for left, right in zip(args, args[1:]):
        found = _ordering(get_num(left), get_num(right))
        if found is None:
            return False
        if (strict and found != ord) or (not strict and found == ord.reverse()):
            return False
    return True


def maxmin(args: Sequence[Any], is_max: bool) -> Any:
    """max or min; inexact if any argument is inexact."""
    ensure_arity(args, 1, None)
    result = get_num(args[0])
    inexact = not is_exact(result)
    for arg in args[1:]:
        n = get_num(arg)
        inexact = inexact or not is_exact(n)
        if (n > result) if is_max else (n < result):
            result = n
    return _to_float(result) if inexact else result


def atan(args: Sequence[Any]) -> float:
    """atan of one argument, or atan2 of two."""
    ensure_arity(args, 1, 2)
    if len(args) == 1:
        return _map_inexact(math.atan, get_num(args[0]))
    y = _to_float(get_num(args[0]))
    x = _to_float(get_num(args[1]))
    return math.atan2(y, x)


def expt(args: Sequence[Any]) -> Any:
    """expt: the first argument raised to the second, exact where possible."""
    ensure_arity(args, 2)
    base = get_num(args[0])
    exponent = get_num(args[1])
    if is_exact(base) and is_exact(exponent):
        return _exact_expt(base, exponent)
    return _float_pow(_to_float(base), _to_float(exponent))


def ints_op(args: Sequence[Any], op: IntOp) -> Any:
    """quotient, remainder or modulo of two integers."""
    ensure_arity(args, 2)
    n1 = get_int(args[0])
    n2 = get_int(args[1])
    inexact = not is_exact(n1) or not is_exact(n2)
    i1, i2 = int(n1), int(n2)
    if i2 == 0:
        raise DivisionByZero()
    quotient = abs(i1) // abs(i2)
    if (i1 < 0) != (i2 < 0):
        quotient = -quotient
    if op is IntOp.QUOTIENT:
        result = quotient
    elif op is IntOp.REMAINDER:
        result = i1 - i2 * quotient
    else:
        result = i1 % i2
    return _to_float(result) if inexact else result


def _integer_arg(arg: Any) -> Any:
    get_num(arg)
    return get_int(arg)


def gcd_lcm(args: Sequence[Any], lcm: bool) -> Any:
    """gcd, or lcm when ``lcm`` is true, of integer arguments."""
    ensure_arity(args, 1, None)
    first = _integer_arg(args[0])
    inexact = not is_exact(first)
    result = abs(int(first))
    for arg in args[1:]:
        n = _integer_arg(arg)
        inexact = inexact or not is_exact(n)
        result = math.lcm(result, int(n)) if lcm else math.gcd(result, int(n))
    return _to_float(result) if inexact else result


def _exact_rational(n: Any) -> Fraction | None:
    if is_exact(n):
        return Fraction(n)
    if math.isfinite(n):
        return Fraction(n)
    return None


def rationalize(args: Sequence[Any]) -> Any:
    """rationalize: the simplest rational within the second argument of the first."""
    ensure_arity(args, 2)
    x_num = get_num(args[0])
    y_num = get_num(args[1])
    inexact = not is_exact(x_num) or not is_exact(y_num)

    x = _exact_rational(x_num)
    if x is None:
        return args[0]
    y = _exact_rational(abs(y_num))
    if y is None:
        return 0.0

    lo, hi = x - y, x + y
    neg = hi < 0
    if neg:
        lo, hi = -hi, -lo
    elif not lo > 0:
        return 0.0 if inexact else 0

    s, t, u, v = lo.numerator, lo.denominator, hi.numerator, hi.denominator
    a, b, c, d = 1, 0, 0, 1
    while True:
        q = (s - 1) // t
        s, t, u, v = v, u - q * v, t, s - q * t
        a, b, c, d = b + q * a, a, d + q * c, c
        if t >= s:
            result = Fraction(a + b, c + d)
            if neg:
                result = -result
            return _to_float(result) if inexact else _norm(result)


_RADIX_FORMATS = {2: "b", 8: "o", 10: "d", 16: "x"}


def _format_int(i: int, radix: int) -> str:
    sign = "-" if i < 0 else ""
    return sign + format(abs(i), _RADIX_FORMATS[radix])


def _format_real(x: float) -> str:
    if math.isnan(x):
        return "+nan.0"
    if math.isinf(x):
        return "+inf.0" if x > 0 else "-inf.0"
    text = format(Decimal(repr(x)), "f")
    if "." not in text:
        text += ".0"
    return text


def format_number(n: Any, radix: int = 10) -> str:
    """The external representation of ``n`` in ``radix`` (2, 8, 10 or 16)."""
    if radix not in _RADIX_FORMATS:
        raise ValueError(f"unsupported radix: {radix}")
    if not is_exact(n):
        if radix != 10:
            raise InexactNonDecimalFormat()
        return _format_real(n)
    if isinstance(n, Fraction) and n.denominator != 1:
        return f"{_format_int(n.numerator, radix)}/{_format_int(n.denominator, radix)}"
    return _format_int(int(n), radix)


_RADIX_PREFIXES = {"b": 2, "o": 8, "d": 10, "x": 16}
_DIGIT_CLASSES = {2: "[01]", 8: "[0-7]", 10: "[0-9]", 16: "[0-9a-f]"}
_RATIONAL_PATTERNS = {
    radix: re.compile(rf"([+-]?)({digits}+#*)(?:/({digits}+#*))?", re.ASCII)
    for radix, digits in _DIGIT_CLASSES.items()
}
_DECIMAL_PATTERN = re.compile(
    r"([+-]?)([0-9]+#*\.?#*|\.[0-9]+#*|[0-9]+\.[0-9]*#*)(?:([esfdl])([+-]?[0-9]+))?",
    re.ASCII,
)


def _rational_value(match: re.Match, radix: int, exactness: str | None) -> Any:
    sign, num_text, den_text = match.groups()
    numerator = int(num_text.replace("#", "0"), radix)
    denominator = int(den_text.replace("#", "0"), radix) if den_text else 1
    if denominator == 0:
        raise ValueError("zero denominator")
    value = Fraction(numerator, denominator)
    if sign == "-":
        value = -value
    has_hash = "#" in num_text or (den_text is not None and "#" in den_text)
    inexact = exactness == "i" or (exactness is None and has_hash)
    return _to_float(value) if inexact else _norm(value)


def _decimal_value(match: re.Match, exactness: str | None) -> Any:
    sign, mantissa, _marker, exponent = match.groups()
    mantissa = mantissa.replace("#", "0")
    power = int(exponent) if exponent else 0
    if exactness == "e":
        value = Fraction(Decimal(mantissa)) * Fraction(10) ** power
        if sign == "-":
            value = -value
        return _norm(value)
    return float(f"{sign}{mantissa}e{power}")


def parse_number(text: str, radix: int = 10) -> Any:
    """Read a real number written in Scheme syntax; raise ValueError if it is not one.

    ``radix`` is used unless the text carries a radix prefix of its own.
    """
    body = text.lower()
    exactness: str | None = None
    radix_seen = False
    while body.startswith("#"):
        tag = body[1:2]
        if tag in _RADIX_PREFIXES and tag and not radix_seen:
            radix = _RADIX_PREFIXES[tag]
            radix_seen = True
        elif tag in ("e", "i") and exactness is None:
            exactness = tag
        else:
            raise ValueError(f"invalid number prefix in {text!r}")
        body = body[2:]
    if radix not in _RATIONAL_PATTERNS:
        raise ValueError(f"unsupported radix: {radix}")
    match = _RATIONAL_PATTERNS[radix].fullmatch(body)
    if match:
        return _rational_value(match, radix, exactness)
    if radix == 10:
        match = _DECIMAL_PATTERN.fullmatch(body)
        if match:
            return _decimal_value(match, exactness)
    raise ValueError(f"not a number: {text!r}")


def number_to_string(args: Sequence[Any]) -> MString:
    """number->string with an optional radix."""
    ensure_arity(args, 1, 2)
    n = get_num(args[0])
    radix = get_radix(args[1]) if len(args) == 2 else 10
    if radix != 10 and not is_exact(n):
        raise InexactNonDecimalFormat()
    return MString(format_number(n, radix))


def string_to_number(args: Sequence[Any]) -> Any:
    """string->number with an optional radix; False when the text is no number."""
    ensure_arity(args, 1, 2)
    text = get_string(args[0]).value
    radix = get_radix(args[1]) if len(args) == 2 else 10
    try:
        return parse_number(text, radix)
    except ValueError:
        return False


def _mapped(func: Callable[[Any], Any]) -> Callable[[Sequence[Any]], Any]:
    return lambda args: num_map(args, func)


def primitives() -> dict[str, Callable[[Sequence[Any]], Any]]:
    """The numeric procedures, by Scheme name."""
    return {
        "integer?": integer_p,
        "+": add,
        "-": sub,
        "*": mul,
        "/": div,
        "=": num_eq,
        "<": lambda args: cmp(args, Ordering.LESS, True),
        ">": lambda args: cmp(args, Ordering.GREATER, True),
        "<=": lambda args: cmp(args, Ordering.LESS, False),
        ">=": lambda args: cmp(args, Ordering.GREATER, False),
        "max": lambda args: maxmin(args, True),
        "min": lambda args: maxmin(args, False),
        "exact?": _mapped(is_exact),
        "inexact?": _mapped(lambda n: not is_exact(n)),
        "zero?": _mapped(lambda n: n == 0),
        "positive?": _mapped(lambda n: n > 0),
        "negative?": _mapped(lambda n: n < 0),
        "abs": _mapped(abs),
        "floor": _mapped(_floor),
        "ceiling": _mapped(_ceil),
        "truncate": _mapped(_trunc),
        "round": _mapped(_round),
        "numerator": _mapped(_numerator),
        "denominator": _mapped(_denominator),
        "exact->inexact": _mapped(_to_float),
        "inexact->exact": _mapped(_to_exact),
        "sqrt": _mapped(_sqrt),
        "exp": _mapped(lambda n: _map_inexact(math.exp, n)),
        "log": _mapped(lambda n: _map_inexact(_ln, n)),
        "sin": _mapped(lambda n: _map_inexact(math.sin, n)),
        "cos": _mapped(lambda n: _map_inexact(math.cos, n)),
        "tan": _mapped(lambda n: _map_inexact(math.tan, n)),
        "asin": _mapped(lambda n: _map_inexact(math.asin, n)),
        "acos": _mapped(lambda n: _map_inexact(math.acos, n)),
        "atan": atan,
        "expt": expt,
        "quotient": lambda args: ints_op(args, IntOp.QUOTIENT),
        "remainder": lambda args: ints_op(args, IntOp.REMAINDER),
        "modulo": lambda args: ints_op(args, IntOp.MODULO),
        "gcd": lambda args: gcd_lcm(args, False),
        "lcm": lambda args: gcd_lcm(args, True),
        "rationalize": rationalize,
        "number->string": number_to_string,
        "string->number": string_to_number,
    }