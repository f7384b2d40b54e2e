# schemeprims

The built-in procedures of a Scheme (R5RS) interpreter, written as plain
Python functions over Python values. It is meant as the primitive layer of
an evaluator: the evaluator looks a name up, passes the evaluated arguments
as a sequence, and gets back a Scheme value.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Values

Scheme data is represented like this (see `schemeprims.values`):

| Scheme            | Python                                   |
|-------------------|------------------------------------------|
| exact integer     | `int`                                    |
| exact rational    | `fractions.Fraction`                     |
| inexact real      | `float`                                  |
| boolean           | `bool`                                   |
| symbol            | `Symbol` (compared by name)              |
| character         | `Char` (one code point)                  |
| mutable string    | `MString` (compared by identity)         |
| pair              | `Pair` (mutable `car` and `cdr`)         |
| vector            | `Vector` (mutable `items` list)          |
| environment       | `EnvSpec.SCHEME_REPORT`, `EnvSpec.NULL`  |
| empty list        | `EMPTY_LIST`                             |
| unspecified value | `VOID`                                   |
| end of file       | `EOF`                                    |

Integral exact results are always returned as `int`, never as a
`Fraction` with denominator 1. Predicates return Python `bool`.

Helpers in `schemeprims.values`:

- `make_list(items, tail=EMPTY_LIST)` builds a chain of pairs;
- `equal(a, b)` compares pairs, vectors and strings by contents and
  everything else as `eqv?` does;
- `ensure_arity(args, low, high)` and the `get_num`, `get_int`, `get_len`,
  `get_radix`, `get_string`, `get_char`, `get_symbol`, `get_pair`,
  `get_vector`, `get_version` and `get_env` checks, which return the
  argument (or its contents) or raise.

`schemeprims.numeric` also offers `format_number(n, radix=10)` and
`parse_number(text, radix=10)`, which write and read real numbers in Scheme
syntax, including `#x`/`#b`/`#o`/`#d` and `#e`/`#i` prefixes.

## Calling primitives

`schemeprims.registry.primitives()` returns a dictionary from Scheme names
to `Primitive` objects. Each is called with the sequence of arguments:

```python
from fractions import Fraction
from schemeprims.registry import primitives

prims = primitives()
prims["+"]([1, Fraction(1, 2)])          # Fraction(3, 2)
prims["quotient"]([15, 4])               # 3
prims["number->string"]([255, 16])       # MString holding "ff"
str(prims["car"])                        # "#<primitive:car>"
```

Each area also has its own module with its own `primitives()` table:
`pred`, `equivalence`, `symbols`, `lists`, `numeric`, `chars`, `strings`,
`vectors` and `environments`. The individual functions (`cons`, `select`,
`char_cmp`, `string_cmp`, `ints_op`, `rationalize` and so on) can be
called directly as well.

The `port?`, `input-port?` and `output-port?` predicates recognise Python
`io` streams, and `procedure?` is true of any callable.

## Errors

Misuse raises a subclass of `EvalError`:

- `ArityMismatch`: the wrong number of arguments;
- `ContractViolation`: an argument of the wrong kind, for instance a
  non-number passed to `+`;
- `IndexOutOfBounds`: a bad index into a string or vector;
- `DivisionByZero`: division by an exact or inexact zero, a zero divisor
  for `quotient`, `remainder` or `modulo`, or exact zero raised to a
  negative power;
- `InexactNonDecimalFormat`: an inexact number formatted in a radix
  other than 10.

```python
from schemeprims.registry import primitives
from schemeprims.values import ArityMismatch

try:
    primitives()["-"]([])
except ArityMismatch as err:
    print(err)   # arity mismatch: expected at least 1, got 0
```

## What it does not do

This package holds only the primitives that take plain argument lists. It
has no reader, no evaluator, no macro expander and no command-line
interpreter. It does not provide the procedures that need control over
evaluation (`apply`, `call-with-current-continuation`, `dynamic-wind`,
`eval`), nor any port input or output (`read`, `write`, `display`,
opening files). Procedures that an interpreter would define in Scheme on
top of these primitives, such as `list`, `length`, `append`, `map`,
`equal?` or `not`, are not included either.