# minicheck

This package provides the support pieces of a compiler front end for a small teaching language.

- **`minicheck.listing`**
  - `Listing` writes a numbered compilation listing to a text stream. The default stream is `sys.stdout`.
  - It queues errors. Each error has an `ErrorCategory`, which is one of `LEXICAL`, `SYNTAX`, `GENERAL_SEMANTIC`, `DUPLICATE_IDENTIFIER` or `UNDECLARED`.
  - Queued errors are printed after the line they were reported on, and a summary follows at the end.
- **`minicheck.symbols`**
  - `Symbols` is a symbol table keyed by lexeme. A later `insert` replaces an earlier entry.
  - `find` returns the entry, or `None` when the lexeme is not declared.
  - It supports `in` and `len()`.
- **`minicheck.tokens`**
  - `Token` is an `IntEnum` of the language's token kinds, such as `IDENTIFIER`, `INT_LITERAL`, `FOLD` and `ENDSWITCH`.
  - `Token.from_name(name)` looks a kind up by its name. An unknown name raises `ValueError`.
- **`minicheck.typecheck`**
  - `Type` has the members `MISMATCH`, `INT`, `CHAR`, `REAL` and `NONE`.
  - `TypeChecker` applies the typing rules for:
    - assignments
    - arithmetic, exponent, negation, relational and remainder operators
    - list elements, list types and subscripts
    - `switch`/`when` cases
    - `if`/`elsif`/`else`
    - `fold`
  - Each violation is reported to a `Listing` as a `GENERAL_SEMANTIC` error.

## Installation

```
pip install .
```

## Example

```python
import sys

from minicheck.listing import Listing
from minicheck.symbols import Symbols
from minicheck.typecheck import Type, TypeChecker

listing = Listing(sys.stdout)
checker = TypeChecker(listing)
symbols = Symbols()

listing.first_line()
symbols.insert("count", Type.INT)
declared = symbols.find("count")          # Type.INT
checker.check_assignment(declared, Type.REAL, "Variable Initialization")
listing.next_line()                       # prints the queued mismatch error
result = checker.check_arithmetic(Type.INT, Type.INT)  # Type.INT
errors = listing.last_line()              # 1
```

`last_line()` prints one of two summaries:

- "Compiled Successfully" when there were no errors.
- Otherwise, the counts of lexical, syntax and semantic errors.

It returns the total either way.

Only `LEXICAL`, `SYNTAX` and `GENERAL_SEMANTIC` errors are counted. `DUPLICATE_IDENTIFIER` and `UNDECLARED` errors are printed but not counted.

## Behaviour of the checks to be aware of

- `check_relational` gives `Type.CHAR` only when both operands are characters. Every other combination gives `Type.MISMATCH`, and it reports an error only when the left operand is a character and the right one is not.
- `check_modulus`, `check_sublist` and `check_fold` always return `Type.MISMATCH`. They report an error when an operand, the subscript or the list elements are not `Type.INT`.
- `check_if_else` returns the last type when the middle one is `Type.NONE`. Otherwise it returns `Type.MISMATCH`, and it reports an error only when the three types differ.

## What this package does not do

There is no scanner, no parser and no command-line program here. Nothing reads source text. The caller drives `Listing` line by line and calls the `TypeChecker` rules itself.

## Tests

```
pip install .[test]
pytest
```