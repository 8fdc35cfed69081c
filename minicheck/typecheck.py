"""Type checking rules for expressions and statements."""

from __future__ import annotations

from enum import Enum

from minicheck.listing import ErrorCategory, Listing


class Type(Enum):
    MISMATCH = 0
    INT = 1
    CHAR = 2
    REAL = 3
    NONE = 4


_NUMERIC_REQUIRED = "Arithmetic Operator Requires Numeric Types"


class TypeChecker:
    """Applies typing rules, reporting violations to a listing."""

    def __init__(self, listing: Listing) -> None:
        self._listing = listing

    def _error(self, message: str) -> None:
        self._listing.append_error(ErrorCategory.GENERAL_SEMANTIC, message)

    def check_assignment(self, lvalue: Type, rvalue: Type, message: str) -> None:
        if Type.MISMATCH not in (lvalue, rvalue) and lvalue != rvalue:
            self._error("Type Mismatch on " + message)

    def check_when(self, true_: Type, false_: Type) -> Type:
        if Type.MISMATCH in (true_, false_):
            return Type.MISMATCH
        if true_ != false_:
            self._error("When Types Mismatch ")
        return true_

    def check_switch(self, case: Type, when: Type, other: Type) -> Type:
        if case != Type.INT:
            self._error("Switch Expression Not Integer")
        return self.check_cases(when, other)

    def check_cases(self, left: Type, right: Type) -> Type:
        if Type.MISMATCH in (left, right):
            return Type.MISMATCH
        if left in (Type.NONE, right):
            return right
        self._error("Case Types Mismatch")
        return Type.MISMATCH

    def check_arithmetic(self, left: Type, right: Type) -> Type:
        if Type.MISMATCH in (left, right):
            return Type.MISMATCH
        if left == Type.INT and right == Type.INT:
            return Type.INT
        if Type.REAL in (left, right):
            return Type.REAL
        self._error("Integer Type Required")
        return Type.MISMATCH

    def check_relational(self, left: Type, right: Type) -> Type:
        """Only character comparisons yield a type; numeric ones give MISMATCH."""
        if Type.MISMATCH in (left, right):
            return Type.MISMATCH
        if left == Type.CHAR and right == Type.CHAR:
            return Type.CHAR
        if left == Type.CHAR:
            self._error(
                "Character Literals Cannot be Compared to Numeric Expressions"
            )
        return Type.MISMATCH

    def check_exponent(self, left: Type, right: Type) -> Type:
        if Type.MISMATCH in (left, right):
            return Type.MISMATCH
        if left == Type.INT and right == Type.INT:
            return Type.INT
        if Type.REAL in (left, right):
            return Type.REAL
        self._error(_NUMERIC_REQUIRED)
        return Type.MISMATCH

    def check_negation(self, unary: Type) -> Type:
        if unary in (Type.MISMATCH, Type.REAL, Type.INT):
            return unary
        self._error(_NUMERIC_REQUIRED)
        return Type.MISMATCH

    def check_modulus(self, left: Type, right: Type) -> Type:
        """Reports non-integer operands; the result is always MISMATCH."""
        if left != Type.INT or right != Type.INT:
            self._error("Remainder Operator Requires Integer Operands")
        return Type.MISMATCH

    def check_list(self, left: Type, right: Type) -> Type:
        if left in (right, Type.NONE):
            return right
        self._error("List Element Types Do Not Match")
        return Type.MISMATCH

    def check_list_type(self, left: Type, right: Type) -> Type:
        if left in (Type.NONE, right):
            return right
        self._error("List Type Does Not Match Element Types")
        return Type.MISMATCH

    def check_sublist(self, subscript: Type) -> Type:
        """Reports a non-integer subscript; the result is always MISMATCH."""
        if subscript != Type.INT:
            self._error("List Subscript Must Be Integer")
        return Type.MISMATCH

    def check_if_else(self, left: Type, middle: Type, right: Type) -> Type:
        if middle == Type.NONE:
            return right
        if left != middle or left != right or middle != right:
            self._error("If-Elsif-Else Type Mismatch")
        return Type.MISMATCH

    def check_fold(self, elements: Type) -> Type:
        """Reports a non-integer list; the result is always MISMATCH."""
        if elements != Type.INT:
            self._error("Fold Requires A Numeric List")
        return Type.MISMATCH