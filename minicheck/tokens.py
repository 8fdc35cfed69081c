"""Token kinds of the language's scanner and parser."""

from __future__ import annotations

from enum import IntEnum


class Token(IntEnum):
    EMPTY = -2
    EOF = 0
    ERROR = 256
    UNDEF = 257
    IDENTIFIER = 258
    INT_LITERAL = 259
    CHAR_LITERAL = 260
    REAL_LITERAL = 261
    HEX_LITERAL = 262
    ADDOP = 263
    MULOP = 264
    ANDOP = 265
    RELOP = 266
    OROP = 267
    NOTOP = 268
    MODOP = 269
    EXPOP = 270
    NEGOP = 271
    ARROW = 272
    LPAREN = 273
    RPAREN = 274
    SEMICOLON = 275
    COLON = 276
    COMMA = 277
    BEGIN_ = 278
    CASE = 279
    CHARACTER = 280
    ELSE = 281
    ELSIF = 282
    END = 283
    ENDSWITCH = 284
    FUNCTION = 285
    INTEGER = 286
    IS = 287
    LIST = 288
    OF = 289
    OTHERS = 290
    RETURNS = 291
    SWITCH = 292
    WHEN = 293
    ENDFOLD = 294
    ENDIF = 295
    FOLD = 296
    IF = 297
    LEFT = 298
    RIGHT = 299
    THEN = 300
    REAL = 301

    @classmethod
    def from_name(cls, name: str) -> Token:
        """Look a token kind up by its name."""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"unknown token name: {name!r}") from None