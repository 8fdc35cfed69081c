import io

import pytest

from minicheck.listing import ErrorCategory, Listing


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def listing(stream):
    return Listing(stream)


def test_first_line_numbers_from_one(listing, stream):
    listing.first_line()
    assert stream.getvalue() == "\n   1  "
    assert listing.line_number == 1


def test_next_line_increments(listing):
    listing.first_line()
    listing.next_line()
    listing.next_line()
    assert listing.line_number == 3


def test_errors_shown_before_next_line_number(listing, stream):
    listing.first_line()
    listing.append_error(ErrorCategory.LEXICAL, "$")
    listing.next_line()
    assert listing.line_number == 2
    assert listing.total_errors() == 1
    out = stream.getvalue()
    message = "Lexical Error, Invalid Character $\n"
    assert message in out
    assert out.index(message) < out.rindex("   2  ")


def test_clean_compile(listing, stream):
    listing.first_line()
    assert listing.last_line() == 0
    assert "Compiled Successfully\n\n" in stream.getvalue()


def test_summary_counts(listing, stream):
    listing.first_line()
    for category, message in [
        (ErrorCategory.LEXICAL, "#"),
        (ErrorCategory.SYNTAX, "syntax error"),
        (ErrorCategory.GENERAL_SEMANTIC, "x"),
        (ErrorCategory.GENERAL_SEMANTIC, "y"),
    ]:
        listing.append_error(category, message)
    assert listing.last_line() == 4
    out = stream.getvalue()
    assert "Lexical Errors 1\n" in out
    assert "Syntax Errors 1\n" in out
    assert "Semantic Errors 2\n\n" in out
    assert "Compiled Successfully" not in out


@pytest.mark.parametrize(
    "category, message, shown, counted",
    [
        (ErrorCategory.LEXICAL, "@", "Lexical Error, Invalid Character @\n", 1),
        (ErrorCategory.SYNTAX, "unexpected END", "unexpected END\n", 1),
        (ErrorCategory.GENERAL_SEMANTIC, "bad", "Semantic Error, bad\n", 1),
        (
            ErrorCategory.DUPLICATE_IDENTIFIER,
            "Identifier a",
            "Semantic Error, Duplicate Identifier a\n",
            0,
        ),
        (
            ErrorCategory.UNDECLARED,
            "Identifier b",
            "Semantic Error, Undeclared Identifier b\n",
            0,
        ),
    ],
)
def test_message_prefix_and_counting(listing, stream, category, message, shown, counted):
    listing.append_error(category, message)
    assert listing.total_errors() == counted
    listing.display_errors()
    assert stream.getvalue() == shown


def test_errors_displayed_once_in_order(listing, stream):
    listing.append_error(ErrorCategory.GENERAL_SEMANTIC, "first")
    listing.append_error(ErrorCategory.GENERAL_SEMANTIC, "second")
    assert listing.total_errors() == 2
    listing.display_errors()
    listing.display_errors()
    out = stream.getvalue()
    assert out.count("first") == 1
    assert out.index("first") < out.index("second")


def test_total_errors_matches_last_line(listing):
    listing.append_error(ErrorCategory.LEXICAL, "@")
    listing.append_error(ErrorCategory.UNDECLARED, "z")
    total = listing.total_errors()
    assert listing.last_line() == total
    assert total == listing.lexical_errors