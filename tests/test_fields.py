import pytest

from cuesheet.fields import FieldCursor, quote, read_field, unescape, unquote


@pytest.mark.parametrize(
    "text,field,remainder",
    [
        ("GENRE Electronica", "GENRE", "Electronica"),
        ("REM  DATE 2015", "REM", " DATE 2015"),
        ("  \t CATALOG 1234567890123", "CATALOG", "1234567890123"),
        ("a\tb c", "a\tb", "c"),
        ('"Test Album" WAVE', "Test Album", " WAVE"),
        ("'single quoted' x", "single quoted", " x"),
        ('"abc"def', "abc", "def"),
        ('ab"c d', 'ab"c', "d"),
        ("lonely", "lonely", ""),
        ("", "", ""),
        (" \t\r\n", "", ""),
    ],
)
def test_read_field(text: str, field: str, remainder: str):
    cursor = FieldCursor(text)
    assert read_field(cursor) == field
    assert cursor.remainder == remainder


def test_read_field_unescapes_quoted_values():
    cursor = FieldCursor(r'"say \"hi\" to C:\\music" next')
    assert read_field(cursor) == 'say "hi" to C:\\music'
    assert read_field(cursor) == "next"
    assert not cursor


def test_read_field_unterminated_quote_runs_to_end():
    cursor = FieldCursor('"never closed at all')
    assert read_field(cursor) == "never closed at all"
    assert cursor.remainder == ""


def test_successive_reads_exhaust_cursor():
    cursor = FieldCursor("DCP  4CH\tPRE")
    fields = []
    while cursor:
        fields.append(read_field(cursor))
    assert fields == ["DCP", "4CH\tPRE"]


def test_quote_escapes_quotes_and_backslashes():
    assert quote('a "b" \\c') == '"a \\"b\\" \\\\c"'
    assert unescape(quote('a "b" \\c')[1:-1]) == 'a "b" \\c'


@pytest.mark.parametrize(
    "text,expected",
    [
        ('"Hello World"', "Hello World"),
        ("'Hello World'", "Hello World"),
        ('"She said \\"no\\""', 'She said "no"'),
        ("Hello World", "Hello World"),
        ("", ""),
    ],
)
def test_unquote(text: str, expected: str):
    assert unquote(text) == expected
