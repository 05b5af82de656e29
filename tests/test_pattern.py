import pytest

from docread.core.errors import PatternError
from docread.core.pattern import compile_pattern


def test_compiles_valid_pattern():
    assert compile_pattern(r"Hi|[Hh]ello").search("well hello")


def test_ignore_case():
    assert compile_pattern("hello", ignore_case=True).search("HELLO")
    assert not compile_pattern("hello").search("HELLO")


@pytest.mark.parametrize("bad", ["[unclosed", "(?P<x", "*lead", "", "   "])
def test_invalid_pattern_raises(bad):
    with pytest.raises(PatternError):
        compile_pattern(bad)
