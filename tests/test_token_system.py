"""Tests for tokenizing expressions."""

import pytest

from core.token_system import OPERATORS, Token, TokenType, classify, tokenize


def test_operator_set_is_fixed():
    assert OPERATORS == {"+", "-", "*", "/"}
    with pytest.raises(AttributeError):
        OPERATORS.add("%")


@pytest.mark.parametrize("text", ["+", "-", "*", "/"])
def test_classify_operators(text):
    assert classify(text) == Token(TokenType.OPERATOR, text)


@pytest.mark.parametrize("text", ["3", "-3", "3,", "++", "x", "//", "4.8"])
def test_classify_everything_else_as_operand(text):
    assert classify(text).type == TokenType.OPERAND


def test_tokenize_splits_on_any_whitespace():
    tokens = list(tokenize("  3\t4   +\n"))
    assert [t.text for t in tokens] == ["3", "4", "+"]
    assert [t.type for t in tokens] == [
        TokenType.OPERAND,
        TokenType.OPERAND,
        TokenType.OPERATOR,
    ]


def test_tokenize_empty_input():
    assert list(tokenize("")) == []
    assert list(tokenize(" \n ")) == []


def test_tokenize_is_lazy():
    tokens = tokenize("1 2 +")
    assert next(tokens) == Token(TokenType.OPERAND, "1")


@pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_information_separators_are_not_whitespace(separator):
    tokens = list(tokenize(f"3{separator}4 +"))
    assert [t.text for t in tokens] == [f"3{separator}4", "+"]


@pytest.mark.parametrize("separator", ["\u00a0", "\u2003", "\u3000", "\x0b", "\x0c"])
def test_unicode_whitespace_separates(separator):
    assert [t.text for t in tokenize(f"3{separator}4")] == ["3", "4"]
