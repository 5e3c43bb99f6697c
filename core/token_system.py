"""core/token_system.py"""
import re
from enum import Enum


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符


# 固定的四个二元操作符，导入时即确定，不可修改
OPERATORS = frozenset({'+', '-', '*', '/'})

# Unicode空白作分隔符；\x1c-\x1f虽被str.split()视为空白，但属于Token内容
TOKEN_PATTERN = re.compile(r"(?:[^\s]|[\x1c-\x1f])+")


class Token:
    def __init__(self, token_type, text):
        self.type = token_type
        self.text = text

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text


def classify(text):
    """精确匹配操作符集合，其余一律视为操作数候选"""
    if text in OPERATORS:
        return Token(TokenType.OPERATOR, text)
    return Token(TokenType.OPERAND, text)


def tokenize(expression):
    """
    按空白切分表达式，逐个产出Token（惰性，出错时不再读取后续Token）
    Args:
        expression: 原始字符串，可含首尾空白和换行
    Yields:
        Token
    """
    for match in TOKEN_PATTERN.finditer(expression):
        yield classify(match.group())
