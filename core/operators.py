"""core/operators.py"""
import numpy as np

INT64_INFO = np.iinfo(np.int64)


def _check_literal(text):
    """拒绝非ASCII数字、下划线分隔符和首尾空白字符（Python的float/int会接受它们）"""
    if not text.isascii() or '_' in text or text.strip() != text:
        raise ValueError(f"not a numeric literal: {text!r}")


def _to_int64(value):
    """Python整数转换为int64，超出范围抛出OverflowError"""
    if value < INT64_INFO.min or value > INT64_INFO.max:
        raise OverflowError(f"{value} does not fit in int64")
    return np.int64(value)


def parse_float64(text):
    _check_literal(text)
    return np.float64(float(text))


def parse_int64(text):
    _check_literal(text)
    return _to_int64(int(text, 10))


class NumericKind:
    """
    一种数值类型的能力描述：解析、四则运算、是否需要检查非有限结果
    求值器只通过这个对象接触具体数值类型
    """

    def __init__(self, name, scalar_type, parse, add, sub, mul, div, reject_non_finite=False):
        self.name = name
        self.scalar_type = scalar_type
        self.parse = parse
        self.add = add
        self.sub = sub
        self.mul = mul
        self.div = div
        self.reject_non_finite = reject_non_finite

    def is_finite(self, value):
        if not self.reject_non_finite:
            return True
        return bool(np.isfinite(value))

    def __repr__(self):
        return f"NumericKind({self.name})"


# float64 ==========================

def _float_binary(ufunc):
    def op(left, right):
        # 除零、溢出得到 inf/nan，由求值器在最后统一检查
        with np.errstate(all='ignore'):
            return np.float64(ufunc(left, right))
    op.__name__ = ufunc.__name__
    return op


# int64 ============================

def _int_add(left, right):
    return _to_int64(int(left) + int(right))


def _int_sub(left, right):
    return _to_int64(int(left) - int(right))


def _int_mul(left, right):
    return _to_int64(int(left) * int(right))


def _int_div(left, right):
    """整数除法，向零截断"""
    left, right = int(left), int(right)
    if right == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return _to_int64(quotient)


FLOAT64 = NumericKind(
    'float', np.float64, parse_float64,
    _float_binary(np.add), _float_binary(np.subtract),
    _float_binary(np.multiply), _float_binary(np.true_divide),
    reject_non_finite=True,
)

INT64 = NumericKind(
    'int', np.int64, parse_int64,
    _int_add, _int_sub, _int_mul, _int_div,
)

NUMERIC_KINDS = {
    FLOAT64.name: FLOAT64,
    INT64.name: INT64,
}


class Operators:
    """四个二元操作符的静态方法集合"""

    @staticmethod
    def add(left, right, kind):
        return kind.add(left, right)

    @staticmethod
    def sub(left, right, kind):
        return kind.sub(left, right)

    @staticmethod
    def mul(left, right, kind):
        return kind.mul(left, right)

    @staticmethod
    def div(left, right, kind):
        return kind.div(left, right)

    @staticmethod
    def apply(symbol, left, right, kind):
        """按符号分派；left为先入栈（后出栈）的操作数"""
        op_method = SYMBOL_TO_METHOD.get(symbol)
        if op_method is None:
            raise KeyError(f"{symbol} not a valid operator")
        return op_method(left, right, kind)


SYMBOL_TO_METHOD = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}
