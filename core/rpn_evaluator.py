"""RPN表达式求值器 - 单次扫描、基于栈，数值类型由NumericKind决定"""
import logging
from enum import Enum

from core.token_system import TokenType, tokenize
from core.operators import Operators, FLOAT64, NUMERIC_KINDS

logger = logging.getLogger(__name__)

INT_DIVISION_BY_ZERO_POLICIES = ('trap', 'error')


class CalcErrorKind(Enum):
    INVALID_OPERATOR = "operator"
    INVALID_RIGHT_SIDE = "right side"
    INVALID_LEFT_SIDE = "left side"
    EVALUATION_ERROR = "evaluation error"

    @property
    def message(self):
        return f"Failed to parse {self.value} value"

    def __str__(self):
        return self.message


class CalcError(Exception):
    """表达式格式错误；只携带错误种类，消息完全由种类决定"""

    def __init__(self, kind):
        super().__init__(kind.message)
        self.kind = kind

    def __eq__(self, other):
        if not isinstance(other, CalcError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self):
        return hash(self.kind)


class RPNEvaluator:
    """评估RPN表达式的值"""

    def __init__(self, kind=FLOAT64, int_division_by_zero='trap'):
        if int_division_by_zero not in INT_DIVISION_BY_ZERO_POLICIES:
            raise ValueError(f"Unknown division by zero policy: {int_division_by_zero}")
        self.kind = kind
        self.int_division_by_zero = int_division_by_zero

    def evaluate(self, expression):
        """
        评估RPN表达式，遇到第一个错误立即终止
        Args:
            expression: 以空白分隔的后缀表达式
        Returns:
            kind.scalar_type 类型的结果
        Raises:
            CalcError: 表达式无法求值
            ZeroDivisionError: 整数除零且策略为 'trap'
        """
        stack = []

        for token in tokenize(expression):
            if token.type == TokenType.OPERATOR:
                if not stack:
                    raise self._error(CalcErrorKind.INVALID_RIGHT_SIDE, expression, token)
                right = stack.pop()
                if not stack:
                    raise self._error(CalcErrorKind.INVALID_LEFT_SIDE, expression, token)
                left = stack.pop()

                stack.append(self._execute(token, left, right, expression))
            else:
                try:
                    stack.append(self.kind.parse(token.text))
                except (ValueError, OverflowError):
                    raise self._error(CalcErrorKind.INVALID_OPERATOR, expression, token) from None

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise self._error(CalcErrorKind.EVALUATION_ERROR, expression)

        result = stack.pop()
        if not self.kind.is_finite(result):
            logger.debug(f"Non-finite result {result}")
            raise self._error(CalcErrorKind.EVALUATION_ERROR, expression)
        return result

    def _execute(self, token, left, right, expression):
        try:
            return Operators.apply(token.text, left, right, self.kind)
        except OverflowError:
            raise self._error(CalcErrorKind.EVALUATION_ERROR, expression, token) from None
        except ZeroDivisionError:
            if self.int_division_by_zero == 'trap':
                raise
            raise self._error(CalcErrorKind.EVALUATION_ERROR, expression, token) from None

    @staticmethod
    def _error(error_kind, expression, token=None):
        if token is not None:
            logger.debug(f"Rejected {expression.strip()!r} at token {token.text!r}: {error_kind.name}")
        else:
            logger.debug(f"Rejected {expression.strip()!r}: {error_kind.name}")
        return CalcError(error_kind)


_EVALUATORS = {name: RPNEvaluator(kind) for name, kind in NUMERIC_KINDS.items()}


def get_evaluator(variant='float', int_division_by_zero='trap'):
    """按名称取得求值器：'float' 或 'int'"""
    if variant not in NUMERIC_KINDS:
        raise ValueError(f"Unknown numeric variant: {variant}")
    evaluator = _EVALUATORS[variant]
    if evaluator.int_division_by_zero != int_division_by_zero:
        evaluator = RPNEvaluator(evaluator.kind, int_division_by_zero)
    return evaluator


def run(expression, variant='float'):
    return get_evaluator(variant).evaluate(expression)
