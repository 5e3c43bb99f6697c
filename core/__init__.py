"""核心模块 - Token系统、数值类型、操作符和RPN求值器"""
from .token_system import TokenType, Token, OPERATORS, tokenize
from .operators import NumericKind, FLOAT64, INT64, NUMERIC_KINDS, Operators
from .rpn_evaluator import CalcErrorKind, CalcError, RPNEvaluator, get_evaluator, run

__all__ = [
    'TokenType', 'Token', 'OPERATORS', 'tokenize',
    'NumericKind', 'FLOAT64', 'INT64', 'NUMERIC_KINDS', 'Operators',
    'CalcErrorKind', 'CalcError', 'RPNEvaluator', 'get_evaluator', 'run'
]
