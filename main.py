"""主程序入口 - 读取一行RPN表达式，输出结果或错误信息"""
import argparse
import logging
import sys

from config.config import *
from core import CalcError, get_evaluator
from utils import format_result, format_error

logger = logging.getLogger(__name__)


def setup_logging(level):
    # 日志走stderr，stdout只留给提示和结果
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOGGING_CONFIG['format'],
        stream=sys.stderr,
    )


def read_expression(stdin=None, prompt=None):
    """打印提示并读取一行（保留末尾换行，交给求值器按空白切分）"""
    stdin = stdin or sys.stdin
    if prompt:
        print(prompt)
    return stdin.readline()


def main(args):
    validate_config()

    if args.expression is not None:
        expression = args.expression
    else:
        expression = read_expression(prompt=CALCULATOR_CONFIG['prompt'])

    evaluator = get_evaluator(args.variant, args.int_division_by_zero)
    logger.info(f"Evaluating with {evaluator.kind.name} variant")

    try:
        result = evaluator.evaluate(expression)
    except CalcError as e:
        print(format_error(e))
        return args.error_exit_code

    print(format_result(result))
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Reverse Polish Notation calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Expression to evaluate; read one line from stdin when omitted"
    )
    parser.add_argument(
        "--variant",
        choices=VALID_VARIANTS,
        default=CALCULATOR_CONFIG['default_variant'],
        help="Numeric type of the evaluation stack (default: %(default)s)"
    )
    parser.add_argument(
        "--int_division_by_zero",
        choices=VALID_DIVISION_BY_ZERO_POLICIES,
        default=CALCULATOR_CONFIG['int_division_by_zero'],
        help="Integer variant only: 'trap' aborts, 'error' reports an evaluation error"
    )
    parser.add_argument(
        "--error_exit_code",
        type=int,
        default=CALCULATOR_CONFIG['error_exit_code'],
        help="Exit code used when the expression fails (default: %(default)s)"
    )
    parser.add_argument(
        "--log_level",
        choices=VALID_LOG_LEVELS,
        default=LOGGING_CONFIG['level'],
        help="Logging level (default: %(default)s)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
