"""utils/formatting.py"""
import numpy as np


def format_result(value):
    """
    输出结果：浮点数取最短可往返的十进制表示，定点记法，去掉多余的 '.0'
    7.0 -> '7'，4.8 -> '4.8'，1e21 -> '1000000000000000000000'
    """
    if isinstance(value, (np.integer, int)):
        return str(int(value))
    return np.format_float_positional(np.float64(value), unique=True, trim='-')


def format_error(error):
    return str(error)
