"""配置文件"""

# 计算器参数
CALCULATOR_CONFIG = {
    "default_variant": "float",  # 'float' (float64) 或 'int' (int64)
    "int_division_by_zero": "trap",  # 'trap': 抛出ZeroDivisionError；'error': 转为EvaluationError
    "prompt": "Type a reversed polish notation:",
    "error_exit_code": 0,  # 原程序出错时也以0退出
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

VALID_VARIANTS = ("float", "int")
VALID_DIVISION_BY_ZERO_POLICIES = ("trap", "error")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["default_variant"] in VALID_VARIANTS, "未知的数值类型"
    assert CALCULATOR_CONFIG["int_division_by_zero"] in VALID_DIVISION_BY_ZERO_POLICIES, "未知的除零策略"
    assert isinstance(CALCULATOR_CONFIG["error_exit_code"], int), "退出码必须是整数"
    assert 0 <= CALCULATOR_CONFIG["error_exit_code"] <= 255, "退出码超出范围"
    assert LOGGING_CONFIG["level"] in VALID_LOG_LEVELS, "未知的日志级别"
    return True
