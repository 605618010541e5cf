"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 表达式引擎参数
ENGINE_CONFIG = {
    "free_variables": ["A", "B", "C"],  # 由环境赋值的变量
    "constants": {"TRUE": True, "FALSE": False},  # 常量操作数，不可重新绑定
    "precedence": {"NOT": 3, "AND": 2, "OR": 1},
    "right_associative": ["NOT"],  # ! 为右结合
    "error_sentinel": "—",  # 真值表中出错行的结果
    "result_column": "RESULT",
}

# 求值缓存
CACHE_CONFIG = {
    "cache_size": 1000,  # 0 表示关闭缓存
}

# 真值表导出
TABLE_CONFIG = {
    "true_label": "true",
    "false_label": "false",
    "csv_index": False,
    "empty_table_message": "Add A, B, or C to the expression to generate a table.",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    precedence = ENGINE_CONFIG["precedence"]
    assert set(precedence) == {"NOT", "AND", "OR"}, "三个操作符都需要优先级"
    assert precedence["NOT"] > precedence["AND"] > precedence["OR"], "优先级必须是 NOT > AND > OR"
    assert set(ENGINE_CONFIG["right_associative"]) <= set(precedence), "右结合操作符必须已定义"
    assert not set(ENGINE_CONFIG["free_variables"]) & set(ENGINE_CONFIG["constants"]), \
        "常量不能同时是自由变量"
    assert not isinstance(ENGINE_CONFIG["error_sentinel"], bool), "错误标记不能是布尔值"
    assert CACHE_CONFIG["cache_size"] >= 0, "缓存大小不能为负"
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), "未知的日志级别"
    logger.debug("Configuration validated successfully!")
    return True
