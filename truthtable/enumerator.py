"""truthtable/enumerator.py - 对表达式中出现的变量穷举所有赋值"""
import logging
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from config.config import ENGINE_CONFIG, TABLE_CONFIG
from logic import (
    ExpressionError, ExpressionValidator, InfixConverter, RPNEvaluator, Token,
    TokenType, evaluate_tokens, format_tokens
)
from logic.token_system import FREE_VARIABLES

logger = logging.getLogger(__name__)

ERROR_SENTINEL = ENGINE_CONFIG["error_sentinel"]
RESULT_COLUMN = ENGINE_CONFIG["result_column"]


class TruthTableRow:
    """一行真值表：assignment 只含用到的变量，result 为 bool 或错误标记"""

    def __init__(self, assignment, result, error=None):
        self.assignment = assignment
        self.result = result
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def as_dict(self):
        row = dict(self.assignment)
        row[RESULT_COLUMN] = self.result
        return row

    def __eq__(self, other):
        if not isinstance(other, TruthTableRow):
            return NotImplemented
        return self.assignment == other.assignment and self.result == other.result

    def __repr__(self):
        return f"TruthTableRow({self.assignment}, result={self.result!r})"


def used_variables(tokens: Sequence[Token]) -> List[str]:
    """表达式中出现过的自由变量，去重后按字母序排列"""
    names = set()
    for tk in tokens:
        # 只认 A/B/C，其他内容交给校验器报错
        if isinstance(tk, Token) and tk.type == TokenType.OPERAND and tk.name in FREE_VARIABLES:
            names.add(tk.name)
    return sorted(names)


def assignment_matrix(n: int) -> np.ndarray:
    """
    生成 2**n 行、n 列的布尔矩阵
    第 mask 行第 i 列取 mask 的第 n-1-i 位（高位对应第一个变量），第 0 行全为 False
    """
    masks = np.arange(2 ** n, dtype=np.int64)[:, None]
    shifts = np.arange(n - 1, -1, -1, dtype=np.int64)[None, :]
    return ((masks >> shifts) & 1).astype(bool)


def _environments(variables):
    base = {name: False for name in FREE_VARIABLES}
    for bits in assignment_matrix(len(variables)):
        env = dict(base)
        env.update((name, bool(bit)) for name, bit in zip(variables, bits))
        yield env


def build_truth_table(tokens: Sequence[Token]) -> List[TruthTableRow]:
    """
    Args:
        tokens: 中缀 Token 序列
    Returns:
        每个赋值一行；没有用到自由变量时返回空列表。
        表达式本身不合法时每一行的 result 都是错误标记
    """
    variables = used_variables(tokens)
    if not variables:
        return []

    rows = []
    for env in _environments(variables):
        assignment = {name: env[name] for name in variables}
        try:
            rows.append(TruthTableRow(assignment, evaluate_tokens(tokens, env)))
        except ExpressionError as e:
            rows.append(TruthTableRow(assignment, ERROR_SENTINEL, error=e))

    failed = sum(1 for row in rows if not row.ok)
    if failed:
        logger.debug(f"{failed}/{len(rows)} rows failed for '{format_tokens(tokens)}'")
    return rows


def to_dataframe(rows: List[TruthTableRow], variables: Optional[List[str]] = None) -> pd.DataFrame:
    """真值表转为 DataFrame：每个变量一列，最后一列为结果"""
    if variables is None:
        variables = list(rows[0].assignment) if rows else []
    columns = list(variables) + [RESULT_COLUMN]
    return pd.DataFrame([row.as_dict() for row in rows], columns=columns)


def format_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    """把布尔值换成配置里的显示文本，错误标记原样保留"""
    labels = {True: TABLE_CONFIG["true_label"], False: TABLE_CONFIG["false_label"]}
    return df.apply(lambda col: col.map(lambda v: labels[v] if isinstance(v, (bool, np.bool_)) else v))


def export_csv(rows: List[TruthTableRow], path: str) -> pd.DataFrame:
    df = format_dataframe(to_dataframe(rows))
    df.to_csv(path, index=TABLE_CONFIG["csv_index"])
    logger.info(f"Truth table with {len(df)} rows saved to {path}")
    return df


# ================== 基于真值表的查询 ==================
# 这些查询要求表达式合法，不合法时抛出 ExpressionError

def evaluate_columns(tokens: Sequence[Token], variables: Sequence[str]) -> np.ndarray:
    """
    一次校验和转换后，对 assignment_matrix 的所有行做向量化求值
    Args:
        tokens: 中缀 Token 序列
        variables: 参与枚举的变量，顺序决定行序
    Returns:
        长度为 2**len(variables) 的布尔数组，行序与 build_truth_table 一致
    """
    ExpressionValidator.validate(tokens)
    rpn = InfixConverter.to_rpn(tokens)
    matrix = assignment_matrix(len(variables))
    env = {name: matrix[:, i] for i, name in enumerate(variables)}
    result = RPNEvaluator.evaluate(rpn, env)
    # 只含常量或未用到 variables 时结果是标量
    return np.broadcast_to(np.asarray(result, dtype=bool), (len(matrix),))


def is_tautology(tokens: Sequence[Token]) -> bool:
    return bool(evaluate_columns(tokens, used_variables(tokens)).all())


def is_satisfiable(tokens: Sequence[Token]) -> bool:
    return bool(evaluate_columns(tokens, used_variables(tokens)).any())


def are_equivalent(left: Sequence[Token], right: Sequence[Token]) -> bool:
    """两个表达式在所有变量赋值下结果都相同"""
    variables = sorted(set(used_variables(left)) | set(used_variables(right)))
    differs = evaluate_columns(left, variables) != evaluate_columns(right, variables)
    if differs.any():
        row = assignment_matrix(len(variables))[int(np.argmax(differs))]
        logger.debug(f"Expressions differ under {dict(zip(variables, row.tolist()))}")
        return False
    return True


def result_counts(rows: List[TruthTableRow]) -> Dict[str, int]:
    """统计真值表中 True / False / 出错 的行数"""
    counts = {'true': 0, 'false': 0, 'error': 0}
    for row in rows:
        if not row.ok:
            counts['error'] += 1
        elif row.result:
            counts['true'] += 1
        else:
            counts['false'] += 1
    return counts
