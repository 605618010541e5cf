"""真值表模块"""
from .enumerator import (
    ERROR_SENTINEL, RESULT_COLUMN, TruthTableRow, used_variables,
    assignment_matrix, build_truth_table, to_dataframe, format_dataframe,
    export_csv, evaluate_columns, is_tautology, is_satisfiable, are_equivalent,
    result_counts
)

__all__ = [
    'ERROR_SENTINEL', 'RESULT_COLUMN', 'TruthTableRow', 'used_variables',
    'assignment_matrix', 'build_truth_table', 'to_dataframe',
    'format_dataframe', 'export_csv', 'evaluate_columns', 'is_tautology',
    'is_satisfiable', 'are_equivalent', 'result_counts'
]
