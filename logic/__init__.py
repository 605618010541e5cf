"""核心模块 - Token系统、校验器、RPN转换器与求值器"""
from .errors import ErrorKind, ExpressionError, EvaluationResult
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, TOKEN_TO_INDEX, INDEX_TO_TOKEN,
    TOTAL_TOKENS, OPERANDS, OPERATORS, GROUPERS, PALETTE, FREE_VARIABLES,
    LEFT_PAREN, RIGHT_PAREN, variable, operator, tokenize, format_tokens,
    token_to_dict, token_from_dict, dumps_tokens, loads_tokens
)
from .validator import ExpressionValidator
from .converter import InfixConverter
from .operators import Operators
from .rpn_evaluator import RPNEvaluator
from .evaluator import ExpressionEvaluator, evaluate_tokens, validate_and_evaluate

__all__ = [
    'ErrorKind', 'ExpressionError', 'EvaluationResult',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'TOKEN_TO_INDEX',
    'INDEX_TO_TOKEN', 'TOTAL_TOKENS', 'OPERANDS', 'OPERATORS', 'GROUPERS',
    'PALETTE', 'FREE_VARIABLES', 'LEFT_PAREN', 'RIGHT_PAREN', 'variable',
    'operator', 'tokenize', 'format_tokens', 'token_to_dict',
    'token_from_dict', 'dumps_tokens', 'loads_tokens',
    'ExpressionValidator', 'InfixConverter', 'Operators', 'RPNEvaluator',
    'ExpressionEvaluator', 'evaluate_tokens', 'validate_and_evaluate'
]
