"""logic/errors.py"""
from enum import Enum


class ErrorKind(Enum):
    EMPTY_EXPRESSION = "Empty expression"
    MISSING_OPERATOR = "Missing operator between operands"
    DANGLING_OPERATOR = "Binary operator needs operands on both sides"
    INVALID_OPERATOR_PLACEMENT = "Invalid operator placement"
    EMPTY_GROUP = "Parentheses must contain an operand"
    MISMATCHED_PARENTHESES = "Mismatched parentheses"
    INCOMPLETE_EXPRESSION = "Incomplete expression"
    UNKNOWN_OPERATOR = "Unknown operator"
    UNKNOWN_TOKEN = "Unknown token"


class ExpressionError(ValueError):
    """表达式结构错误，kind 为错误类别，position 为出错 token 的下标（可选）"""

    def __init__(self, kind, position=None, detail=None):
        self.kind = kind
        self.position = position
        self.detail = detail
        message = detail or kind.value
        if position is not None:
            message = f"{message} (at token {position})"
        super().__init__(message)


class EvaluationResult:
    """validate_and_evaluate 的返回值：要么是布尔结果，要么是错误"""

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, value):
        return cls(value=bool(value))

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    def __eq__(self, other):
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        if self.ok or other.ok:
            return self.ok == other.ok and self.value == other.value
        return self.error.kind == other.error.kind

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult(value={self.value})"
        return f"EvaluationResult(error={self.error.kind.name})"
