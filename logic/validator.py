"""logic/validator.py"""
import logging

from logic.errors import ErrorKind, ExpressionError
from logic.token_system import TokenType, canonical, is_defined

logger = logging.getLogger(__name__)


class ExpressionValidator:
    """转换前的结构检查：逐个扫描相邻 token 对，括号配平交给转换器"""

    @staticmethod
    def validate(token_sequence):
        """
        检查中缀 token 序列的结构，第一处违规即抛出
        Args:
            token_sequence: 中缀 Token 序列
        Raises:
            ExpressionError: 结构不合法
        """
        if not token_sequence:
            raise ExpressionError(ErrorKind.EMPTY_EXPRESSION)

        tokens = [canonical(tk) for tk in token_sequence]
        for i, tk in enumerate(tokens):
            prev = tokens[i - 1] if i > 0 else None
            nxt = tokens[i + 1] if i + 1 < len(tokens) else None

            # 操作数只能是 A/B/C/TRUE/FALSE
            if tk.type == TokenType.OPERAND and not is_defined(tk):
                raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, position=i,
                                      detail=f"Unknown operand: {tk.name!r}")

            # 两个操作数（或分组）之间缺少操作符
            if tk.type in (TokenType.OPERAND, TokenType.RPAREN) and ExpressionValidator._opens_operand(nxt):
                raise ExpressionError(ErrorKind.MISSING_OPERATOR, position=i + 1)

            # 空括号
            if tk.type == TokenType.LPAREN and nxt is not None and nxt.type == TokenType.RPAREN:
                raise ExpressionError(ErrorKind.EMPTY_GROUP, position=i)

            if tk.is_binary:
                if prev is None or nxt is None:
                    raise ExpressionError(ErrorKind.DANGLING_OPERATOR, position=i)
                if prev.type in (TokenType.OPERATOR, TokenType.LPAREN):
                    raise ExpressionError(ErrorKind.INVALID_OPERATOR_PLACEMENT, position=i,
                                          detail="Binary operator cannot follow an operator or (")

            # ! 后面只能是操作数、! 或 (
            if tk.is_operator and not tk.is_binary and nxt is not None and nxt.is_binary:
                raise ExpressionError(ErrorKind.INVALID_OPERATOR_PLACEMENT, position=i + 1,
                                      detail="! must be followed by an operand, ! or (")

    @staticmethod
    def is_valid(token_sequence):
        try:
            ExpressionValidator.validate(token_sequence)
        except ExpressionError as e:
            logger.debug(f"Rejected expression: {e}")
            return False
        return True

    @staticmethod
    def _opens_operand(token):
        return token is not None and token.type in (TokenType.OPERAND, TokenType.LPAREN)
