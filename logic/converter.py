"""logic/converter.py - 中缀 token 序列转 RPN（shunting-yard）"""
import logging

from logic.errors import ErrorKind, ExpressionError
from logic.token_system import TokenType, canonical

logger = logging.getLogger(__name__)


class InfixConverter:

    @staticmethod
    def _should_pop(current, top):
        # 栈顶是括号标记时停止
        if top.type != TokenType.OPERATOR:
            return False
        if current.right_assoc:
            return current.precedence < top.precedence
        return current.precedence <= top.precedence

    @staticmethod
    def to_rpn(token_sequence):
        """
        Args:
            token_sequence: 已通过校验的中缀 Token 序列
        Returns:
            RPN Token 列表，不含括号
        Raises:
            ExpressionError: 括号不匹配
        """
        output = []
        stack = []

        for i, tk in enumerate(token_sequence):
            tk = canonical(tk)

            if tk.type == TokenType.OPERAND:
                output.append(tk)

            elif tk.type == TokenType.OPERATOR:
                while stack and InfixConverter._should_pop(tk, stack[-1]):
                    output.append(stack.pop())
                stack.append(tk)

            elif tk.type == TokenType.LPAREN:
                stack.append(tk)

            elif tk.type == TokenType.RPAREN:
                found_left = False
                while stack:
                    top = stack.pop()
                    if top.type == TokenType.LPAREN:
                        found_left = True
                        break
                    output.append(top)
                if not found_left:
                    raise ExpressionError(ErrorKind.MISMATCHED_PARENTHESES, position=i)

        while stack:
            top = stack.pop()
            if top.type == TokenType.LPAREN:
                raise ExpressionError(ErrorKind.MISMATCHED_PARENTHESES)
            output.append(top)

        logger.debug(f"RPN: {' '.join(str(tk) for tk in output)}")
        return output
