"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from logic.errors import ErrorKind, ExpressionError
from logic.operators import Operators
from logic.token_system import TokenType, canonical, is_defined

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(rpn_sequence, env):
        """
        评估RPN表达式
        Args:
            rpn_sequence: InfixConverter 产生的 Token 序列
            env: 变量赋值字典 {'A': True, ...}，缺失的变量视为 False
        Returns:
            bool；env 中的值为等长布尔数组时逐元素求值，返回布尔数组
        Raises:
            ExpressionError: 未知操作数、操作数不足、栈中剩余多个值或未知操作符
        """
        stack = []

        for i, token in enumerate(rpn_sequence):
            token = canonical(token)

            if token.type == TokenType.OPERAND:
                if not is_defined(token):
                    raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, position=i,
                                          detail=f"Unknown operand: {token.name!r}")
                # TRUE/FALSE 不查环境
                if token.is_constant:
                    stack.append(token.value)
                else:
                    stack.append(Operators.as_bool(env.get(token.name, False)))
                continue

            op_method = Operators.get(token.name) if token.type == TokenType.OPERATOR else None
            if op_method is None:
                logger.debug(f"Unknown operator in RPN: {token!r}")
                raise ExpressionError(ErrorKind.UNKNOWN_OPERATOR, position=i)

            # ================== 一元操作符处理 ==================
            if token.arity == 1:
                if len(stack) < 1:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise ExpressionError(ErrorKind.INCOMPLETE_EXPRESSION, position=i,
                                          detail="Invalid unary operator placement")
                operand = stack.pop()
                stack.append(op_method(operand))

            # ================== 二元操作符处理 ==================
            else:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise ExpressionError(ErrorKind.INCOMPLETE_EXPRESSION, position=i,
                                          detail=f"Invalid {token.name} placement")
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(op_method(operand1, operand2))

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise ExpressionError(ErrorKind.INCOMPLETE_EXPRESSION)
        return stack[0]
