"""logic/operators.py"""
import numpy as np


class Operators:
    """所有操作符的静态方法集合，方法名与 token 名一致"""

    @staticmethod
    def as_bool(operand):
        """标量返回 Python bool，数组返回布尔数组"""
        if isinstance(operand, np.ndarray):
            return operand.astype(bool)
        return bool(operand)

    @staticmethod
    def _unbox(result):
        if isinstance(result, np.ndarray) and result.ndim > 0:
            return result
        return bool(result)

    # 一元操作符====================

    @staticmethod
    def NOT(operand):
        return Operators._unbox(np.logical_not(Operators.as_bool(operand)))

    # 二元操作符（两侧都已求值，不短路）====================

    @staticmethod
    def AND(operand1, operand2):
        return Operators._unbox(np.logical_and(Operators.as_bool(operand1), Operators.as_bool(operand2)))

    @staticmethod
    def OR(operand1, operand2):
        return Operators._unbox(np.logical_or(Operators.as_bool(operand1), Operators.as_bool(operand2)))

    @staticmethod
    def get(name):
        """按名字取操作符实现，未知名字返回 None"""
        if name in ('NOT', 'AND', 'OR'):
            return getattr(Operators, name)
        return None
