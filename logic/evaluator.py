"""校验 -> 转换 -> 求值 的完整流水线"""
import logging
from collections import OrderedDict
from typing import Dict, Mapping, Optional, Sequence

from config.config import CACHE_CONFIG
from logic.converter import InfixConverter
from logic.errors import EvaluationResult, ExpressionError
from logic.rpn_evaluator import RPNEvaluator
from logic.token_system import FREE_VARIABLES, Token, canonical, format_tokens
from logic.validator import ExpressionValidator

logger = logging.getLogger(__name__)


def evaluate_tokens(tokens: Sequence[Token], env: Mapping[str, bool]) -> bool:
    """跑一遍完整流水线，错误以 ExpressionError 抛出"""
    ExpressionValidator.validate(tokens)
    rpn = InfixConverter.to_rpn(tokens)
    return bool(RPNEvaluator.evaluate(rpn, env))


def validate_and_evaluate(tokens: Sequence[Token], env: Optional[Mapping[str, bool]] = None) -> EvaluationResult:
    """
    Args:
        tokens: 中缀 Token 序列
        env: 变量赋值，缺失视为 False
    Returns:
        EvaluationResult，表达式错误不会抛出
    """
    try:
        return EvaluationResult.success(evaluate_tokens(tokens, env or {}))
    except ExpressionError as e:
        logger.debug(f"Expression '{format_tokens(tokens)}' failed: {e}")
        return EvaluationResult.failure(e)


class ExpressionEvaluator:
    """带 LRU 缓存的求值入口，键为 (规范化 token 元组, A/B/C 赋值)"""

    def __init__(self, cache_size=None):
        self.cache_size = CACHE_CONFIG["cache_size"] if cache_size is None else cache_size
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _evict(self):
        # 超出容量时丢弃最久未命中的 (表达式, 赋值) 组合
        while len(self._result_cache) > self.cache_size:
            evicted_key, _ = self._result_cache.popitem(last=False)
            logger.debug(f"Evicted cached result for '{format_tokens(evicted_key[0])}'")

    def clear_cache(self):
        logger.info(f"Clearing {len(self._result_cache)} cached results "
                    f"({self._cache_hits} hits, {self._cache_misses} misses)")
        self._result_cache.clear()
        self._cache_hits = self._cache_misses = 0

    @property
    def cache_info(self) -> Dict[str, int]:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
        }

    @staticmethod
    def _generate_cache_key(tokens, env):
        # 只用自由变量参与键，TRUE/FALSE 不可重新绑定；词表外的操作数在校验时就会被拒绝
        assignment = frozenset((name, bool(env.get(name, False))) for name in FREE_VARIABLES)
        return tuple(canonical(tk) for tk in tokens), assignment

    def evaluate(self, tokens: Sequence[Token], env: Optional[Mapping[str, bool]] = None) -> EvaluationResult:
        env = env or {}
        if self.cache_size <= 0:
            return validate_and_evaluate(tokens, env)

        try:
            cache_key = self._generate_cache_key(tokens, env)
        except ExpressionError as e:
            # 序列里混入了非 Token 对象，不缓存
            return EvaluationResult.failure(e)

        cached = self._result_cache.get(cache_key)
        if cached is not None:
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {format_tokens(tokens)}")
            return cached

        self._cache_misses += 1
        result = validate_and_evaluate(tokens, env)
        self._result_cache[cache_key] = result
        self._evict()
        return result
