"""logic/token_system.py"""
import json
import logging
from dataclasses import dataclass, field
from enum import Enum

from config.config import ENGINE_CONFIG
from logic.errors import ErrorKind, ExpressionError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    OPERAND = "VAR"  # A/B/C/TRUE/FALSE
    OPERATOR = "OP"  # ! && ||
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"


@dataclass(frozen=True)
class Token:
    type: TokenType
    name: str
    symbol: str = field(default=None, compare=False)
    value: bool = field(default=None, compare=False)  # 仅常量操作数有值
    arity: int = field(default=0, compare=False)
    precedence: int = field(default=0, compare=False)
    right_assoc: bool = field(default=False, compare=False)

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    @property
    def is_binary(self):
        return self.type == TokenType.OPERATOR and self.arity == 2

    @property
    def is_constant(self):
        return self.type == TokenType.OPERAND and self.value is not None

    def __str__(self):
        return self.symbol or self.name

    def __repr__(self):
        if self.type in (TokenType.LPAREN, TokenType.RPAREN):
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.name!r})"


def _operator(name, symbol, arity):
    precedence = ENGINE_CONFIG["precedence"][name]
    right_assoc = name in ENGINE_CONFIG["right_associative"]
    return Token(TokenType.OPERATOR, name, symbol=symbol, arity=arity,
                 precedence=precedence, right_assoc=right_assoc)


# Token定义字典
TOKEN_DEFINITIONS = {
    # 操作数 - 自由变量
    **{name: Token(TokenType.OPERAND, name, symbol=name) for name in ENGINE_CONFIG["free_variables"]},

    # 操作数 - 常量
    **{name: Token(TokenType.OPERAND, name, symbol=name, value=value)
       for name, value in ENGINE_CONFIG["constants"].items()},

    # 操作符
    'NOT': _operator('NOT', '!', 1),
    'AND': _operator('AND', '&&', 2),
    'OR': _operator('OR', '||', 2),

    # 括号
    'LPAREN': Token(TokenType.LPAREN, 'LPAREN', symbol='('),
    'RPAREN': Token(TokenType.RPAREN, 'RPAREN', symbol=')'),
}

# 创建Token索引映射（调色板顺序）
TOKEN_TO_INDEX = {name: idx for idx, name in enumerate(TOKEN_DEFINITIONS.keys())}
INDEX_TO_TOKEN = {idx: name for name, idx in TOKEN_TO_INDEX.items()}
TOTAL_TOKENS = len(TOKEN_DEFINITIONS)

OPERANDS = [tk for tk in TOKEN_DEFINITIONS.values() if tk.type == TokenType.OPERAND]
OPERATORS = [tk for tk in TOKEN_DEFINITIONS.values() if tk.type == TokenType.OPERATOR]
GROUPERS = [TOKEN_DEFINITIONS['LPAREN'], TOKEN_DEFINITIONS['RPAREN']]
PALETTE = OPERANDS + OPERATORS + GROUPERS

FREE_VARIABLES = tuple(ENGINE_CONFIG["free_variables"])
LEFT_PAREN = TOKEN_DEFINITIONS['LPAREN']
RIGHT_PAREN = TOKEN_DEFINITIONS['RPAREN']

SYMBOL_TO_OPERATOR = {tk.symbol: tk for tk in OPERATORS}


def variable(name):
    """按名字取操作数 token（A/B/C/TRUE/FALSE）"""
    token = TOKEN_DEFINITIONS.get(name)
    if token is None or token.type != TokenType.OPERAND:
        raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, detail=f"Unknown operand: {name!r}")
    return token


def operator(kind):
    """按名字（NOT/AND/OR）或符号（! && ||）取操作符 token"""
    token = SYMBOL_TO_OPERATOR.get(kind) or TOKEN_DEFINITIONS.get(kind)
    if token is None or token.type != TokenType.OPERATOR:
        raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, detail=f"Unknown operator: {kind!r}")
    return token


def canonical(token):
    """把结构相等的 token 换成定义表中带元数据的实例，类型或名字对不上时原样返回"""
    if not isinstance(token, Token):
        raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, detail=f"Not a token: {token!r}")
    defined = TOKEN_DEFINITIONS.get(token.name)
    if defined is not None and defined.type == token.type:
        return defined
    return token


def is_defined(token):
    """token 的类型和名字都在词表中"""
    return TOKEN_DEFINITIONS.get(token.name) == token


# ================== 传输格式 ==================
# 与拖拽时的交换格式一致：标签 + 载荷（操作数名或操作符符号），括号没有载荷

def token_to_dict(token):
    token = canonical(token)
    if token.type == TokenType.OPERAND:
        return {"type": "VAR", "value": token.name}
    if token.type == TokenType.OPERATOR:
        return {"type": "OP", "value": token.symbol}
    return {"type": token.type.value}


def token_from_dict(data):
    try:
        tag = data["type"]
    except (KeyError, TypeError):
        raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, detail=f"Malformed token: {data!r}")

    if tag == "VAR":
        return variable(data.get("value"))
    if tag == "OP":
        value = data.get("value")
        if value not in SYMBOL_TO_OPERATOR:
            raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, detail=f"Unknown operator: {value!r}")
        return SYMBOL_TO_OPERATOR[value]
    if tag == "LPAREN":
        return LEFT_PAREN
    if tag == "RPAREN":
        return RIGHT_PAREN
    raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, detail=f"Unknown token type: {tag!r}")


def dumps_tokens(tokens):
    return json.dumps([token_to_dict(tk) for tk in tokens])


def loads_tokens(text):
    data = json.loads(text)
    if not isinstance(data, list):
        raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, detail="Token list must be a JSON array")
    return [token_from_dict(item) for item in data]


# ================== 文本切分 ==================

def tokenize(text):
    """
    把表达式文本切成 token 列表，例如 "!(A && B) || TRUE"
    Args:
        text: 只包含词表符号、变量名和空白的字符串
    Returns:
        Token 列表（不做结构检查）
    """
    tokens = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace():
            i += 1
            continue

        if ch == '(':
            tokens.append(LEFT_PAREN)
            i += 1
        elif ch == ')':
            tokens.append(RIGHT_PAREN)
            i += 1
        elif text.startswith('&&', i) or text.startswith('||', i):
            tokens.append(SYMBOL_TO_OPERATOR[text[i:i + 2]])
            i += 2
        elif ch == '!':
            tokens.append(SYMBOL_TO_OPERATOR['!'])
            i += 1
        elif ch.isalpha():
            start = i
            while i < len(text) and text[i].isalnum():
                i += 1
            word = text[start:i]
            token = TOKEN_DEFINITIONS.get(word.upper())
            if token is None or token.type != TokenType.OPERAND:
                raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, position=len(tokens),
                                      detail=f"Unknown operand {word!r} at offset {start}")
            tokens.append(token)
        else:
            raise ExpressionError(ErrorKind.UNKNOWN_TOKEN, position=len(tokens),
                                  detail=f"Unexpected character {ch!r} at offset {i}")

    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens


def format_tokens(tokens):
    """把 token 序列还原为表面文本"""
    return ' '.join(str(canonical(tk)) if isinstance(tk, Token) else repr(tk) for tk in tokens)
