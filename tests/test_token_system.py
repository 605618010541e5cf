import json
import unittest

from logic import (
    ErrorKind, ExpressionError, GROUPERS, LEFT_PAREN, OPERANDS, OPERATORS,
    PALETTE, RIGHT_PAREN, TOKEN_DEFINITIONS, TOTAL_TOKENS, Token, TokenType,
    dumps_tokens, format_tokens, loads_tokens, operator, token_from_dict,
    token_to_dict, tokenize, variable
)
from logic.token_system import INDEX_TO_TOKEN, TOKEN_TO_INDEX, canonical, is_defined


class TestVocabulary(unittest.TestCase):

    def test_operands(self):
        self.assertEqual([tk.name for tk in OPERANDS], ["A", "B", "C", "TRUE", "FALSE"])

    def test_operators(self):
        self.assertEqual([tk.symbol for tk in OPERATORS], ["!", "&&", "||"])
        self.assertEqual([tk.name for tk in OPERATORS], ["NOT", "AND", "OR"])

    def test_groupers(self):
        self.assertEqual([tk.symbol for tk in GROUPERS], ["(", ")"])

    def test_palette_covers_definitions(self):
        self.assertEqual(len(PALETTE), TOTAL_TOKENS)
        self.assertEqual(set(PALETTE), set(TOKEN_DEFINITIONS.values()))

    def test_index_maps(self):
        for name, idx in TOKEN_TO_INDEX.items():
            self.assertEqual(INDEX_TO_TOKEN[idx], name)

    def test_precedence_and_associativity(self):
        self.assertEqual(operator("!").precedence, 3)
        self.assertEqual(operator("&&").precedence, 2)
        self.assertEqual(operator("||").precedence, 1)
        self.assertTrue(operator("NOT").right_assoc)
        self.assertFalse(operator("AND").right_assoc)
        self.assertFalse(operator("OR").right_assoc)

    def test_constants(self):
        self.assertIs(variable("TRUE").value, True)
        self.assertIs(variable("FALSE").value, False)
        self.assertFalse(variable("A").is_constant)


class TestTokenEquality(unittest.TestCase):

    def test_structural_equality(self):
        self.assertEqual(Token(TokenType.OPERAND, "A"), variable("A"))
        self.assertEqual(Token(TokenType.OPERATOR, "AND"), operator("&&"))
        self.assertNotEqual(variable("A"), variable("B"))
        self.assertNotEqual(LEFT_PAREN, RIGHT_PAREN)

    def test_hashable(self):
        self.assertEqual(len({variable("A"), Token(TokenType.OPERAND, "A")}), 1)

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            variable("A").name = "B"

    def test_unknown_names(self):
        with self.assertRaises(ExpressionError) as cm:
            variable("D")
        self.assertEqual(cm.exception.kind, ErrorKind.UNKNOWN_TOKEN)
        with self.assertRaises(ExpressionError):
            variable("NOT")
        with self.assertRaises(ExpressionError):
            operator("^")

    def test_canonical_checks_type(self):
        self.assertIs(canonical(Token(TokenType.OPERAND, "A")), variable("A"))
        lookalike = Token(TokenType.OPERAND, "NOT")
        self.assertIs(canonical(lookalike), lookalike)
        self.assertEqual(canonical(lookalike).arity, 0)

    def test_canonical_rejects_non_tokens(self):
        with self.assertRaises(ExpressionError) as cm:
            canonical("A")
        self.assertEqual(cm.exception.kind, ErrorKind.UNKNOWN_TOKEN)

    def test_is_defined(self):
        self.assertTrue(is_defined(Token(TokenType.OPERAND, "TRUE")))
        self.assertTrue(is_defined(operator("||")))
        self.assertFalse(is_defined(Token(TokenType.OPERAND, "D")))
        self.assertFalse(is_defined(Token(TokenType.OPERATOR, "A")))


class TestTransport(unittest.TestCase):

    def test_interchange_form(self):
        self.assertEqual(token_to_dict(variable("A")), {"type": "VAR", "value": "A"})
        self.assertEqual(token_to_dict(operator("OR")), {"type": "OP", "value": "||"})
        self.assertEqual(token_to_dict(LEFT_PAREN), {"type": "LPAREN"})
        self.assertEqual(token_to_dict(RIGHT_PAREN), {"type": "RPAREN"})

    def test_round_trip_palette(self):
        for tk in PALETTE:
            self.assertEqual(token_from_dict(token_to_dict(tk)), tk)

    def test_json_list(self):
        tokens = tokenize("!(A && TRUE)")
        text = dumps_tokens(tokens)
        self.assertEqual(json.loads(text)[0], {"type": "OP", "value": "!"})
        self.assertEqual(loads_tokens(text), tokens)

    def test_malformed(self):
        for data in ({}, {"type": "VAR", "value": "D"}, {"type": "OP", "value": "&"},
                     {"type": "XOR"}, "A", None):
            with self.assertRaises(ExpressionError):
                token_from_dict(data)

    def test_json_must_be_list(self):
        with self.assertRaises(ExpressionError):
            loads_tokens('{"type": "VAR", "value": "A"}')


class TestTokenizer(unittest.TestCase):

    def case(self, text, output):
        self.assertEqual(tokenize(text), output)

    def test_single(self):
        self.case("A", [variable("A")])

    def test_and(self):
        self.case("A && B", [variable("A"), operator("AND"), variable("B")])

    def test_no_whitespace(self):
        self.case("A||!B", [variable("A"), operator("OR"), operator("NOT"), variable("B")])

    def test_constants_case_insensitive(self):
        self.case("true || False", [variable("TRUE"), operator("OR"), variable("FALSE")])

    def test_complex(self):
        self.case("!(A && B) || TRUE", [
            operator("!"), LEFT_PAREN, variable("A"), operator("&&"), variable("B"),
            RIGHT_PAREN, operator("||"), variable("TRUE")])

    def test_empty(self):
        self.case("   ", [])

    def test_unknown_word(self):
        with self.assertRaises(ExpressionError) as cm:
            tokenize("A && D")
        self.assertEqual(cm.exception.kind, ErrorKind.UNKNOWN_TOKEN)
        self.assertEqual(cm.exception.position, 2)

    def test_single_ampersand(self):
        with self.assertRaises(ExpressionError):
            tokenize("A & B")

    def test_format(self):
        self.assertEqual(format_tokens(tokenize("!(A&&B)")), "! ( A && B )")


if __name__ == '__main__':
    unittest.main()
