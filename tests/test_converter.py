import unittest

from logic import ErrorKind, ExpressionError, InfixConverter, TokenType, tokenize
from logic.token_system import LEFT_PAREN, variable


class TestInfixToRPN(unittest.TestCase):

    def case(self, text, output):
        rpn = InfixConverter.to_rpn(tokenize(text))
        self.assertEqual(" ".join(str(tk) for tk in rpn), output)

    def test_operand(self):
        self.case("A", "A")

    def test_and(self):
        self.case("A && B", "A B &&")

    def test_and_binds_tighter_than_or(self):
        self.case("A || B && C", "A B C && ||")
        self.case("A && B || C", "A B && C ||")

    def test_left_associative(self):
        self.case("A && B && C", "A B && C &&")
        self.case("A || B || C", "A B || C ||")

    def test_double_negation(self):
        self.case("!!A", "A ! !")

    def test_not_binds_tightest(self):
        self.case("!A && B", "A ! B &&")

    def test_parentheses(self):
        self.case("(A || B) && C", "A B || C &&")
        self.case("!(A && B)", "A B && !")

    def test_no_grouping_markers_in_output(self):
        rpn = InfixConverter.to_rpn(tokenize("((A || (B)) && !(C))"))
        self.assertTrue(all(tk.type in (TokenType.OPERAND, TokenType.OPERATOR) for tk in rpn))

    def test_input_not_mutated(self):
        tokens = tokenize("(A || B) && C")
        before = list(tokens)
        InfixConverter.to_rpn(tokens)
        self.assertEqual(tokens, before)

    def test_unclosed_paren(self):
        with self.assertRaises(ExpressionError) as cm:
            InfixConverter.to_rpn([LEFT_PAREN, variable("A")])
        self.assertEqual(cm.exception.kind, ErrorKind.MISMATCHED_PARENTHESES)

    def test_unopened_paren(self):
        with self.assertRaises(ExpressionError) as cm:
            InfixConverter.to_rpn(tokenize("A)"))
        self.assertEqual(cm.exception.kind, ErrorKind.MISMATCHED_PARENTHESES)
        self.assertEqual(cm.exception.position, 1)

    def test_extra_closing_paren(self):
        with self.assertRaises(ExpressionError) as cm:
            InfixConverter.to_rpn(tokenize("(A))"))
        self.assertEqual(cm.exception.kind, ErrorKind.MISMATCHED_PARENTHESES)


if __name__ == '__main__':
    unittest.main()
