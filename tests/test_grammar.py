import unittest
from calc.utils import TokenId, Rule, Pair, tokenize
from calc.grammar import parse_equation, atom_expected, op_expected, max_nesting
from calc.errors import ParseSyntaxError, NestingTooDeep, ErrorKind

class TestTokenize(unittest.TestCase):
    def test_token_kinds(self):
        toks = tokenize('12 + (3*4) - 5 / 6 % 7')
        self.assertEqual([t.token_id for t in toks], [
            TokenId.NUMBER, TokenId.OP_PLUS, TokenId.RBRACE_LEFT,
            TokenId.NUMBER, TokenId.OP_MUL, TokenId.NUMBER,
            TokenId.RBRACE_RIGHT, TokenId.OP_MINUS, TokenId.NUMBER,
            TokenId.OP_DIV, TokenId.NUMBER, TokenId.OP_MOD, TokenId.NUMBER,
            TokenId.EOI])

    def test_offsets(self):
        toks = tokenize(' 42 +7')
        self.assertEqual([(t.value, t.offset) for t in toks],
                         [('42', 1), ('+', 4), ('7', 5), ('', 6)])

    def test_unknown_character(self):
        toks = tokenize('2 & 3')
        self.assertEqual(toks[1].token_id, TokenId.UNKNOWN)
        self.assertEqual(toks[1].value, '&')
        self.assertEqual(toks[1].offset, 2)

    def test_empty(self):
        toks = tokenize('')
        self.assertEqual(len(toks), 1)
        self.assertEqual(toks[0].token_id, TokenId.EOI)

class TestEquation(unittest.TestCase):
    def test_flat_sequence(self):
        seq = parse_equation('1 + 2 * 3')
        self.assertEqual([p.rule for p in seq],
                         [Rule.INTEGER, Rule.ADD, Rule.INTEGER, Rule.MULTIPLY, Rule.INTEGER])
        self.assertEqual([p.text for p in seq], ['1', '+', '2', '*', '3'])

    def test_sequence_shape(self):
        for src in ['1', '1+2', '(1)*-2%3', '-(1-2)/4+5']:
            seq = parse_equation(src)
            self.assertEqual(len(seq) % 2, 1)
            for i, pair in enumerate(seq):
                is_atom = pair.rule in (Rule.INTEGER, Rule.UNARY_MINUS, Rule.EXPR)
                self.assertEqual(is_atom, i % 2 == 0)

    def test_parenthesized_group(self):
        seq = parse_equation('(2 + 3) * 4')
        self.assertEqual(seq[0].rule, Rule.EXPR)
        self.assertEqual(seq[0].text, '(2 + 3)')
        self.assertEqual([p.rule for p in seq[0].inner],
                         [Rule.INTEGER, Rule.ADD, Rule.INTEGER])

    def test_unary_minus_is_a_group(self):
        seq = parse_equation('-5')
        self.assertEqual(seq, [Pair(Rule.UNARY_MINUS, '-5', 0, [Pair(Rule.INTEGER, '5', 1)])])

    def test_unary_minus_nests(self):
        seq = parse_equation('--5')
        self.assertEqual(len(seq), 1)
        self.assertEqual(seq[0].rule, Rule.UNARY_MINUS)
        self.assertEqual(seq[0].inner[0].rule, Rule.UNARY_MINUS)
        self.assertEqual(seq[0].inner[0].inner[0].text, '5')

    def test_unary_minus_after_operator(self):
        seq = parse_equation('2 - -3')
        self.assertEqual([p.rule for p in seq],
                         [Rule.INTEGER, Rule.SUBTRACT, Rule.UNARY_MINUS])

    def test_unary_minus_with_space(self):
        seq = parse_equation('- 5')
        self.assertEqual(seq[0].rule, Rule.UNARY_MINUS)
        self.assertEqual(seq[0].text, '- 5')

class TestSyntaxErrors(unittest.TestCase):
    def assertSyntaxError(self, src, offset, expected):
        with self.assertRaises(ParseSyntaxError) as ctx:
            parse_equation(src)
        self.assertEqual(ctx.exception.kind, ErrorKind.SYNTAX)
        self.assertEqual(ctx.exception.offset, offset)
        self.assertEqual(ctx.exception.expected, expected)
        return ctx.exception

    def test_empty_input(self):
        err = self.assertSyntaxError('', 0, atom_expected)
        self.assertEqual(err.found, 'end of input')

    def test_blank_input(self):
        self.assertSyntaxError('   ', 3, atom_expected)

    def test_missing_operand(self):
        self.assertSyntaxError('2 +', 3, atom_expected)

    def test_unclosed_paren(self):
        self.assertSyntaxError('(2 + 3', 6, op_expected + (')',))

    def test_missing_operator(self):
        err = self.assertSyntaxError('2 3', 2, op_expected + ('end of input',))
        self.assertEqual(err.found, "'3'")

    def test_reversed_parens(self):
        self.assertSyntaxError(')2(', 0, atom_expected)

    def test_unmatched_close(self):
        self.assertSyntaxError('(1))', 3, op_expected + ('end of input',))

    def test_unknown_character(self):
        self.assertSyntaxError('2 & 3', 2, op_expected + ('end of input',))
        self.assertSyntaxError('2 * x', 4, atom_expected)

    def test_dangling_minus(self):
        self.assertSyntaxError('-', 1, atom_expected)

    def test_empty_parens(self):
        self.assertSyntaxError('()', 1, atom_expected)

class TestNesting(unittest.TestCase):
    def test_limit_reached(self):
        seq = parse_equation("-(" * (max_nesting // 2) + "1" + ")" * (max_nesting // 2))
        self.assertEqual(seq[0].rule, Rule.UNARY_MINUS)

    def test_limit_exceeded(self):
        src = "1 + " + "(" * (max_nesting + 1) + "1" + ")" * (max_nesting + 1)
        with self.assertRaises(NestingTooDeep) as ctx:
            parse_equation(src)
        self.assertEqual(ctx.exception.offset, 4 + max_nesting)
        self.assertEqual(ctx.exception.limit, max_nesting)

    def test_flat_sequences_are_not_nested(self):
        seq = parse_equation(" + ".join(["-1"] * 1000))
        self.assertEqual(len(seq), 1999)

if __name__ == '__main__':
    unittest.main()
