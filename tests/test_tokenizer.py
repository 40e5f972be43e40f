import sys
import os

sys.path.append(os.path.dirname(os.path.realpath(__file__)) + "/..")

import unittest
from Tokenizer import Tokenizer, Token, TokenKind, tokenize
from Errors import LexError
import io


class TestTokennizer(unittest.TestCase):
    def test_tokenizer(self):
        tokenizer = Tokenizer("12 - 3")

        token = tokenizer.getNext()
        self.assertEqual(token.kind, TokenKind.NUMBER)
        self.assertEqual(token.text, "12")
        self.assertEqual(token.pos, 0)

        token = tokenizer.getNext()
        self.assertEqual(token.kind, TokenKind.OPERATOR)
        self.assertEqual(token.text, "-")
        self.assertEqual(token.pos, 3)

        token = tokenizer.getNext()
        self.assertEqual(token.kind, TokenKind.NUMBER)
        self.assertEqual(token.text, "3")
        self.assertEqual(token.pos, 5)

        token = tokenizer.getNext()
        self.assertTrue(token.is_eof())
        self.assertEqual(token.text, "")
        self.assertEqual(token.pos, 6)

        # EOF is sticky
        self.assertTrue(tokenizer.getNext().is_eof())

    def test_tokenize(self):
        tokens = tokenize("(1+23)*456/7")
        self.assertEqual([t.text for t in tokens],
                         ["(", "1", "+", "23", ")", "*", "456", "/", "7", ""])
        self.assertEqual([t.pos for t in tokens],
                         [0, 1, 2, 3, 5, 6, 7, 10, 11, 12])
        self.assertEqual([t.kind for t in tokens],
                         [TokenKind.OPERATOR, TokenKind.NUMBER,
                          TokenKind.OPERATOR, TokenKind.NUMBER,
                          TokenKind.OPERATOR, TokenKind.OPERATOR,
                          TokenKind.NUMBER, TokenKind.OPERATOR,
                          TokenKind.NUMBER, TokenKind.EOF])

    def test_white_space(self):
        tokens = tokenize(" \t1  +\n2 \r\n")
        self.assertEqual([t.text for t in tokens], ["1", "+", "2", ""])
        self.assertEqual([t.pos for t in tokens], [2, 5, 7, 11])

        tokens = tokenize("")
        self.assertEqual(tokens, [Token(TokenKind.EOF, "", 0)])

        tokens = tokenize("   ")
        self.assertEqual(tokens, [Token(TokenKind.EOF, "", 3)])

    def test_numbers_are_maximal_runs(self):
        tokens = tokenize("007 12")
        self.assertEqual(tokens[0], Token(TokenKind.NUMBER, "007", 0))
        self.assertEqual(tokens[1], Token(TokenKind.NUMBER, "12", 4))

    def test_order_and_single_eof(self):
        tokens = tokenize("1 + (2 * 3) - 4 / 5")
        positions = [t.pos for t in tokens]
        self.assertEqual(positions, sorted(positions))
        self.assertEqual(sum(1 for t in tokens if t.is_eof()), 1)
        self.assertTrue(tokens[-1].is_eof())

    def test_idempotent(self):
        code = " 3 * (2 + 3) * 4 "
        self.assertEqual(tokenize(code), tokenize(code))

    def test_tokenize_twice(self):
        tokenizer = Tokenizer("1 + 2")
        first = list(tokenizer.tokenize())
        self.assertEqual(tokenizer.tokenize(), first)
        self.assertEqual(len(tokenizer.tokens), 4)
        self.assertEqual(sum(1 for t in tokenizer.tokens if t.is_eof()), 1)

    def test_unexpected_character(self):
        with self.assertRaises(LexError) as cm:
            tokenize("1+@")
        self.assertEqual(cm.exception.pos, 2)

        for code in ["1.5", "x", "2^3", "1 % 2", "٣"]:
            with self.assertRaises(LexError):
                tokenize(code)

    def test_print_tokens(self):
        tokenizer = Tokenizer("1+2")
        tokenizer.tokenize()
        out = io.StringIO()
        tokenizer.print_tokens(file=out)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0], "kind\t\ttext\tpos")
        self.assertEqual(lines[2], "OPERATOR\t\t+\t1")
        self.assertEqual(lines[4], "EOF\t\t\t3")


if __name__ == "__main__":
    unittest.main()
