#! /bin/env python3

from enum import Enum, auto
from typing import List, NamedTuple
from Errors import LexError


class TokenKind(Enum):
    NUMBER = auto()  # decimal digits
    OPERATOR = auto()  # + - * / ( )
    EOF = auto()  # end of input


class Token(NamedTuple):
    kind: TokenKind
    text: str
    pos: int

    def __str__(self) -> str:
        return f'"{self.text}" ({self.kind.name}) {self.pos}'

    def is_eof(self) -> bool:
        return self.kind == TokenKind.EOF


class Tokenizer:
    WHITE_SPACE = " \t\n\r\f\v"
    OPERATORS = "+-*/()"

    text: str
    idx: int
    tokens: List[Token]

    def __init__(self, text: str):
        self.text = text
        self.idx = 0
        self.tokens = []

    def end(self) -> bool:
        return self.idx >= len(self.text)

    def sym(self) -> str:
        assert not self.end()
        return self.text[self.idx]

    def next(self) -> None:
        self.idx += 1

    def is_white_space(self) -> bool:
        return self.sym() in self.WHITE_SPACE

    def is_digit(self) -> bool:
        return ord(self.sym()) >= ord("0") and ord(self.sym()) <= ord("9")

    def is_operator(self) -> bool:
        return self.sym() in self.OPERATORS

    def clear_white_space(self) -> None:
        while not self.end() and self.is_white_space():
            self.next()

    def number(self) -> Token:
        pos = self.idx

        # Maximal run of digits. The value is converted by the parser.
        while not self.end() and self.is_digit():
            self.next()

        return Token(TokenKind.NUMBER, self.text[pos:self.idx], pos)

    def operator(self) -> Token:
        token = Token(TokenKind.OPERATOR, self.sym(), self.idx)
        self.next()
        return token

    def getNext(self) -> Token:
        self.clear_white_space()

        if self.end():
            return Token(TokenKind.EOF, "", self.idx)
        elif self.is_digit():
            return self.number()
        elif self.is_operator():
            return self.operator()
        else:
            raise LexError(f'unexpected character "{self.sym()}"', self.idx)

    def tokenize(self) -> List[Token]:
        # Always scans the whole text from the start
        self.idx = 0
        self.tokens = []
        while True:
            token = self.getNext()
            self.tokens.append(token)
            if token.is_eof():
                return self.tokens

    def print_tokens(self, file=None) -> None:
        print("kind\t\ttext\tpos", file=file)
        for token in self.tokens:
            print(f"{token.kind.name}\t\t{token.text}\t{token.pos}", file=file)


def tokenize(text: str) -> List[Token]:
    return Tokenizer(text).tokenize()
