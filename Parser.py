from typing import Callable, List, Optional
from functools import wraps
from Tokenizer import Token, TokenKind
from AST import BinOp, Number, BinaryOp, Node, to_source
from Errors import ParseError


class ParseDebug:
    # Trace of the rules entered while parsing: each rule with the tokens it
    # consumed, its sub-rules and the subtree it returned
    class NT:
        def __init__(self, name: str):
            self.name = name
            self.components = []
            self.node = None

        def __str__(self) -> str:
            if self.node is None:
                return f"NT:{self.name}"
            return f"NT:{self.name} => {to_source(self.node)}"

    def __init__(self, file: str = None):
        self.root = []
        self.current = self.root
        self.stack = []
        self.file = file

    def add(self, token: Token) -> None:
        self.current.append(token)

    def enter(self, rule: str) -> NT:
        nt = self.NT(rule)
        self.current.append(nt)
        self.stack.append(self.current)
        self.current = nt.components
        return nt

    def leave(self) -> None:
        self.current = self.stack.pop()

    def toStr(self, items: List, indent: int = 0) -> str:
        lines = []
        for item in items:
            lines.append(f"{'| ' * indent}{item}\n")
            if isinstance(item, self.NT):
                lines.append(self.toStr(item.components, indent + 1))
        return "".join(lines)

    def dump(self) -> None:
        if self.file:
            with open(self.file, "w+") as f:
                f.write(self.toStr(self.root))
        else:
            print(self.toStr(self.root), end="")


class Parser:
    # Deepest parenthesis nesting accepted
    MAX_DEPTH = 64

    tokens: List[Token]
    idx: int
    depth: int
    debug: Optional[ParseDebug]

    def __init__(self, tokens: List[Token], debug: ParseDebug = None):
        if not tokens or not tokens[-1].is_eof():
            raise ValueError("Token sequence must end with EOF")
        self.tokens = tokens
        self.idx = 0
        self.depth = 0
        self.debug = debug

    @property
    def inputSym(self) -> Token:
        return self.tokens[self.idx]

    def _next(self) -> None:
        # EOF is never consumed past
        if self.idx < len(self.tokens) - 1:
            if self.debug:
                self.debug.add(self.inputSym)
            self.idx += 1

    def _check_sym(self, sym: str, kind: str) -> None:
        if self.inputSym.text != sym:
            raise ParseError(kind, self.inputSym.pos,
                             f"{kind}, found {self.inputSym}")

    def _nonterminal(func: Callable):
        @wraps(func)
        def wrapNT(self, *args, **kargs):
            if not self.debug:
                return func(self, *args, **kargs)

            nt = self.debug.enter(func.__name__)
            try:
                nt.node = func(self, *args, **kargs)
                return nt.node
            finally:
                self.debug.leave()

        return wrapNT

    def parse(self) -> Node:
        try:
            node = self.expr()
        except RecursionError:
            raise ParseError(ParseError.TOO_DEEP, self.inputSym.pos)

        if not self.inputSym.is_eof():
            raise ParseError(ParseError.TRAILING_INPUT, self.inputSym.pos,
                             f"{ParseError.TRAILING_INPUT}, found "
                             f"{self.inputSym}")

        return node

    @_nonterminal
    def expr(self) -> Node:
        # expr = add
        return self.add()

    @_nonterminal
    def add(self) -> Node:
        # add = mul { ("+" | "-") mul }

        node = self.mul()

        while self.inputSym.kind == TokenKind.OPERATOR and \
                self.inputSym.text in ["+", "-"]:
            sym = self.inputSym
            self._next()
            node = BinaryOp(BinOp.from_sym(sym.text), node, self.mul(),
                            sym.pos)

        return node

    @_nonterminal
    def mul(self) -> Node:
        # mul = primary { ("*" | "/") primary }

        node = self.primary()

        while self.inputSym.kind == TokenKind.OPERATOR and \
                self.inputSym.text in ["*", "/"]:
            sym = self.inputSym
            self._next()
            node = BinaryOp(BinOp.from_sym(sym.text), node, self.primary(),
                            sym.pos)

        return node

    @_nonterminal
    def primary(self) -> Node:
        # primary = number | "(" expr ")"

        sym = self.inputSym

        if sym.kind == TokenKind.NUMBER:
            try:
                value = int(sym.text)
            except ValueError:
                raise ParseError(ParseError.BAD_NUMBER, sym.pos,
                                 f"{ParseError.BAD_NUMBER} {sym}")
            self._next()
            return Number(value, sym.pos)

        self._check_sym("(", ParseError.EXPECTED_PRIMARY)
        if self.depth >= self.MAX_DEPTH:
            raise ParseError(ParseError.TOO_DEEP, sym.pos)
        self._next()

        self.depth += 1
        node = self.expr()
        self.depth -= 1

        self._check_sym(")", ParseError.EXPECTED_CLOSEPAREN)
        self._next()
        return node


def parse(tokens: List[Token], debug: ParseDebug = None) -> Node:
    return Parser(tokens, debug=debug).parse()
