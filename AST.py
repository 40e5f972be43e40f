from __future__ import annotations
from enum import Enum
from typing import Callable, NamedTuple, Optional, TypeVar, Union

T = TypeVar("T")


class BinOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @classmethod
    def from_sym(cls, sym: str) -> BinOp:
        return cls(sym)


class Number(NamedTuple):
    value: int
    pos: Optional[int] = None

    def __str__(self) -> str:
        return str(self.value)


class BinaryOp(NamedTuple):
    op: BinOp
    left: Node
    right: Node
    # Offset of the operator token
    pos: Optional[int] = None

    def __str__(self) -> str:
        return to_source(self)


Node = Union[Number, BinaryOp]


def fold(root: Node, number: Callable[[Number], T],
         binary: Callable[[BinaryOp, T, T], T]) -> T:
    # Post-order reduction with an explicit stack. Operator chains build
    # left-deep trees as long as the input, so no Python recursion here.
    results = []
    stack = [(root, False)]

    while stack:
        node, children_done = stack.pop()

        if isinstance(node, Number):
            results.append(number(node))
        elif not isinstance(node, BinaryOp):
            raise Exception(f"Internal error: AST node of unexpected type "
                            f"{type(node)}")
        elif children_done:
            right = results.pop()
            left = results.pop()
            results.append(binary(node, left, right))
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))

    return results.pop()


def to_source(node: Node) -> str:
    # Fully parenthesized, so precedence and associativity survive a re-parse
    return fold(node, lambda n: str(n.value),
                lambda n, left, right: f"({left} {n.op.value} {right})")
