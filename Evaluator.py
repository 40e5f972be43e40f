from typing import NamedTuple, Optional
from AST import BinOp, Number, BinaryOp, Node, fold
from Errors import CalcError, EvalError
from Parser import ParseDebug, parse
from Tokenizer import tokenize


def truncdiv(x: int, y: int) -> int:
    # Integer division rounding toward zero
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


class Evaluator:
    def __init__(self, root: Node):
        self.root = root

    def eval(self) -> int:
        return fold(self.root, self._number, self._binary)

    def _number(self, node: Number) -> int:
        return node.value

    def _binary(self, node: BinaryOp, left: int, right: int) -> int:
        if node.op == BinOp.ADD:
            return left + right
        elif node.op == BinOp.SUB:
            return left - right
        elif node.op == BinOp.MUL:
            return left * right
        elif node.op == BinOp.DIV:
            if right == 0:
                raise EvalError("division by zero", node.pos)
            return truncdiv(left, right)
        else:
            raise Exception(f"Internal error: unexpected operator {node.op}")


def evaluate(root: Node) -> int:
    return Evaluator(root).eval()


def evaluate_expression(text: str, debug: ParseDebug = None) -> int:
    return evaluate(parse(tokenize(text), debug=debug))


class CalcResult(NamedTuple):
    value: Optional[int] = None
    error: Optional[CalcError] = None

    def ok(self) -> bool:
        return self.error is None


def calculate(text: str, debug: ParseDebug = None) -> CalcResult:
    # Same as evaluate_expression, with the failure returned instead of raised
    try:
        return CalcResult(value=evaluate_expression(text, debug=debug))
    except CalcError as e:
        return CalcResult(error=e)
