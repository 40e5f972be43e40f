from typing import Optional


class CalcError(Exception):
    msg: str
    pos: Optional[int]

    def __init__(self, msg: str, pos: Optional[int] = None):
        super().__init__(msg)
        self.msg = msg
        self.pos = pos

    def __str__(self) -> str:
        if self.pos is None:
            return self.msg
        return f"{self.msg} at {self.pos}"

    def source_loc(self, text: str) -> str:
        # The line holding the error, with a caret under the offending offset
        if self.pos is None:
            return text

        start = text.rfind("\n", 0, self.pos) + 1
        end = text.find("\n", self.pos)
        if end == -1:
            end = len(text)

        line = text[start:end]
        line_no = text.count("\n", 0, start) + 1
        col = self.pos - start + 1

        return f"({line_no}:{col})\n{line}\n{' '*(col-1)}^"


class LexError(CalcError):
    pass


class ParseError(CalcError):
    EXPECTED_PRIMARY = "expected literal or '('"
    EXPECTED_CLOSEPAREN = "expected ')'"
    TRAILING_INPUT = "trailing input"
    BAD_NUMBER = "malformed number"
    TOO_DEEP = "expression nested too deeply"

    kind: str

    def __init__(self, kind: str, pos: Optional[int] = None,
                 msg: Optional[str] = None):
        super().__init__(msg if msg else kind, pos)
        self.kind = kind


class EvalError(CalcError):
    pass
