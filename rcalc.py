#! /bin/env python3

from Errors import CalcError
from Evaluator import CalcResult, calculate
from Parser import ParseDebug, parse
from Tokenizer import tokenize
from ASTVis import ASTVis
from graphviz import ExecutableNotFound

import argparse
import sys


def report_error(text: str, e: CalcError) -> None:
    print(f"{type(e).__name__}: {e}\n{e.source_loc(text)}", file=sys.stderr)


class Repl:
    EXIT = "exit"

    def __init__(self, instream=None, outstream=None,
                 debug: ParseDebug = None, verbose: bool = False):
        self.instream = instream if instream else sys.stdin
        self.outstream = outstream if outstream else sys.stdout
        self.debug = debug
        self.verbose = verbose
        self.line_num = 1

    def prompt(self) -> None:
        print(f"rcalc:{self.line_num}>> ", end="", file=self.outstream,
              flush=True)
        self.line_num += 1

    def report(self, text: str, result: CalcResult) -> None:
        if result.ok():
            print(f"=> {result.value}", file=self.outstream)
        else:
            print("error", file=self.outstream)
            if self.verbose:
                report_error(text, result.error)

    def run(self) -> None:
        while True:
            self.prompt()

            line = self.instream.readline()
            # End of input
            if not line:
                print(file=self.outstream)
                return

            text = line.rstrip("\r\n")
            if text == self.EXIT:
                return
            if text == "":
                continue

            self.report(text, calculate(text, debug=self.debug))


def batch(exprs, debug: ParseDebug = None, verbose: bool = False) -> bool:
    # One result (or "error") per expression
    success = True
    for text in exprs:
        result = calculate(text, debug=debug)
        if result.ok():
            print(result.value)
        else:
            success = False
            print("error")
            if verbose:
                report_error(text, result.error)
    return success


def read_exprs(file: str):
    try:
        with open(file) as f:
            lines = f.read().splitlines()
    except OSError as e:
        print(f"rcalc error: Fail to open file {file}: {e}", file=sys.stderr)
        sys.exit(1)
    return [line for line in lines if line.strip()]


def vis_tree(text: str, file: str, verbose: bool = False) -> None:
    try:
        root = parse(tokenize(text))
    except CalcError as e:
        print(f"rcalc error: cannot draw \"{text}\": {e}", file=sys.stderr)
        return
    vis = ASTVis(filename=file, debug=verbose)
    vis.tree(root)
    try:
        vis.render()
    except ExecutableNotFound as e:
        print(f"rcalc error: cannot render {file}: {e}", file=sys.stderr)


def getArgs(argv=None):
    parser = argparse.ArgumentParser(description="Integer calculator")
    parser.add_argument("-e", dest="exprs", type=str, action="append",
                        help="expression to evaluate (repeatable)")
    parser.add_argument("-i", dest="src", type=str,
                        help="file with one expression per line")
    parser.add_argument("-d", dest="debug", type=str,
                        help="debug output from the parser")
    parser.add_argument("-g", dest="graph", type=str,
                        help="graphviz output for the last expression's tree")
    parser.add_argument("-v", action="store_true",
                        dest="verbose", default=False, help="verbose mode")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    # Get args
    args = getArgs(argv)
    debug = ParseDebug(file=args.debug) if args.debug else None

    exprs = list(args.exprs or [])
    if args.src:
        exprs += read_exprs(args.src)

    status = 0
    if exprs:
        if not batch(exprs, debug=debug, verbose=args.verbose):
            status = 1
        if args.graph:
            vis_tree(exprs[-1], args.graph, verbose=args.verbose)
    else:
        Repl(debug=debug, verbose=args.verbose).run()

    if debug:
        debug.dump()

    return status


if __name__ == "__main__":
    sys.exit(main())
