import logging as lg

import bfdbg.loader.grammar as grammar
from bfdbg.loader.program import Program
from bfdbg.loader.scanner import (  # noqa: F401
    Scanner, LoadError, UnmatchedOpenBracket, UnmatchedCloseBracket
)


def load(source_text: str) -> Program:
    lg.debug(f'Loading {len(source_text)} characters of source')
    scanner = Scanner()

    for (line_number, line) in enumerate(source_text.split('\n'), start=1):
        scanner.line = line_number
        actions = grammar.program.parse_string(line, parse_all=True)

        for (func, arg) in actions:  # type: ignore
            func(scanner, arg)

    return scanner.finish()
