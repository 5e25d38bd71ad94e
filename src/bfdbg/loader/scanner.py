''' First pass: collects instructions and pairs loop brackets '''

import logging as lg
from typing import List, Tuple

import bfdbg.common.ops as ops
from bfdbg.loader.program import Instruction, Program


class LoadError(Exception):
    line: int
    column: int

    def __init__(self, line: int, column: int):
        super().__init__(line, column)
        self.line = line
        self.column = column

    def describe(self) -> str:
        raise NotImplementedError()

    def __str__(self) -> str:
        return f'{self.describe()} at {self.line}:{self.column}'


class UnmatchedOpenBracket(LoadError):
    def describe(self) -> str:
        return 'no matching closing bracket for open bracket'


class UnmatchedCloseBracket(LoadError):
    def describe(self) -> str:
        return 'no opening bracket for closing bracket'


class Scanner:
    line: int   # Line being scanned, 1-based
    instructions: List[Instruction]
    pending: List[int]  # Indices of loop openings still waiting for a close

    def __init__(self):
        self.line = 0
        self.instructions = []
        self.pending = []

    def issue_op(self, arg: Tuple[int, int]):
        (op, column) = arg
        self.instructions.append(Instruction(op, self.line, column))

    def open_loop(self, column: int):
        self.pending.append(len(self.instructions))
        # Target is patched by the matching close
        self.instructions.append(Instruction(ops.LBG, self.line, column))

    def close_loop(self, column: int):

        if not self.pending:
            raise UnmatchedCloseBracket(self.line, column)

        start = self.pending.pop()
        end = len(self.instructions)
        self.instructions[start] = self.instructions[start].resolve(end)
        self.instructions.append(Instruction(ops.LND, self.line, column, start))

    def finish(self) -> Program:
        if self.pending:
            first = self.instructions[self.pending[0]]
            raise UnmatchedOpenBracket(first.line, first.column)

        self.instructions.append(Instruction(ops.HLT, 0, 0))
        lg.debug(f'Loaded {len(self.instructions)} instructions')
        return Program(self.instructions)
