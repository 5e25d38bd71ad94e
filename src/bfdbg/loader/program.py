from dataclasses import dataclass, replace
from typing import Iterator, Sequence

import bfdbg.common.ops as ops


@dataclass(frozen=True)
class Instruction:
    op: int
    line: int           # 1-based, 0 for the appended halt
    column: int         # 0-based
    target: int | None = None   # Counterpart index for loop brackets

    def symbol(self) -> str:
        return ops.LISTING[self.op]

    def is_jump(self) -> bool:
        return self.op in ops.JUMPS

    def resolve(self, target: int) -> 'Instruction':
        return replace(self, target=target)

    def location(self) -> str:
        return f'{self.line}:{self.column}'

    def __str__(self) -> str:
        if self.is_jump():
            return f'{self.symbol()} (target: {self.target})'

        return self.symbol()


class Program:
    ''' Loaded instruction sequence, always terminated by a single halt '''

    instructions: list[Instruction]

    def __init__(self, instructions: Sequence[Instruction]):
        assert instructions and instructions[-1].op == ops.HLT
        assert all(i.target is not None for i in instructions if i.is_jump())
        self.instructions = list(instructions)

    @property
    def halt_index(self) -> int:
        return len(self.instructions) - 1

    def listing(self) -> str:
        return ''.join(i.symbol() for i in self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)
