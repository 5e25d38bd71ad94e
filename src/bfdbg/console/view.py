from typing import List

import click

import bfdbg.common.conf as conf
from bfdbg.runtime.engine import Engine


def program_line(engine: Engine) -> str:
    return ''.join(
        click.style(i.symbol(), bg=conf.CURRENT_OP_BG) if index == engine.pc else i.symbol()
        for index, i in enumerate(engine.program)
    )


def tape_row(label: str, values: List[int], current: int) -> str:
    cells = [
        click.style(f'{v:3}', bg=conf.CURRENT_CELL_BG) if index == current else f'{v:3}'
        for index, v in enumerate(values)
    ]

    return f'{label}: ' + ' '.join(cells) + ' '


def render(engine: Engine) -> str:
    tape = engine.tape

    lines = [
        program_line(engine),
        f'source: {engine.current.location()}',
        tape_row('mem', list(tape), engine.ptr),
        tape_row('ind', list(range(len(tape))), engine.ptr),
        f'{engine.state}. steps: {engine.steps}',
        f'output: {engine.output_bytes.decode("utf-8", errors="replace")}',
    ]

    if engine.watches:
        watched = ', '.join(f'M[{w.index}]={w.value}' for w in engine.watches)
        lines.append(f'watches: {watched}')

    return '\n'.join(lines)


def warning(message: str) -> str:
    return click.style(message, fg=conf.WARNING_FG)
