import sys
from pathlib import Path
import logging as lg

import click

import bfdbg.loader.loader as loader
from bfdbg.console.files import ReadError, read_source, read_input
from bfdbg.loader.program import Program
from bfdbg.runtime.engine import Engine, RunState


EXIT_HALT = 0
EXIT_LOAD_ERROR = 1
EXIT_UNDERFLOW = 2
EXIT_KEYBOARD = 3
EXIT_STEP_LIMIT = 4


def remaining(engine: Engine, max_steps: int | None) -> int | None:
    if max_steps is None:
        return None

    return max(max_steps - engine.steps, 0)


def execute(program: Program, input: bytes = b'', max_steps: int | None = None) -> Engine:
    ''' Runs a program to its end, passing over breakpoints '''

    engine = Engine(program, input)

    while True:
        engine.run_to_halt(remaining(engine, max_steps))

        if engine.state != RunState.BREAKPOINT_HIT:
            break

        lg.info(f'Passing breakpoint at {engine.program[engine.pc - 1].location()}')
        engine.resume()

    engine.debug_dump()
    return engine


def exit_code(engine: Engine) -> int:
    match engine.state:
        case RunState.PROGRAM_ENDED:
            return EXIT_HALT
        case RunState.TAPE_UNDERFLOW:
            return EXIT_UNDERFLOW
        case _:
            return EXIT_STEP_LIMIT


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--max-steps', type=click.IntRange(min=0), help='Stop after this many steps')
@click.argument('source_filename', type=Path)
@click.argument('input_filename', type=Path, required=False)
def run(
    verbose: bool,
    max_steps: int | None,
    source_filename: Path,
    input_filename: Path | None
):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)

    try:
        program = loader.load(read_source(source_filename))
        input_data = read_input(input_filename)

    except ReadError as e:
        click.echo(f'Error reading file: {e}')
        sys.exit(EXIT_LOAD_ERROR)

    except loader.LoadError as e:
        click.echo(f'Parser error: {e}')
        sys.exit(EXIT_LOAD_ERROR)

    try:
        engine = execute(program, input_data, max_steps)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    click.echo(engine.output_bytes, nl=False)

    if engine.state == RunState.TAPE_UNDERFLOW:
        lg.info(f'Tape underflow at {engine.program[engine.pc - 1].location()}')

    sys.exit(exit_code(engine))


if __name__ == '__main__':
    run()
