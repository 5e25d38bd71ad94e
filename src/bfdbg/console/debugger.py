import sys
from pathlib import Path
import logging as lg

import click

import bfdbg.loader.loader as loader
import bfdbg.console.commands as cmds
import bfdbg.console.view as view
from bfdbg.console.files import ReadError, read_source, read_input
from bfdbg.console.settings import Settings, load_settings
from bfdbg.runtime.engine import Engine


EXIT_QUIT = 0
EXIT_LOAD_ERROR = 1
EXIT_KEYBOARD = 3

USAGE = 'usage: bfdbg source_file input_file'


def dispatch(engine: Engine, command: cmds.Command, settings: Settings) -> bool:
    ''' Applies one command, returns False when the session is over '''

    match command.verb:
        case cmds.STEP if command.args:
            engine.step_n(command.args[0])
        case cmds.STEP:
            engine.step_once()
        case cmds.WATCH:
            (index, value) = command.args
            engine.add_watch(index, value)
        case cmds.RUN:
            engine.run_to_halt(settings.max_steps)
        case cmds.QUIT:
            return False

    return True


def session(engine: Engine, settings: Settings):
    while True:
        click.echo(view.render(engine), color=settings.color)

        if settings.prompt:
            click.echo(settings.prompt, nl=False)

        line = sys.stdin.readline()

        if not line:
            lg.debug('End of input')
            return

        try:
            command = cmds.parse_command(line)
        except cmds.UsageHint as e:
            click.echo(str(e))
            continue
        except cmds.CommandError as e:
            click.echo(view.warning(str(e)), color=settings.color)
            continue

        if not dispatch(engine, command, settings):
            return


def make_settings(config: Path | None, color: bool | None, max_steps: int | None):
    settings = load_settings(config) if config is not None else Settings()
    return settings.update(color=color, max_steps=max_steps)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-c', '--config', type=Path, help='TOML file with a [debugger] table')
@click.option('--color/--no-color', default=None, help='Force or disable colours')
@click.option('--max-steps', type=click.IntRange(min=0), help='Step bound for run')
@click.argument('source_filename', type=Path, required=False)
@click.argument('input_filename', type=Path, required=False)
def debug(
    verbose: bool,
    config: Path | None,
    color: bool | None,
    max_steps: int | None,
    source_filename: Path | None,
    input_filename: Path | None
):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)

    if source_filename is None:
        click.echo(USAGE)
        sys.exit(EXIT_QUIT)

    lg.info('BF DEBUGGER')

    try:
        settings = make_settings(config, color, max_steps)
        source = read_source(source_filename)
        input_data = read_input(input_filename)
        program = loader.load(source)

    except ReadError as e:
        click.echo(f'Error reading file: {e}')
        sys.exit(EXIT_LOAD_ERROR)

    except loader.LoadError as e:
        click.echo(f'Parser error: {e}')
        sys.exit(EXIT_LOAD_ERROR)

    except (OSError, UserWarning, ValueError) as e:
        click.echo(f'Configuration error: {e}')
        sys.exit(EXIT_LOAD_ERROR)

    engine = Engine(program, input_data)

    try:
        session(engine, settings)

    except KeyboardInterrupt:
        lg.info('Session halted by the user')
        sys.exit(EXIT_KEYBOARD)

    sys.exit(EXIT_QUIT)


if __name__ == '__main__':
    debug()
