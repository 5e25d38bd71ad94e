# type: ignore
''' Debugger command line grammar '''

from dataclasses import dataclass, field
from typing import Tuple

import pyparsing as pp

from bfdbg.common.conf import CELL_MAX


STEP = 'step'
WATCH = 'watch'
RUN = 'run'
QUIT = 'quit'

WATCH_USAGE = 'usage: watch [memory index] [value]'


@dataclass
class Command:
    verb: str
    args: Tuple[int, ...] = field(default_factory=tuple)


class CommandError(Exception):
    pass


class UsageHint(CommandError):
    pass


def g_command(expr, verb):
    return expr.set_parse_action(lambda r: Command(verb, tuple(r[1:])))


count = pp.Word(pp.nums).set_parse_action(lambda r: int(r[0]))
byte = pp.Word(pp.nums) \
    .set_parse_action(lambda r: int(r[0])) \
    .add_condition(lambda r: r[0] <= CELL_MAX)

step_cmd = g_command(pp.Keyword('step') + pp.Optional(count), STEP)
watch_cmd = g_command(pp.Keyword('watch') + count + byte, WATCH)
run_cmd = g_command(pp.Keyword('run'), RUN)
quit_cmd = g_command(pp.one_of('q quit exit', as_keyword=True), QUIT)

command = step_cmd | watch_cmd | run_cmd | quit_cmd


def diagnose(words: list[str]) -> CommandError:
    verb = words[0]

    if verb == 'watch' and len(words) < 3:
        return UsageHint(WATCH_USAGE)

    if verb == 'watch' and len(words) == 3:
        return CommandError('index and value must be valid usize and u8 integers')

    if verb == 'step' and len(words) == 2:
        return CommandError('step count must be a valid usize integer')

    return CommandError('unrecognised command')


def parse_command(line: str) -> Command:
    ''' An empty line is a single step '''

    words = line.split()

    if not words:
        return Command(STEP)

    try:
        return command.parse_string(line, parse_all=True)[0]
    except pp.ParseException:
        raise diagnose(words) from None
