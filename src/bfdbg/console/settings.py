from pathlib import Path
import logging as lg
import tomllib

import bfdbg.common.conf as conf


class Settings:
    color: bool | None  # None follows the terminal
    prompt: str
    max_steps: int | None

    def __init__(self):
        self.color = conf.DEFAULT_COLOR
        self.prompt = conf.DEFAULT_PROMPT
        self.max_steps = conf.DEFAULT_MAX_STEPS

    def update(
        self,
        color: bool | None = None,
        prompt: str | None = None,
        max_steps: int | None = None
    ):
        if color is not None:
            self.color = color

        if prompt is not None:
            self.prompt = prompt

        if max_steps is not None:
            if max_steps < 0:
                raise UserWarning(f'max_steps must not be negative, got {max_steps}')

            self.max_steps = max_steps

        return self


def expect_type(table: dict, name: str, expected: type):
    value = table.get(name)

    # TOML booleans are ints to Python
    if value is not None and (
        not isinstance(value, expected)
        or (expected is int and isinstance(value, bool))
    ):
        raise UserWarning(f'Setting {name} must be {expected.__name__}, got {value!r}')

    return value


def load_settings(config_path: Path) -> Settings:
    lg.debug(f'Reading settings from {config_path}')
    config = tomllib.loads(config_path.read_text())
    table = config.get(conf.CONFIG_TABLE, {})

    if not isinstance(table, dict):
        raise UserWarning(f'[{conf.CONFIG_TABLE}] must be a table')

    unknown = set(table) - {'color', 'prompt', 'max_steps'}

    if unknown:
        raise UserWarning(f'Unknown settings: {", ".join(sorted(unknown))}')

    return Settings().update(
        color=expect_type(table, 'color', bool),
        prompt=expect_type(table, 'prompt', str),
        max_steps=expect_type(table, 'max_steps', int)
    )
