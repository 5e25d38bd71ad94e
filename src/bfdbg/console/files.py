from pathlib import Path
import logging as lg


class ReadError(Exception):
    pass


def read_source(path: Path) -> str:
    lg.debug(f'Reading source {path}')

    try:
        # Only \n separates lines
        return path.read_bytes().decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(e) from e


def read_input(path: Path | None) -> bytes:
    if path is None:
        return b''

    lg.debug(f'Reading input {path}')

    try:
        return path.read_bytes()
    except OSError as e:
        raise ReadError(e) from e
