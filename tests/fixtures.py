# type: ignore
import pytest
from click.testing import CliRunner

import unit_utils


@pytest.fixture
def cli_runner():
    yield CliRunner()


@pytest.fixture
def hello_path():
    yield unit_utils.find_file('testdata/hello.bf')


@pytest.fixture
def source_file(tmp_path):
    def write(source: str, name: str = 'program.bf'):
        path = tmp_path / name
        path.write_text(source)
        return str(path)

    yield write
