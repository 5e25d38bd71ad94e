import time

import pytest

import bfdbg.common.ops as ops
import bfdbg.loader.loader as loader

import unit_utils


def ops_of(program):
    return [i.op for i in program]


def test_symbols():
    program = loader.load('+-><,.[]!')

    assert ops_of(program) == [
        ops.INC, ops.DEC, ops.RGT, ops.LFT, ops.RDB, ops.WRB,
        ops.LBG, ops.LND, ops.BRK, ops.HLT
    ]


def test_empty_source():
    program = loader.load('')

    assert len(program) == 1
    assert program[0].op == ops.HLT
    assert (program[0].line, program[0].column) == (0, 0)


def test_inert_characters():
    program = loader.load('add one: + and print it .\n')

    assert ops_of(program) == [ops.INC, ops.WRB, ops.HLT]


def test_nested_targets():
    program = loader.load('[[]+[]]')

    assert program[0].target == 6
    assert program[6].target == 0
    assert program[1].target == 2
    assert program[2].target == 1
    assert program[4].target == 5
    assert program[5].target == 4
    assert program[program.halt_index].op == ops.HLT


def test_targets_are_mutual():
    program = loader.load(unit_utils.load_file('testdata/hello.bf'))

    for index, instruction in enumerate(program):
        if instruction.is_jump():
            assert program[instruction.target].target == index
            assert program[instruction.target].op != instruction.op

    assert [i.op for i in program].count(ops.HLT) == 1
    assert program[-1].op == ops.HLT


def test_locations():
    program = loader.load('a+\n  [\n]')

    assert [(i.line, i.column) for i in program] == [(1, 1), (2, 2), (3, 0), (0, 0)]


def test_tabs_count_as_one_column():
    program = loader.load('\t\t-')

    assert program[0].column == 2


def test_listing():
    assert loader.load('x + [ - ] y').listing() == '+[-] '


def test_unmatched_close():
    with pytest.raises(loader.UnmatchedCloseBracket) as e:
        loader.load('+\n ]')

    assert (e.value.line, e.value.column) == (2, 1)
    assert str(e.value) == 'no opening bracket for closing bracket at 2:1'


def test_unmatched_close_after_balanced_pair():
    with pytest.raises(loader.UnmatchedCloseBracket) as e:
        loader.load('+\n []]')

    assert (e.value.line, e.value.column) == (2, 3)


def test_unmatched_close_first_line():
    with pytest.raises(loader.UnmatchedCloseBracket) as e:
        loader.load('+]')

    assert (e.value.line, e.value.column) == (1, 1)


def test_unmatched_open_names_outermost():
    with pytest.raises(loader.UnmatchedOpenBracket) as e:
        loader.load('[]\n[ [\n')

    assert (e.value.line, e.value.column) == (2, 0)
    assert str(e.value) == 'no matching closing bracket for open bracket at 2:0'


def test_unmatched_open_from_file():
    with pytest.raises(loader.LoadError) as e:
        loader.load(unit_utils.load_file('testdata/unmatched.bf'))

    assert isinstance(e.value, loader.UnmatchedOpenBracket)
    assert (e.value.line, e.value.column) == (1, 0)


def test_carriage_return_does_not_start_a_line():
    program = loader.load('+\r+\r\n-')

    assert [(i.line, i.column) for i in program] == [(1, 0), (1, 2), (2, 0), (0, 0)]


def test_large_single_line_loads_quickly():
    source = ('+' * 50 + '[-]>') * 2000 + '.'

    start = time.perf_counter()
    program = loader.load(source)
    elapsed = time.perf_counter() - start

    assert len(source) > 100000
    assert len(program) == len(source) + 1
    assert program[50].target == 52
    assert program[52].target == 50
    assert program[-2].column == len(source) - 1
    assert elapsed < 20
