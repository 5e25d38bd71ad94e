import logging as lg
from dataclasses import dataclass
from enum import Enum
from typing import List

import bfdbg.common.ops as ops
from bfdbg.common.conf import CELL_MODULUS, INITIAL_TAPE_SIZE
from bfdbg.loader.program import Instruction, Program


class RunState(Enum):
    RUNNING = 'Running'
    TAPE_UNDERFLOW = 'TapeUnderflow'
    PROGRAM_ENDED = 'ProgramEnded'
    BREAKPOINT_HIT = 'BreakpointHit'
    WATCH_TRIGGERED = 'WatchTriggered'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MemoryWatch:
    index: int
    value: int


Watches = List[MemoryWatch]


class Engine:
    memory: bytearray   # Tape, grows to the right only
    ptr: int            # Tape pointer
    program: Program
    pc: int             # Program counter
    output: bytearray
    input: bytes
    input_ptr: int
    state: RunState
    steps: int          # Dispatched instructions
    watches: Watches
    finished: bool      # Halt has been dispatched

    def __init__(self, program: Program, input: bytes = b''):
        self.memory = bytearray(INITIAL_TAPE_SIZE)
        self.ptr = 0
        self.program = program
        self.pc = 0
        self.output = bytearray()
        self.input = bytes(input)
        self.input_ptr = 0
        self.state = RunState.RUNNING
        self.steps = 0
        self.watches = []
        self.finished = False

    # - Accessors - #

    @property
    def tape(self) -> bytes:
        return bytes(self.memory)

    @property
    def cell(self) -> int:
        return self.memory[self.ptr]

    @property
    def current(self) -> Instruction:
        return self.program[self.pc]

    @property
    def output_bytes(self) -> bytes:
        return bytes(self.output)

    def is_running(self) -> bool:
        return self.state == RunState.RUNNING

    def debug_dump(self):
        lg.debug(
            f'PC:{self.pc} P:{self.ptr} M:{self.cell} '
            f'S:{self.state} N:{self.steps}'
        )

    # - Helpers - #

    def stop(self, state: RunState):
        lg.debug(f'{state} at {self.current.location()} on {self.current} (pc {self.pc})')
        self.state = state

    def set_cell(self, value: int):
        self.memory[self.ptr] = value % CELL_MODULUS

    def check_watches(self):
        for watch in self.watches:
            if watch.index == self.ptr and self.memory[watch.index] == watch.value:
                self.stop(RunState.WATCH_TRIGGERED)

    # - Operations - #
    # Each returns True when it has moved the program counter itself

    def inc(self):
        self.set_cell(self.cell + 1)
        self.check_watches()

    def dec(self):
        self.set_cell(self.cell - 1)
        self.check_watches()

    def rgt(self):
        self.ptr += 1

        if self.ptr == len(self.memory):
            self.memory.append(0)

    def lft(self):
        if self.ptr == 0:
            self.stop(RunState.TAPE_UNDERFLOW)
        else:
            self.ptr -= 1

    def rdb(self):
        if self.input_ptr < len(self.input):
            self.set_cell(self.input[self.input_ptr])
            self.input_ptr += 1
        else:
            self.set_cell(0)

    def wrb(self):
        self.output.append(self.cell)

    def lbg(self):
        if self.cell == 0:
            self.pc = self.current.target
            return True

    def lnd(self):
        if self.cell != 0:
            self.pc = self.current.target
            return True

    def brk(self):
        self.stop(RunState.BREAKPOINT_HIT)

    def hlt(self):
        self.finished = True
        self.stop(RunState.PROGRAM_ENDED)
        # Program counter stays on the halt
        return True

    HANDLERS = {
        ops.INC: inc,
        ops.DEC: dec,
        ops.RGT: rgt,
        ops.LFT: lft,
        ops.RDB: rdb,
        ops.WRB: wrb,
        ops.LBG: lbg,
        ops.LND: lnd,
        ops.BRK: brk,
        ops.HLT: hlt,
    }

    # -- Implementation -- #

    def single_step(self):
        ''' Executes one instruction unless the engine is stopped '''

        if self.finished or self.pc >= len(self.program):
            self.state = RunState.PROGRAM_ENDED

        if not self.is_running():
            return

        handler = self.HANDLERS[self.current.op]
        jumped = handler(self)

        if not jumped:
            self.pc += 1

        self.steps += 1

    def resume(self):
        self.state = RunState.RUNNING

    def step_once(self):
        ''' Explicit single step: resumes from any stop, then steps '''

        self.resume()
        self.single_step()

    def step_n(self, count: int):
        for _ in range(count):
            self.single_step()

            if not self.is_running():
                break

    def run_to_halt(self, max_steps: int | None = None):
        '''
        Steps until the engine stops. With max_steps the run also returns
        after that many steps, leaving the state running.
        '''

        executed = 0

        while self.is_running():
            if max_steps is not None and executed >= max_steps:
                lg.debug(f'Step bound {max_steps} exhausted')
                break

            self.single_step()
            executed += 1

    def add_watch(self, index: int, value: int):
        lg.debug(f'Watching M[{index}] == {value}')
        self.watches.append(MemoryWatch(index, value))
