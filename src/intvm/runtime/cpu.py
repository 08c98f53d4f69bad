import copy
import logging as lg
from collections import deque
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

from intvm.common.ops import Op
from intvm.common.vmconf import PROGRAM_SEPARATOR
from intvm.runtime.decoder import Instruction, Operand, decode
from intvm.runtime.memory import Memory
from intvm.runtime.program import parse_program, load_program
import intvm.runtime.resolver as resolver


class State(Enum):
    NEXT = 'next'   # Instruction completed, more to run
    WAIT = 'wait'   # Blocked on input, same instruction is retried
    EXIT = 'exit'


HALTED = Instruction(Op.EXIT)


class Engine():
    initial: tuple[int, ...]    # Snapshot for reset
    memory: Memory
    cursor: int                 # Instruction pointer
    relative_base: int
    inputs: deque[int]
    outputs: deque[int]
    state: State
    trace: bool

    def __init__(self, text: str, trace: bool = False):
        self.initial = tuple(parse_program(text))
        self.trace = trace
        self.reset()

    @classmethod
    def from_file(cls, filepath: str | Path, trace: bool = False) -> 'Engine':
        return cls(load_program(filepath), trace=trace)

    # - Lifecycle - #

    def reset(self):
        self.memory = Memory(self.initial)
        self.cursor = 0
        self.relative_base = 0
        self.inputs = deque()
        self.outputs = deque()
        self.state = State.NEXT

    def clone(self) -> 'Engine':
        other = copy.copy(self)
        other.memory = self.memory.copy()
        other.inputs = deque(self.inputs)
        other.outputs = deque(self.outputs)
        return other

    def poke(self, addr: int, value: int):
        self.memory.write(addr, value)

    # - I/O - #

    def push_input(self, value: int):
        self.inputs.append(value)

    def extend_input(self, values: Iterable[int]):
        self.inputs.extend(values)

    def pop_output(self) -> int | None:
        if not self.outputs:
            return None

        return self.outputs.popleft()

    def drain_output(self) -> list[int]:
        values = list(self.outputs)
        self.outputs.clear()
        return values

    # - Observation - #

    def peek_memory(self, addr: int) -> int:
        return self.memory.read(addr)

    def dump_memory(self) -> str:
        return self.memory.dump()

    def dump_output(self) -> str:
        return PROGRAM_SEPARATOR.join(str(v) for v in self.outputs)

    def debug_dump(self):
        lg.debug(
            f'CURSOR:{self.cursor} RB:{self.relative_base} STATE:{self.state.value} '
            f'IN:{list(self.inputs)} OUT:{list(self.outputs)} MEM:{len(self.memory)}'
        )

    # - Helpers - #

    def read(self, operand: Operand) -> int:
        return resolver.read_value(self.memory, operand, self.relative_base)

    def store(self, operand: Operand, value: int):
        self.memory.write(resolver.write_address(operand, self.relative_base), value)

    def advance(self, instruction: Instruction) -> State:
        self.cursor += instruction.width
        return State.NEXT

    def arithm_pair(self, instruction: Instruction, op: Callable[[int, int], int]) -> State:
        a, b, dest = instruction.operands
        self.store(dest, op(self.read(a), self.read(b)))
        return self.advance(instruction)

    def jump_if(self, instruction: Instruction, cond: Callable[[int], bool]) -> State:
        test, target = instruction.operands

        if cond(self.read(test)):
            self.cursor = self.read(target)
            return State.NEXT

        return self.advance(instruction)

    # - Operations - #

    def add(self, instruction: Instruction) -> State:
        return self.arithm_pair(instruction, lambda a, b: a + b)

    def multiply(self, instruction: Instruction) -> State:
        return self.arithm_pair(instruction, lambda a, b: a * b)

    def less_than(self, instruction: Instruction) -> State:
        return self.arithm_pair(instruction, lambda a, b: 1 if a < b else 0)

    def equals(self, instruction: Instruction) -> State:
        return self.arithm_pair(instruction, lambda a, b: 1 if a == b else 0)

    def input(self, instruction: Instruction) -> State:
        if not self.inputs:
            lg.debug(f'Waiting for input at {self.cursor}')
            return State.WAIT

        (dest,) = instruction.operands
        addr = resolver.write_address(dest, self.relative_base)
        self.memory.write(addr, self.inputs.popleft())
        return self.advance(instruction)

    def output(self, instruction: Instruction) -> State:
        (source,) = instruction.operands
        self.outputs.append(self.read(source))
        return self.advance(instruction)

    def jump_if_true(self, instruction: Instruction) -> State:
        return self.jump_if(instruction, lambda v: v != 0)

    def jump_if_false(self, instruction: Instruction) -> State:
        return self.jump_if(instruction, lambda v: v == 0)

    def adjust_relative_base(self, instruction: Instruction) -> State:
        (offset,) = instruction.operands
        self.relative_base += self.read(offset)
        return self.advance(instruction)

    def exit(self, instruction: Instruction) -> State:
        return State.EXIT

    HANDLERS = {
        Op.ADD: add,
        Op.MULTIPLY: multiply,
        Op.INPUT: input,
        Op.OUTPUT: output,
        Op.JUMP_IF_TRUE: jump_if_true,
        Op.JUMP_IF_FALSE: jump_if_false,
        Op.LESS_THAN: less_than,
        Op.EQUALS: equals,
        Op.ADJUST_RELATIVE_BASE: adjust_relative_base,
        Op.EXIT: exit,
    }

    # -- Implementation -- #

    def step(self) -> tuple[Instruction, State]:
        # Nothing runs after exit until reset, whatever memory now holds
        if self.state == State.EXIT:
            return HALTED, State.EXIT

        instruction = decode(self.memory, self.cursor)

        if self.trace:
            lg.info(f'{self.cursor}: {instruction.dump()}')

        handler = self.HANDLERS[instruction.op]
        self.state = handler(self, instruction)
        return instruction, self.state

    def run(self) -> State:
        while True:
            _, state = self.step()

            if state != State.NEXT:
                return state
