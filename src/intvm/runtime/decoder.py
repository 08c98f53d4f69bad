from dataclasses import dataclass

from intvm.common.errors import DecodeError
from intvm.common.ops import Op, Mode, Access, OPERANDS, MNEMONICS
from intvm.common.vmconf import OPCODE_BASE, MODE_BASE
from intvm.runtime.memory import Memory


@dataclass(frozen=True)
class Operand:
    value: int
    mode: Mode
    access: Access

    def dump(self) -> str:
        if self.mode == Mode.IMMEDIATE:
            return f'[{self.value}]'

        if self.mode == Mode.RELATIVE:
            return f'rb{self.value:+}'

        return str(self.value)


@dataclass(frozen=True)
class Instruction:
    op: Op
    operands: tuple[Operand, ...] = ()

    @property
    def width(self) -> int:
        return len(self.operands) + 1

    def dump(self) -> str:
        mnemonic = MNEMONICS[self.op]

        if not self.operands:
            return mnemonic

        return f'{mnemonic} ' + ', '.join(o.dump() for o in self.operands)

    def __str__(self) -> str:
        return self.dump()


def decode_word(word: int) -> tuple[Op, list[Mode]]:
    ''' Split an instruction word into its opcode and the mode digits present '''

    if word < 0:
        raise DecodeError(f'Negative instruction word {word}')

    code = word % OPCODE_BASE

    try:
        op = Op(code)
    except ValueError:
        raise DecodeError(f'Unsupported opcode {code} in word {word}') from None

    modes: list[Mode] = []
    rest = word // OPCODE_BASE

    while rest > 0:
        digit = rest % MODE_BASE

        try:
            modes.append(Mode(digit))
        except ValueError:
            raise DecodeError(f'Unsupported parameter mode {digit} in word {word}') from None

        rest //= MODE_BASE

    return op, modes


def decode(memory: Memory, cursor: int) -> Instruction:
    try:
        op, modes = decode_word(memory.read(cursor))
    except DecodeError as e:
        raise DecodeError(str(e), cursor) from None

    accesses = OPERANDS[op]
    raw = memory.span(cursor + 1, len(accesses))
    operands: list[Operand] = []

    for i, (value, access) in enumerate(zip(raw, accesses)):
        mode = modes[i] if i < len(modes) else Mode.POSITION

        if access == Access.WRITE and mode == Mode.IMMEDIATE:
            raise DecodeError(f'Immediate mode write operand {i} of {op.name}', cursor)

        operands.append(Operand(value, mode, access))

    return Instruction(op, tuple(operands))
