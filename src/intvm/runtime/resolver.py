from intvm.common.errors import DecodeError
from intvm.common.ops import Mode
from intvm.runtime.decoder import Operand
from intvm.runtime.memory import Memory


def read_value(memory: Memory, operand: Operand, relative_base: int) -> int:
    if operand.mode == Mode.IMMEDIATE:
        return operand.value

    if operand.mode == Mode.RELATIVE:
        return memory.read(relative_base + operand.value)

    return memory.read(operand.value)


def write_address(operand: Operand, relative_base: int) -> int:
    if operand.mode == Mode.RELATIVE:
        return relative_base + operand.value

    if operand.mode == Mode.POSITION:
        return operand.value

    raise DecodeError(f'Operand {operand.dump()} is not a legal destination')
