from enum import Enum, IntEnum


class Op(IntEnum):
    ADD = 1                     # R1 + R2 -> W3
    MULTIPLY = 2                # R1 * R2 -> W3
    INPUT = 3                   # in -> W1
    OUTPUT = 4                  # R1 -> out
    JUMP_IF_TRUE = 5            # if R1 .ne 0 goto R2
    JUMP_IF_FALSE = 6           # if R1 .eq 0 goto R2
    LESS_THAN = 7               # R1 .lt R2 -> W3
    EQUALS = 8                  # R1 .eq R2 -> W3
    ADJUST_RELATIVE_BASE = 9    # RB + R1 -> RB
    EXIT = 99


class Mode(IntEnum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2


class Access(Enum):
    READ = 'r'
    WRITE = 'w'


R = Access.READ
W = Access.WRITE

OPERANDS: dict[Op, tuple[Access, ...]] = {
    Op.ADD: (R, R, W),
    Op.MULTIPLY: (R, R, W),
    Op.INPUT: (W,),
    Op.OUTPUT: (R,),
    Op.JUMP_IF_TRUE: (R, R),
    Op.JUMP_IF_FALSE: (R, R),
    Op.LESS_THAN: (R, R, W),
    Op.EQUALS: (R, R, W),
    Op.ADJUST_RELATIVE_BASE: (R,),
    Op.EXIT: (),
}

MNEMONICS: dict[Op, str] = {
    Op.ADD: 'ADD',
    Op.MULTIPLY: 'MUL',
    Op.INPUT: 'STORE',
    Op.OUTPUT: 'SHOW',
    Op.JUMP_IF_TRUE: 'JMPT',
    Op.JUMP_IF_FALSE: 'JMPF',
    Op.LESS_THAN: 'LT',
    Op.EQUALS: 'EQ',
    Op.ADJUST_RELATIVE_BASE: 'ARB',
    Op.EXIT: 'EXIT',
}


def width(op: Op) -> int:
    return len(OPERANDS[op]) + 1
