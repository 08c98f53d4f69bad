from intvm.common.errors import EmptyOutputRead
from intvm.runtime.cpu import Engine


def take_output(engine: Engine) -> int:
    value = engine.pop_output()

    if value is None:
        raise EmptyOutputRead(f'No output available at {engine.cursor}')

    return value


def take_outputs(engine: Engine, count: int) -> list[int]:
    return [take_output(engine) for _ in range(count)]


def sign(value: int) -> int:
    return (value > 0) - (value < 0)
