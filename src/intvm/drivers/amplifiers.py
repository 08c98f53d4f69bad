from itertools import permutations
import logging as lg
from typing import Iterable, Sequence, Callable

from intvm.common.errors import EmptyOutputRead
from intvm.runtime.cpu import Engine, State
from intvm.drivers.common import take_output


PhaseSequence = tuple[int, ...]


def run_phase(engine: Engine, phase: int, signal: int) -> int:
    amp = engine.clone()
    amp.reset()
    amp.extend_input([phase, signal])
    amp.run()
    return take_output(amp)


def run_phase_sequence(engine: Engine, phases: Sequence[int]) -> int:
    signal = 0

    for phase in phases:
        signal = run_phase(engine, phase, signal)

    return signal


def run_feedback_phase_sequence(engine: Engine, phases: Sequence[int]) -> int:
    ''' Amplifiers wired in a ring, the last one feeding the first.

    Each amplifier runs until it blocks or exits; everything it emitted is
    handed to the next one. The loop ends when the last amplifier exits, and
    its final output is the thruster signal.
    '''

    amps = []

    for phase in phases:
        amp = engine.clone()
        amp.reset()
        amp.push_input(phase)
        amps.append(amp)

    if not amps:
        raise UserWarning('Feedback loop needs at least one amplifier')

    signals = [0]
    last = len(amps) - 1

    while True:
        for index, amp in enumerate(amps):
            amp.extend_input(signals)
            state = amp.run()
            signals = amp.drain_output()

            if not signals:
                raise EmptyOutputRead(f'Amplifier {index} produced no signal')

            if index == last and state == State.EXIT:
                return signals[-1]


def find_max(
    engine: Engine,
    phases: Iterable[int],
    runner: Callable[[Engine, Sequence[int]], int]
) -> tuple[int, PhaseSequence]:
    best: tuple[int, PhaseSequence] | None = None

    for sequence in permutations(phases):
        signal = runner(engine, sequence)

        if best is None or signal > best[0]:
            best = (signal, sequence)

    if best is None:
        raise UserWarning('No phases given')

    lg.debug(f'Best phase sequence {best[1]} gives {best[0]}')
    return best


def find_max_thruster_signal(
    engine: Engine, phases: Iterable[int] = range(5)
) -> tuple[int, PhaseSequence]:
    return find_max(engine, phases, run_phase_sequence)


def find_max_feedback_thruster_signal(
    engine: Engine, phases: Iterable[int] = range(5, 10)
) -> tuple[int, PhaseSequence]:
    return find_max(engine, phases, run_feedback_phase_sequence)
