''' Boot parameter ("1202 program alarm") handling '''

import logging as lg

from intvm.common.vmconf import NOUN_ADDR, VERB_ADDR, RESULT_ADDR, ALARM_NOUN, ALARM_VERB
from intvm.runtime.cpu import Engine


def set_boot_parameters(engine: Engine, noun: int, verb: int):
    engine.poke(NOUN_ADDR, noun)
    engine.poke(VERB_ADDR, verb)


def restore_alarm_state(engine: Engine):
    set_boot_parameters(engine, ALARM_NOUN, ALARM_VERB)


def run_with_boot(engine: Engine, noun: int, verb: int) -> int:
    branch = engine.clone()
    set_boot_parameters(branch, noun, verb)
    branch.run()
    return branch.peek_memory(RESULT_ADDR)


def find_boot_parameters(engine: Engine, target: int, limit: int = 100) -> int | None:
    template = engine.clone()
    template.reset()

    for noun in range(limit):
        for verb in range(limit):
            if run_with_boot(template, noun, verb) == target:
                lg.debug(f'Boot parameters found: noun {noun}, verb {verb}')
                return 100 * noun + verb

    lg.debug(f'No boot parameters produce {target}')
    return None
