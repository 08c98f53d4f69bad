from pathlib import Path
import logging as lg
import tomllib


class RunSettings:
    verbose: bool
    trace: bool
    dump_memory: bool
    inputs: list[int]
    pokes: dict[int, int]

    def __init__(self):
        self.verbose = False
        self.trace = False
        self.dump_memory = False
        self.inputs = []
        self.pokes = {}

    def update(
        self,
        verbose: bool | None = None,
        trace: bool | None = None,
        dump_memory: bool | None = None,
        inputs: list[int] | None = None,
        pokes: dict[int, int] | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if trace is not None:
            self.trace = trace

        if dump_memory is not None:
            self.dump_memory = dump_memory

        if inputs is not None:
            self.inputs.extend(inputs)

        if pokes is not None:
            self.pokes.update(pokes)

        return self

    def load_profile(self, filepath: Path):
        ''' Apply a TOML run profile; only the [run] table is consulted '''

        lg.debug(f'Loading run profile {filepath}')
        config = tomllib.loads(filepath.read_text())
        run = config.get('run', {})

        pokes = {int(addr): int(value) for addr, value in run.get('poke', {}).items()}

        return self.update(
            trace=run.get('trace'),
            dump_memory=run.get('dump_memory'),
            inputs=[int(v) for v in run.get('inputs', [])],
            pokes=pokes
        )


def parse_poke(text: str) -> tuple[int, int]:
    addr, sep, value = text.partition('=')

    if not sep:
        raise UserWarning(f'Poke {text} is not in ADDR=VALUE form')

    return int(addr), int(value)
