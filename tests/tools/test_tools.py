import logging

from click.testing import CliRunner

from intvm.tools.disasm import disassemble, disasm
import intvm.tools.solve as solve

import unit_utils


def test_disassemble():
    assert disassemble('1001,8,10,8,104,50,99') == [
        '0: ADD 8, [10], 8',
        '4: SHOW [50]',
        '6: EXIT',
    ]


def test_disassemble_data_words():
    assert disassemble('1105,1,4,42,204,-1,99,-5') == [
        '0: JMPT [1], [4]',
        '3: DATA 42',
        '4: SHOW rb-1',
        '6: EXIT',
        '7: DATA -5',
    ]


def test_disassemble_start():
    assert disassemble(unit_utils.load_program('quine'), start=12)[0] == '12: JMPF 101, [0]'


def test_disasm_cli(tmp_path):
    program = tmp_path / 'prog.txt'
    program.write_text('3,0,4,0,99\n')

    result = CliRunner().invoke(disasm, [str(program)])

    assert result.exit_code == 0
    assert '0: STORE 0' in result.output.splitlines()
    assert '4: EXIT' in result.output.splitlines()


def invoke(tmp_path, text: str, *args: str):
    program = tmp_path / 'prog.txt'
    program.write_text(text)
    return CliRunner().invoke(solve.solve, [*args, str(program)])


def test_solve_alarm(tmp_path):
    result = invoke(tmp_path, '1,0,0,0,99', 'alarm', '--target', '198')
    assert result.exit_code == solve.EXIT_OK
    assert '404' in result.output.splitlines()

    result = invoke(tmp_path, '1,0,0,0,99', 'alarm', '--target', '5000')
    assert result.exit_code == solve.EXIT_NOT_FOUND


def test_solve_amplifiers(tmp_path):
    result = invoke(tmp_path, '3,15,3,16,1002,16,10,16,1,16,15,15,4,15,99,0,0', 'amplifiers')
    assert result.exit_code == solve.EXIT_OK
    assert '43210' in result.output.splitlines()

    result = invoke(tmp_path, unit_utils.load_program('feedback'), 'amplifiers', '--feedback')
    assert '139629729' in result.output.splitlines()


def test_solve_robot(tmp_path):
    result = invoke(tmp_path, '3,100,104,1,104,0,99', 'robot')
    assert result.exit_code == solve.EXIT_OK
    assert '1' in result.output.splitlines()


def test_solve_trace(tmp_path, caplog):
    with caplog.at_level(logging.INFO):
        result = invoke(tmp_path, '3,100,104,1,104,0,99', '-t', 'robot')

    assert result.exit_code == solve.EXIT_OK
    messages = [r.getMessage() for r in caplog.records]
    assert '2: SHOW [1]' in messages
    assert '6: EXIT' in messages


def test_solve_arcade(tmp_path):
    result = invoke(tmp_path, '104,0,104,0,104,2,104,1,104,0,104,2,99', 'arcade')
    assert result.exit_code == solve.EXIT_OK
    assert '2' in result.output.splitlines()


def test_solve_maze_not_found(tmp_path):
    result = invoke(tmp_path, '3,100,104,0,1105,1,0', 'maze')
    assert result.exit_code == solve.EXIT_NOT_FOUND


def test_solve_vm_failure(tmp_path):
    result = invoke(tmp_path, '3,100,55,99', 'robot')
    assert result.exit_code == solve.EXIT_VM_ERROR
