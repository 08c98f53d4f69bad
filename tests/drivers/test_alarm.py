import intvm.drivers.alarm as alarm
import intvm.runtime.cpu as cpu


def test_restore_alarm_state():
    engine = cpu.Engine('1,0,0,0,99,0,0,0,0,0,0,0,40')
    alarm.restore_alarm_state(engine)
    engine.run()
    # mem[12] + mem[2] = 40 + 2
    assert engine.peek_memory(0) == 42


def test_run_with_boot_uses_a_branch():
    engine = cpu.Engine('1,0,0,0,99')
    assert alarm.run_with_boot(engine, 4, 4) == 198
    assert engine.dump_memory() == '1,0,0,0,99'


def test_find_boot_parameters():
    engine = cpu.Engine('1,0,0,0,99')
    assert alarm.find_boot_parameters(engine, 198) == 404
    assert alarm.find_boot_parameters(engine, 12345) is None
