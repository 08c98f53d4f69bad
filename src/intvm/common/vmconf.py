# Instruction word layout
OPCODE_BASE = 100       # opcode = word mod OPCODE_BASE
MODE_BASE = 10          # one decimal digit per operand mode

# Program text
PROGRAM_SEPARATOR = ','

# Boot parameters
NOUN_ADDR = 1
VERB_ADDR = 2
RESULT_ADDR = 0
ALARM_NOUN = 12
ALARM_VERB = 2

# Arcade cabinet
FREE_PLAY_ADDR = 0
FREE_PLAY_QUARTERS = 2
