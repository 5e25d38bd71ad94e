CELL_BITS = 8
CELL_MODULUS = 1 << CELL_BITS
CELL_MAX = CELL_MODULUS - 1

INITIAL_TAPE_SIZE = 1

# Console defaults
DEFAULT_COLOR = None
DEFAULT_PROMPT = ''
DEFAULT_MAX_STEPS = None

CURRENT_OP_BG = 'cyan'
CURRENT_CELL_BG = 'red'
WARNING_FG = 'red'

CONFIG_TABLE = 'debugger'
