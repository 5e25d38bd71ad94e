# Primitive
INC = 0x01  # M[P] + 1 -> M[P]
DEC = 0x02  # M[P] - 1 -> M[P]
RGT = 0x03  # P + 1 -> P
LFT = 0x04  # P - 1 -> P
RDB = 0x05  # IN[C++] -> M[P]
WRB = 0x06  # M[P] -> OUT
LBG = 0x07  # if M[P] .eq 0 jmp T
LND = 0x08  # if M[P] .ne 0 jmp T

# Extensions
BRK = 0xF0  # stop on breakpoint
HLT = 0xFF  # end of program, appended by the loader

SYMBOLS = {
    '+': INC,
    '-': DEC,
    '>': RGT,
    '<': LFT,
    ',': RDB,
    '.': WRB,
    '[': LBG,
    ']': LND,
    '!': BRK,
}

LISTING = {op: symbol for symbol, op in SYMBOLS.items()}
LISTING[HLT] = ' '

JUMPS = (LBG, LND)
