# type: ignore
''' Program grammar, applied to one source line at a time '''

import pyparsing as pp

import bfdbg.common.ops as ops
from bfdbg.loader.scanner import Scanner


def g_cmd(symbol, op):
    return pp.Literal(symbol).set_parse_action(
        lambda loc, _: (Scanner.issue_op, (op, loc))
    )


def g_bracket(symbol, action):
    return pp.Literal(symbol).set_parse_action(
        lambda loc, _: (action, loc)
    )


inc_cmd = g_cmd('+', ops.INC)
dec_cmd = g_cmd('-', ops.DEC)
rgt_cmd = g_cmd('>', ops.RGT)
lft_cmd = g_cmd('<', ops.LFT)
rdb_cmd = g_cmd(',', ops.RDB)
wrb_cmd = g_cmd('.', ops.WRB)
brk_cmd = g_cmd('!', ops.BRK)

loop_begin = g_bracket('[', Scanner.open_loop)
loop_end = g_bracket(']', Scanner.close_loop)

# Anything else is commentary, locations are columns within the line
inert = pp.Suppress(pp.CharsNotIn(''.join(ops.SYMBOLS)))

bf_cmd = inc_cmd \
    | dec_cmd \
    | rgt_cmd \
    | lft_cmd \
    | rdb_cmd \
    | wrb_cmd \
    | loop_begin \
    | loop_end \
    | brk_cmd

program = pp.ZeroOrMore(bf_cmd | inert).parse_with_tabs()
