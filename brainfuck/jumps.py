import logging

from brainfuck.errors import UnmatchedLoopClose, UnmatchedLoopOpen
from brainfuck.parser import LOOP_CLOSE, LOOP_OPEN

log = logging.getLogger(__name__)


def build_jump_table(instructions):
    """
    Pairs every LOOP_OPEN with its LOOP_CLOSE, returning a dict that maps each
    bracket's index to its partner's index (both directions are recorded).

    A ] always binds to the most recent [ that is still open. A ] with nothing
    open raises :exc:`UnmatchedLoopClose`; any [ left open at the end raises
    :exc:`UnmatchedLoopOpen` for the outermost one.
    """
    jumps = {}
    open_loops = []

    for index, instruction in enumerate(instructions):
        if instruction == LOOP_OPEN:
            open_loops.append(index)
        elif instruction == LOOP_CLOSE:
            if not open_loops:
                raise UnmatchedLoopClose(index)
            opened = open_loops.pop()
            jumps[opened] = index
            jumps[index] = opened

    if open_loops:
        raise UnmatchedLoopOpen(open_loops[0])

    log.debug('matched %d loops', len(jumps) // 2)
    return jumps
