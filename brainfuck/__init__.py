"""
Implements a Brainfuck machine: eight one-character instructions driving a
pointer over an unbounded tape of 8-bit cells, with bracketed loops and
byte-at-a-time I/O.

Running a program should be as simple as:
    >>> import brainfuck
    >>> brainfuck.execute(brainfuck.HELLO_WORLD)
    Hello World!
    'ok'

Where the return value is :data:`SUCCESS`, or else the error that stopped the
program (see :mod:`brainfuck.errors`). Programs with mismatched brackets are
refused before a single instruction runs.

A machine may also be kept around and given programs one at a time, the way
the REPL does it, with the tape surviving from one to the next:
    >>> m = brainfuck.Machine(channel=brainfuck.BufferChannel())
    >>> m.eval('++++++++[>++++++++<-]>+.')
    'A ok'
    >>> m.eval('+.')
    'B ok'

Cells wrap modulo 256; the tape extends both ways from cell 0; reading past
the end of the input stores 0 unless another policy is asked for (see
:data:`EOF_POLICIES`).
"""
from brainfuck.channel import *
from brainfuck.errors import *
from brainfuck.jumps import *
from brainfuck.machine import *
from brainfuck.parser import *
