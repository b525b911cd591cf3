import inspect
import logging

from brainfuck.channel import BufferChannel, Channel
from brainfuck.errors import BrainfuckError, DataPointerOutOfRange, IOFailure
from brainfuck.jumps import build_jump_table
from brainfuck.parser import (DECREMENT, INCREMENT, INPUT, LOOP_CLOSE,
                              LOOP_OPEN, MOVE_LEFT, MOVE_RIGHT, OUTPUT,
                              tokenize)

log = logging.getLogger(__name__)

SUCCESS = 'ok'

CELL_BITS = 8
CELL_MODULUS = 2 ** CELL_BITS

ADDRESS_MIN = -2 ** 63
ADDRESS_MAX = 2 ** 63 - 1

EOF_ZERO = '0'
EOF_MINUS_ONE = '-1'
EOF_UNCHANGED = 'unchanged'
EOF_POLICIES = (EOF_ZERO, EOF_MINUS_ONE, EOF_UNCHANGED)

HELLO_WORLD = ('++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>'
               '+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++.')


def _instruction(kind):
    """
    Creates a decorator that adds a .instruction member to its given func,
    which the :class:`Machine`'s __init__ then picks up as the handler for
    that kind of instruction.
    """
    def decorator(func):
        func.instruction = kind
        return func
    return decorator


class Tape(object):
    """
    The data tape: unbounded in both directions, every cell 0 until written.

    Only cells holding something other than 0 are actually stored, so a
    program may wander as far as it likes without costing memory. Values are
    reduced modulo :data:`CELL_MODULUS` on the way in.
    """
    def __init__(self):
        self.cells = {}

    def __getitem__(self, address):
        return self.cells.get(address, 0)

    def __setitem__(self, address, value):
        value %= CELL_MODULUS
        if value:
            self.cells[address] = value
        else:
            self.cells.pop(address, None)

    def __len__(self):
        return len(self.cells)


def load(text):
    """
    Tokenizes `text` and matches its loops. Bracket errors are raised here,
    so a malformed program never gets as far as a :class:`Machine`.
    """
    instructions = tokenize(text)
    jumps = build_jump_table(instructions)
    log.debug('loaded %d instructions, %d loops',
              len(instructions), len(jumps) // 2)
    return instructions, jumps


class Machine(object):
    """ A Brainfuck machine. It has two tapes and two pointers into them. """
    def __init__(self, instructions=(), jumps=None, channel=None, eof=EOF_ZERO):
        if eof not in EOF_POLICIES:
            raise ValueError('unknown end-of-input policy: %r' % (eof,))

        self.instructions = list(instructions)
        if jumps is None:
            jumps = build_jump_table(self.instructions)
        self.jumps = jumps
        self.channel = channel if channel is not None else Channel.from_stdio()
        self.eof = eof
        self.tape = Tape()
        self.instruction_pointer = 0
        self.data_pointer = 0
        self.steps = 0

        self.operations = {}
        for name, method in inspect.getmembers(self, inspect.ismethod):
            if hasattr(method, 'instruction'):
                self.operations[method.instruction] = method

    @property
    def is_finished(self):
        return self.instruction_pointer >= len(self.instructions)

    @property
    def cell(self):
        return self.tape[self.data_pointer]

    @cell.setter
    def cell(self, value):
        self.tape[self.data_pointer] = value

    def _move(self, offset):
        address = self.data_pointer + offset
        if not ADDRESS_MIN <= address <= ADDRESS_MAX:
            raise DataPointerOutOfRange(self.instruction_pointer, address)
        self.data_pointer = address

    def _flush(self):
        try:
            self.channel.flush()
        except (OSError, ValueError) as e:
            raise IOFailure(self.instruction_pointer, e)

    @_instruction(MOVE_RIGHT)
    def _move_right(self):
        self._move(1)

    @_instruction(MOVE_LEFT)
    def _move_left(self):
        self._move(-1)

    @_instruction(INCREMENT)
    def _increment(self):
        self.cell += 1

    @_instruction(DECREMENT)
    def _decrement(self):
        self.cell -= 1

    @_instruction(OUTPUT)
    def _output(self):
        try:
            self.channel.write_byte(self.cell)
        except (OSError, ValueError) as e:
            raise IOFailure(self.instruction_pointer, e)

    @_instruction(INPUT)
    def _input(self):
        # Anything already written should be visible before we block on a read.
        self._flush()
        try:
            value = self.channel.read_byte()
        except (OSError, ValueError) as e:
            raise IOFailure(self.instruction_pointer, e)

        if value is None:
            if self.eof == EOF_UNCHANGED:
                return
            value = 0 if self.eof == EOF_ZERO else -1
        self.cell = value

    @_instruction(LOOP_OPEN)
    def _loop_open(self):
        if not self.cell:
            self.instruction_pointer = self.jumps[self.instruction_pointer]

    @_instruction(LOOP_CLOSE)
    def _loop_close(self):
        if self.cell:
            self.instruction_pointer = self.jumps[self.instruction_pointer]

    def step(self):
        """
        Executes the instruction under the instruction pointer and moves past
        it. A loop jump lands on the partner bracket, so moving past it puts
        us either just inside the loop or just after it.
        """
        instruction = self.instructions[self.instruction_pointer]
        self.operations[instruction]()
        self.instruction_pointer += 1
        self.steps += 1

    def run(self):
        """
        Runs until the instruction pointer falls off the end of the tape,
        returning :data:`SUCCESS`. Runtime faults propagate; whatever was
        output before the fault stays output.
        """
        log.debug('running from instruction %d', self.instruction_pointer)
        try:
            while not self.is_finished:
                self.step()
        except BrainfuckError as e:
            log.debug('fault after %d steps: %s', self.steps, e.message)
            try:
                self._flush()
            except IOFailure as flush_error:
                # The fault that stopped the run is the one worth reporting.
                log.debug('flush after fault failed: %s', flush_error.message)
            raise

        self._flush()

        log.debug('halted after %d steps', self.steps)
        return SUCCESS

    def reset(self):
        self.tape = Tape()
        self.instruction_pointer = 0
        self.data_pointer = 0
        self.steps = 0

    def eval(self, text='', data=b''):
        """
        Runs `text` against this machine's current tape, feeding it `data` as
        input, and returns its output followed by ' ok' (or by the error, in
        which case the tape is wiped). The tape and data pointer survive from
        one successful eval to the next.
        """
        self.channel = BufferChannel(data)
        self.steps = 0

        try:
            self.instructions, self.jumps = load(text)
            self.instruction_pointer = 0
            self.run()
        except BrainfuckError as e:
            self.reset()
            return self._decode_output() + e.response()

        return self._decode_output() + ' ' + SUCCESS

    def _decode_output(self):
        return self.channel.output.decode('latin-1')


def execute(text, channel=None, eof=EOF_ZERO):
    """
    Loads and runs a whole program. Returns :data:`SUCCESS`, or the
    :exc:`BrainfuckError` that stopped it (bracket errors stop it before
    anything runs).
    """
    try:
        instructions, jumps = load(text)
        return Machine(instructions, jumps, channel, eof).run()
    except BrainfuckError as e:
        return e
