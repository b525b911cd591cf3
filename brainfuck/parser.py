import logging
import re

log = logging.getLogger(__name__)

MOVE_RIGHT = 'MOVE_RIGHT'
MOVE_LEFT = 'MOVE_LEFT'
INCREMENT = 'INCREMENT'
DECREMENT = 'DECREMENT'
OUTPUT = 'OUTPUT'
INPUT = 'INPUT'
LOOP_OPEN = 'LOOP_OPEN'
LOOP_CLOSE = 'LOOP_CLOSE'

SYMBOLS = {
    '>': MOVE_RIGHT,
    '<': MOVE_LEFT,
    '+': INCREMENT,
    '-': DECREMENT,
    '.': OUTPUT,
    ',': INPUT,
    '[': LOOP_OPEN,
    ']': LOOP_CLOSE,
}
INSTRUCTIONS = dict((instruction, symbol) for symbol, instruction in SYMBOLS.items())


class Parser(object):
    """
    Turns Brainfuck source text into instructions, one at a time.

    The parser is stateful: each instance is given the text to operate on, and
    calls to parse_whatever advance its position within that text, so the next
    call starts from where the previous one left off.

    Only the eight symbols in :data:`SYMBOLS` mean anything; every other
    character (whitespace and newlines included) is commentary and is skipped.
    There is no such thing as a syntax error at this level -- brackets are
    matched later, by :func:`brainfuck.jumps.build_jump_table`.

    The expected external interface is provided by the next_instruction
    method, which returns the next instruction (consuming any commentary in
    front of it) until the text is exhausted, at which point
    :exc:`StopIteration` will be raised.
    """
    COMMENT = r'[^\[\]<>+\-.,]+'
    INSTRUCTION = r'[\[\]<>+\-.,]'

    def __init__(self, text):
        if isinstance(text, bytes):
            # Every byte is one character, whatever the file's real encoding.
            text = text.decode('latin-1')
        self.text = text
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters based on a regex. Matches
        are only ever expected at the current position.
        """
        if self.is_finished:
            raise StopIteration()
        found = re.compile(pattern).match(self.text, self.pos)
        if found is None:
            return None
        self.pos = found.end()
        return found.group()

    def parse_comment(self):
        return self._consume(self.COMMENT)

    def parse_instruction(self):
        symbol = self._consume(self.INSTRUCTION)
        if symbol is None:
            return None
        return SYMBOLS[symbol]

    def next_instruction(self):
        self.parse_comment()
        # Commentary runs to the next symbol or the end; either way this
        # returns an instruction or raises StopIteration.
        return self.parse_instruction()

    def generate(self):
        while not self.is_finished:
            try:
                yield self.next_instruction()
            except StopIteration:
                return


def tokenize(text):
    """ Returns the whole instruction tape for `text` as a list. """
    instructions = list(Parser(text).generate())
    log.debug('tokenized %d characters into %d instructions',
              len(text), len(instructions))
    return instructions


def strip_comments(text):
    """ Drops every character of `text` that isn't an instruction symbol. """
    return to_source(tokenize(text))


def to_source(instructions):
    return ''.join(INSTRUCTIONS[instruction] for instruction in instructions)
