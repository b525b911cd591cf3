import io
import logging
import sys

log = logging.getLogger(__name__)


class Channel(object):
    """
    The program's view of the outside world: one byte in, one byte out.

    Both streams must be binary. Reading past the end of the input is not an
    error -- :meth:`read_byte` just answers None and leaves it to the machine
    to decide what that means. Anything the streams raise (OSError, or
    ValueError for a closed file) is passed straight up.
    """
    def __init__(self, instream, outstream):
        self.instream = instream
        self.outstream = outstream

    @classmethod
    def from_stdio(cls):
        return cls(sys.stdin.buffer, sys.stdout.buffer)

    def read_byte(self):
        data = self.instream.read(1)
        if not data:
            log.debug('end of input')
            return None
        return data[0]

    def write_byte(self, value):
        self.outstream.write(bytes((value % 256,)))

    def flush(self):
        self.outstream.flush()


class BufferChannel(Channel):
    """ A :class:`Channel` over in-memory buffers, for tests and the REPL. """
    def __init__(self, data=b''):
        super(BufferChannel, self).__init__(io.BytesIO(data), io.BytesIO())

    @property
    def output(self):
        return self.outstream.getvalue()
