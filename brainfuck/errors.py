ERROR_FORMAT = ' ? %s'


class BrainfuckError(Exception):
    """
    Base of everything the interpreter raises on purpose. Every instance
    carries the index of the offending instruction (or None when there isn't
    one to blame).
    """
    def __init__(self, message, index=None):
        super(BrainfuckError, self).__init__(message)
        self.message = message
        self.index = index

    def response(self):
        """ The error as the REPL would print it. """
        return ERROR_FORMAT % self.message


class StructuralError(BrainfuckError): pass
class RuntimeFault(BrainfuckError): pass


class UnmatchedLoopOpen(StructuralError):
    def __init__(self, index):
        super(UnmatchedLoopOpen, self).__init__(
            'unmatched [ at instruction %d' % index, index)


class UnmatchedLoopClose(StructuralError):
    def __init__(self, index):
        super(UnmatchedLoopClose, self).__init__(
            'unmatched ] at instruction %d' % index, index)


class DataPointerOutOfRange(RuntimeFault):
    def __init__(self, index, address):
        super(DataPointerOutOfRange, self).__init__(
            'data pointer out of range (%d) at instruction %d' % (address, index),
            index)
        self.address = address


class IOFailure(RuntimeFault):
    def __init__(self, index, reason):
        super(IOFailure, self).__init__(
            'i/o failure at instruction %s: %s' % (index, reason), index)
        self.reason = reason
