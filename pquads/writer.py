from .delta import DeltaState
from .header import Options, write_header
from .pio import MessageWriter
from .quads import Quad, Variant
from .streams import Stream, Handle
from .exceptions import PQuadsError, ValidationError, StrictViolationError, BatchWriteError


class Writer(Handle):
    '''Encode quads on a stream.

    The stream can be a path (the file is created and closed by close()) or
    a binary file object. The header is written immediately; if that fails
    the error is raised by the first call to write_quad().

    Unless options.full is set, the subject, predicate and object equal to the
    ones of the previous quad are not written.'''

    def __init__(self, stream, options=None):
        super().__init__()
        self.options = options if options is not None else Options()
        self.max_message_size = 0
        self._delta = DeltaState()
        self._variant = Variant.from_options(self.options)

        self.stream = Stream(stream, flags='w')
        if self.stream.owned:
            self.set_closer(self.stream)

        self._messages = MessageWriter(self.stream)

        try:
            write_header(self.stream, self.options)
        except (OSError, ValueError) as e:
            self._fail(e)

    def write_quad(self, quad):
        '''Raise ValidationError, without writing anything, if the quad can't be
        represented; any other error is raised again by the following calls.'''
        self._check()

        try:
            quad = Quad(*quad)
        except TypeError:
            raise ValidationError('a quad has 3 or 4 terms, not %r' % (quad,))
        if not quad.is_valid():
            raise ValidationError('quad must have subject, predicate and object')

        compacted = quad if self.options.full else self._delta.compact(quad)

        try:
            message = self._variant.to_message(compacted)
        except StrictViolationError as e:
            self._fail(e)
            raise

        try:
            n = self._messages.write_message(message)
        except (OSError, ValueError) as e:
            self._fail(e)
            raise

        self._delta.update(quad)
        if n > self.max_message_size:
            self.max_message_size = n

        self.logger.debug('written %r (%d bytes)' % (compacted, n))

    def write_quads(self, quads) -> int:
        '''Write the quads in order and return how many they are.

        It stops at the first failure raising BatchWriteError, the "index" attribute
        tells which quad failed and the original error is its __cause__.'''
        count = 0
        for quad in quads:
            try:
                self.write_quad(quad)
            except (PQuadsError, OSError, ValueError) as e:
                raise BatchWriteError(count) from e
            count += 1

        return count
