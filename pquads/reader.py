from .delta import DeltaState
from .header import Options, read_header
from .pio import MessageReader
from .quads import Variant
from .streams import Stream, Handle
from .exceptions import PQuadsError, UnpackError


DEFAULT_MAX_SIZE = 1024 * 1024


class Reader(Handle):
    '''Decode quads from a stream.

    The stream can be a path (the file is opened here and closed by close()),
    bytes or a binary file object. "max_size" limits the size of a single message,
    if not positive DEFAULT_MAX_SIZE is used.

    The header is read immediately; if it is not valid the error is raised by
    every call. The end of the stream is signaled by EOFError:

        with Reader('quads.pq') as reader:
            for quad in reader:
                print(quad)
    '''

    def __init__(self, stream, max_size=0):
        super().__init__()
        if not max_size or max_size <= 0:
            max_size = DEFAULT_MAX_SIZE

        self.max_size = max_size
        self.options = Options()
        self._delta = DeltaState()

        self.stream = Stream(stream)
        if self.stream.owned:
            self.set_closer(self.stream)

        try:
            self.options = read_header(self.stream, max_size)
        except (PQuadsError, OSError, ValueError) as e:
            self._fail(e)

        self._variant = Variant.from_options(self.options)
        self._messages = MessageReader(self.stream, max_size)

    def __iter__(self):
        while True:
            try:
                yield self.read_quad()
            except EOFError:
                return

    def read_quad(self):
        self._check()

        try:
            message = self._messages.read_message(self._variant.message_cls)
            quad = self._variant.to_native(message)
        except (PQuadsError, OSError, EOFError, ValueError) as e:
            self._fail(e)
            raise

        quad = self._delta.expand(quad)
        if not quad.is_valid():
            err = UnpackError('quad refers to a value before the start of the stream')
            self._fail(err)
            raise err

        self._delta.update(quad)
        self.logger.debug('read %r' % (quad,))

        return quad

    def skip_quad(self):
        '''Consume a quad without returning it.

        Only in full mode the message can be skipped without decoding it: otherwise
        the following quads may need the fields of this one.'''
        if not self.options.full:
            self.read_quad()
            return

        self._check()

        try:
            self._messages.skip_message()
        except (PQuadsError, OSError, EOFError, ValueError) as e:
            self._fail(e)
            raise
