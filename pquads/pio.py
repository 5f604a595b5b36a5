'''
Length-delimited messages: each message is prefixed by its size encoded as a varint.
'''
import logging

from .fields import encode_varint, read_varint
from .exceptions import UnpackError


logger = logging.getLogger(__name__)


class MessageWriter(object):

    def __init__(self, stream):
        self.stream = stream

    def write_message(self, message) -> int:
        '''Write the message and return the number of bytes written, prefix included.'''
        body = message.pack()
        data = encode_varint(len(body)) + body

        self.stream.write(data)
        logger.debug('written %s (%d bytes)' % (message.__class__.__name__, len(data)))

        return len(data)


class MessageReader(object):
    '''Read messages not larger than "max_size" bytes.'''

    def __init__(self, stream, max_size):
        self.stream = stream
        self.max_size = max_size

    def _read_length(self) -> int:
        '''EOFError is raised only if the stream ends exactly at a message boundary'''
        length = read_varint(self.stream)
        if length > self.max_size:
            raise UnpackError('message of %d bytes exceeds the maximum size of %d bytes' % (length, self.max_size))

        return length

    def read_message(self, cls):
        length = self._read_length()
        data = self.stream.read_exactly(length)
        if len(data) != length:
            raise UnpackError('truncated %s: expected %d bytes, found %d' % (cls.__name__, length, len(data)))

        return cls.unpack(data)

    def skip_message(self) -> None:
        length = self._read_length()
        skipped = self.stream.skip(length)
        if skipped != length:
            raise UnpackError('truncated message: expected %d bytes, found %d' % (length, skipped))

        logger.debug('skipped message of %d bytes' % length)
