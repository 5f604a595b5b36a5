'''
# File header

Each pquads stream starts with

  .------------------------------------.
  | magic (4 bytes)                     |
  | version (uint32, little endian)     |
  | options (length-delimited Header)   |
  '------------------------------------'

followed by the quad messages.
'''
import logging
import struct
from typing import NamedTuple

from .messages import Header
from .pio import MessageWriter, MessageReader
from .exceptions import MagicError, VersionError, UnpackError


logger = logging.getLogger(__name__)

MAGIC = b'\x00pq\x00'
CURRENT_VERSION = 1

HEADER_FORMAT = '<4sI'
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


class Options(NamedTuple):
    '''"full" disables the compaction of the quads: files are bigger but
    skipping a quad doesn't need to decode it.

    "strict" only allows quads following the RDF model.'''
    full:   bool = False
    strict: bool = False

    def to_message(self) -> Header:
        return Header(full=self.full, not_strict=not self.strict)

    @classmethod
    def from_message(cls, header: Header) -> "Options":
        return cls(full=header.full, strict=not header.not_strict)


def write_header(stream, options: Options) -> int:
    '''Write magic, version and options; return the number of bytes written.'''
    prefix = struct.pack(HEADER_FORMAT, MAGIC, CURRENT_VERSION)
    stream.write(prefix)

    n = MessageWriter(stream).write_message(options.to_message())
    logger.debug('written header version %d with %r' % (CURRENT_VERSION, options))

    return len(prefix) + n


def read_header(stream, max_size: int) -> Options:
    prefix = stream.read_exactly(HEADER_SIZE)
    if len(prefix) != HEADER_SIZE:
        raise UnpackError('truncated header: %d bytes instead of %d' % (len(prefix), HEADER_SIZE))

    magic, version = struct.unpack(HEADER_FORMAT, prefix)
    if magic != MAGIC:
        logger.warning('the magic doesn\'t correspond: %r' % magic)
        raise MagicError('bad magic')

    if version != CURRENT_VERSION:
        raise VersionError(version)

    try:
        header = MessageReader(stream, max_size).read_message(Header)
    except EOFError:
        raise UnpackError('missing options header', chain=['header'])

    options = Options.from_message(header)
    logger.debug('read header version %d with %r' % (version, options))

    return options
