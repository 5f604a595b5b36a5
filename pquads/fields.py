"""
A Field is a "fundamental" datatype from the message point of view: it knows how
to pack/unpack its own value using the protobuf wire format, that is a varint key
made of the field number (the "tag") and of the wire type, followed by the payload.
"""
from enum import Enum

from bitstring import BitArray, Bits

from .meta import FieldBase
from .exceptions import UnpackError


# a varint can't encode more than 64 bits, that is 10 groups of 7 bits
VARINT_MAX_GROUPS = 10


class WireType(Enum):
    VARINT           = 0
    FIXED64          = 1
    LENGTH_DELIMITED = 2
    FIXED32          = 5


def encode_varint(value: int) -> bytes:
    '''Encode an unsigned integer as groups of 7 bits, least significant group
    first, each byte having the MSB set if other groups follow.

    Negative values are encoded as their 64 bits two's complement.'''
    if value < 0:
        value += 1 << 64

    if value >> 64:
        raise ValueError(f'{value} doesn\'t fit in 64 bits')

    n_groups = max(1, -(-value.bit_length() // 7))
    bits = BitArray(uint=value, length=n_groups * 7)

    # the BitArray is big-endian, so the least significant group is the last one
    groups = [bits[_:_ + 7] for _ in range(0, len(bits), 7)][::-1]

    encoded = BitArray()
    for idx, group in enumerate(groups):
        encoded.append('0b1' if idx < len(groups) - 1 else '0b0')
        encoded.append(group)

    return encoded.bytes


def read_varint(stream) -> int:
    '''Read an unsigned varint from the stream.

    It raises EOFError if the stream is exhausted before the first byte and
    UnpackError if it ends in the middle of the varint.'''
    groups = []
    while True:
        b = stream.read(1)
        if not b:
            if not groups:
                raise EOFError('end of stream')
            raise UnpackError('truncated varint')

        byte = Bits(b)
        groups.append(byte[1:])

        if not byte[0]:
            break

        if len(groups) >= VARINT_MAX_GROUPS:
            raise UnpackError('varint is longer than %d bytes' % VARINT_MAX_GROUPS)

    value = Bits().join(reversed(groups)).uint

    if value >> 64:
        raise UnpackError('varint overflows 64 bits')

    return value


def read_length_delimited(stream) -> bytes:
    length = read_varint(stream)
    data = stream.read_exactly(length)
    if len(data) != length:
        raise UnpackError('expected %d bytes, found %d' % (length, len(data)))

    return data


def skip_field(stream, wire_type: int) -> None:
    '''Consume the payload of a field we don't know about.'''
    if wire_type == WireType.VARINT.value:
        read_varint(stream)
    elif wire_type == WireType.LENGTH_DELIMITED.value:
        read_length_delimited(stream)
    elif wire_type in (WireType.FIXED64.value, WireType.FIXED32.value):
        n = 8 if wire_type == WireType.FIXED64.value else 4
        if len(stream.read_exactly(n)) != n:
            raise UnpackError('truncated fixed-size field')
    else:
        raise UnpackError('unsupported wire type %d' % wire_type)


class Field(FieldBase):
    """Base class to subclass from.

    A field with a "oneof" group name is part of a set of mutually exclusive
    fields: it has no zero value, so it's emitted as soon as it is set."""

    wire_type = None
    zero = None

    def __init__(self, tag, default=None, oneof=None, name=None):
        super().__init__()
        if tag <= 0:
            raise ValueError(f'tag must be positive, not {tag}')

        self.tag = tag
        self.oneof = oneof
        self.name = name
        self.default = default if default is not None or oneof else self.zero

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name}={self.tag})>'

    def check(self, value):
        '''Validate (and normalize) the value set on a message'''
        return value

    def is_empty(self, value) -> bool:
        if value is None:
            return True

        return not self.oneof and value == self.zero

    def key(self) -> bytes:
        return encode_varint(self.tag << 3 | self.wire_type.value)

    def pack(self, value) -> bytes:
        return self.key() + self.pack_payload(value)

    def pack_payload(self, value) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.pack_payload() not implemented")

    def unpack_payload(self, stream):
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack_payload() not implemented")


class VarintField(Field):
    """Unsigned (or two's complement signed) 64 bits integer."""

    wire_type = WireType.VARINT
    zero = 0

    def __init__(self, tag, signed=False, **kw):
        self.signed = signed
        super().__init__(tag, **kw)

    def check(self, value):
        if not isinstance(value, int):
            raise TypeError(f'field \'{self.name}\' accepts only integers, not {value.__class__.__name__}')

        lower = -(1 << 63) if self.signed else 0
        upper = (1 << 63) if self.signed else (1 << 64)
        if not lower <= value < upper:
            raise ValueError(f'value {value} out of range for field \'{self.name}\'')

        return value

    def pack_payload(self, value) -> bytes:
        return encode_varint(value)

    def unpack_payload(self, stream):
        value = read_varint(stream)
        if self.signed and value >> 63:
            value -= 1 << 64

        return value


class BoolField(VarintField):

    zero = False

    def check(self, value):
        return bool(value)

    def pack_payload(self, value) -> bytes:
        return encode_varint(int(value))

    def unpack_payload(self, stream):
        return bool(read_varint(stream))


class BytesField(Field):
    """Represent a contiguous chunk of bytes prefixed by its length."""

    wire_type = WireType.LENGTH_DELIMITED
    zero = b''

    def check(self, value):
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError(f'field \'{self.name}\' accepts only bytes, not {value.__class__.__name__}')

        return bytes(value)

    def pack_payload(self, value) -> bytes:
        return encode_varint(len(value)) + value

    def unpack_payload(self, stream):
        return read_length_delimited(stream)


class StringField(BytesField):

    zero = ''

    def check(self, value):
        if not isinstance(value, str):
            raise TypeError(f'field \'{self.name}\' accepts only str, not {value.__class__.__name__}')

        return str(value)

    def pack_payload(self, value) -> bytes:
        return super().pack_payload(value.encode('utf-8'))

    def unpack_payload(self, stream):
        raw = super().unpack_payload(stream)
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise UnpackError('invalid UTF-8: %s' % e)


class MessageField(Field):
    """Embed another message: presence matters, so an empty message is still emitted."""

    wire_type = WireType.LENGTH_DELIMITED

    def __init__(self, tag, message_cls, **kw):
        self.message_cls = message_cls
        super().__init__(tag, **kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name}={self.tag}, {self.message_cls.__name__})>'

    def check(self, value):
        if not isinstance(value, self.message_cls):
            raise TypeError(f'field \'{self.name}\' accepts only {self.message_cls.__name__}, not {value.__class__.__name__}')

        return value

    def is_empty(self, value) -> bool:
        return value is None

    def pack_payload(self, value) -> bytes:
        body = value.pack()
        return encode_varint(len(body)) + body

    def unpack_payload(self, stream):
        return self.message_cls.unpack(read_length_delimited(stream))
