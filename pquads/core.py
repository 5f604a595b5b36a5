"""
Core module for the abstraction of a message.

A message is declared as a class whose attributes are fields, each one with its
own field number:

    class Header(Message):
        full       = fields.BoolField(1)
        not_strict = fields.BoolField(2)

The encoding is the protobuf wire format, so the fields are packed in declaration
order, fields with the zero value are omitted and unknown fields are skipped
when unpacking.
"""
import logging
from typing import List, Optional, Tuple

from .fields import Field, read_varint, skip_field
from .meta import MetaMessage
from .streams import Stream
from .exceptions import PQuadsError, UnpackError


class Message(metaclass=MetaMessage):
    """
    Base class for the messages: instances are built by keyword

        Header(full=True)

    and a field not set reads as its default (None for the members of a oneof
    and for the embedded messages).
    """

    logger = logging.getLogger(__name__)

    def __init__(self, **kwargs):
        for name, value in kwargs.items():
            if name not in self._meta.fields:
                raise TypeError(f'{self.__class__.__name__} has no field named \'{name}\'')

            setattr(self, name, value)

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, field) for each field.'''
        return [(_, self.__class__.__dict__[_].field) for _ in self._meta.fields]

    def which_oneof(self, group: str) -> Optional[str]:
        '''Return the name of the member of the oneof group that is set'''
        for name in self._meta.oneofs[group]:
            if self.__dict__.get(name) is not None:
                return name

        return None

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            value = getattr(self, field_name)
            if not field.is_empty(value):
                msg.append('%s=%r' % (field_name, value))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented

        return all(getattr(self, _) == getattr(other, _) for _ in self._meta.fields)

    def pack(self) -> bytes:
        value = b''
        for field_name, field in self.get_fields():
            field_value = getattr(self, field_name)
            if field.is_empty(field_value):
                continue

            value += field.pack(field_value)

        return value

    @classmethod
    def unpack(cls, data: bytes) -> "Message":
        '''Build an instance from its binary representation.

        When the same field appears more than once the last one wins; a failure
        inside an embedded message has the name of the field prepended in the
        chain of the exception.'''
        instance = cls()
        stream = Stream(data)
        while stream.tell() < len(data):
            key = read_varint(stream)
            tag, wire_type = key >> 3, key & 0x07

            field = cls._meta.by_tag.get(tag)
            try:
                if field is None:
                    cls.logger.debug('skipping unknown field %d of %s' % (tag, cls.__name__))
                    skip_field(stream, wire_type)
                    continue

                if wire_type != field.wire_type.value:
                    raise UnpackError('wrong wire type %d' % wire_type)

                setattr(instance, field.name, field.unpack_payload(stream))
            except EOFError:
                raise UnpackError('truncated field', chain=[field.name if field else str(tag)])
            except PQuadsError as e:
                e.chain.insert(0, field.name if field else str(tag))
                raise

        return instance
