'''
# Wire messages

The messages exchanged on a pquads stream: the options header written once after
the file header, then one quad message per quad. The quad message is a WireQuad,
or a StrictQuad when the stream is strict.

The field numbers are part of the format and must never change.
'''
from .core import Message
from . import fields


class Header(Message):
    '''The options of the stream: "not_strict" is inverted, so an empty header
    describes a strict stream.'''
    full       = fields.BoolField(1)
    not_strict = fields.BoolField(2)


class TypedString(Message):
    value = fields.StringField(1)
    type  = fields.StringField(2)


class LangString(Message):
    value = fields.StringField(1)
    lang  = fields.StringField(2)


class WireValue(Message):
    # field number 1 is reserved for raw values
    string    = fields.StringField(2, oneof='value')
    iri       = fields.StringField(3, oneof='value')
    bnode     = fields.StringField(4, oneof='value')
    typed_str = fields.MessageField(5, TypedString, oneof='value')
    lang_str  = fields.MessageField(6, LangString, oneof='value')


class WireQuad(Message):
    '''A missing subject, predicate or object means "the same of the previous quad".'''
    subject   = fields.MessageField(1, WireValue)
    predicate = fields.MessageField(2, WireValue)
    object    = fields.MessageField(3, WireValue)
    label     = fields.MessageField(4, WireValue)


class StrictRef(Message):
    bnode = fields.StringField(1, oneof='ref')
    iri   = fields.StringField(2, oneof='ref')


class StrictQuad(Message):
    '''Like WireQuad, but the types of the fields follow the RDF model: only
    the object can be a literal.'''
    subject   = fields.MessageField(1, StrictRef)
    predicate = fields.StringField(2)
    object    = fields.MessageField(3, WireValue)
    label     = fields.MessageField(4, StrictRef)
