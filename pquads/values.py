'''
Conversion between the rdflib terms and their representation on the wire.

A typed literal travels as its lexical form plus the IRI of its datatype,
it is never converted to a native value.
'''
from typing import Optional

from rdflib import BNode, Literal, URIRef
from rdflib.term import Identifier

from .messages import WireValue, TypedString, LangString, StrictRef
from .exceptions import StrictViolationError, ValidationError


def make_value(term: Optional[Identifier]) -> Optional[WireValue]:
    if term is None:
        return None

    if isinstance(term, URIRef):
        return WireValue(iri=str(term))
    elif isinstance(term, BNode):
        return WireValue(bnode=str(term))
    elif isinstance(term, Literal):
        if term.language:
            return WireValue(lang_str=LangString(value=str(term), lang=term.language))
        if term.datatype:
            return WireValue(typed_str=TypedString(value=str(term), type=str(term.datatype)))

        return WireValue(string=str(term))

    raise ValidationError('unsupported term of type %s' % term.__class__.__name__)


def to_native(value: Optional[WireValue]) -> Optional[Identifier]:
    '''A value without any member set is the same as a missing value.'''
    if value is None:
        return None

    kind = value.which_oneof('value')

    if kind == 'iri':
        return URIRef(value.iri)
    elif kind == 'bnode':
        return BNode(value.bnode)
    elif kind == 'string':
        return Literal(value.string)
    elif kind == 'typed_str':
        typed = value.typed_str
        return Literal(typed.value, datatype=URIRef(typed.type) if typed.type else None)
    elif kind == 'lang_str':
        lang = value.lang_str
        return Literal(lang.value, lang=lang.lang or None)

    return None


def make_ref(term: Optional[Identifier], name: str) -> Optional[StrictRef]:
    '''Subject and label can only be IRIs or blank nodes.'''
    if term is None:
        return None

    if isinstance(term, URIRef):
        return StrictRef(iri=str(term))
    elif isinstance(term, BNode):
        return StrictRef(bnode=str(term))
    elif isinstance(term, Literal):
        raise StrictViolationError('a literal can\'t be used as %s' % name, chain=[name])

    raise ValidationError('unsupported term of type %s' % term.__class__.__name__, chain=[name])


def ref_to_native(ref: Optional[StrictRef], name: str) -> Optional[Identifier]:
    if ref is None:
        return None

    kind = ref.which_oneof('ref')

    if kind == 'iri':
        return URIRef(ref.iri)
    elif kind == 'bnode':
        return BNode(ref.bnode)

    raise StrictViolationError('empty reference', chain=[name])


def make_iri(term: Optional[Identifier], name: str) -> str:
    '''The predicate must be an IRI, the empty string means it is missing.'''
    if term is None:
        return ''

    if not isinstance(term, URIRef):
        raise StrictViolationError('%s must be an IRI, not %s' % (name, term.__class__.__name__), chain=[name])

    if not str(term):
        raise StrictViolationError('%s can\'t be the empty IRI' % name, chain=[name])

    return str(term)


def iri_to_native(iri: str) -> Optional[URIRef]:
    return URIRef(iri) if iri else None


def marshal_value(term: Optional[Identifier]) -> bytes:
    '''Encode a single term outside of a quad stream.'''
    value = make_value(term)
    if value is None:
        return b''

    return value.pack()


def unmarshal_value(data: bytes) -> Optional[Identifier]:
    if not data:
        return None

    return to_native(WireValue.unpack(data))
