from enum import Enum
from typing import NamedTuple, Optional

from rdflib.term import Identifier

from .messages import WireQuad, StrictQuad
from .values import (
    make_value, to_native,
    make_ref, ref_to_native,
    make_iri, iri_to_native,
)


class Quad(NamedTuple):
    subject:   Optional[Identifier]
    predicate: Optional[Identifier]
    object:    Optional[Identifier]
    label:     Optional[Identifier] = None

    def is_valid(self) -> bool:
        '''A quad is valid when it has subject, predicate and object; the label is optional.'''
        return self.subject is not None and self.predicate is not None and self.object is not None


def make_wire_quad(quad: Quad) -> WireQuad:
    return WireQuad(
        subject=make_value(quad.subject),
        predicate=make_value(quad.predicate),
        object=make_value(quad.object),
        label=make_value(quad.label),
    )


def wire_quad_to_native(message: WireQuad) -> Quad:
    return Quad(
        to_native(message.subject),
        to_native(message.predicate),
        to_native(message.object),
        to_native(message.label),
    )


def make_strict_quad(quad: Quad) -> StrictQuad:
    return StrictQuad(
        subject=make_ref(quad.subject, 'subject'),
        predicate=make_iri(quad.predicate, 'predicate'),
        object=make_value(quad.object),
        label=make_ref(quad.label, 'label'),
    )


def strict_quad_to_native(message: StrictQuad) -> Quad:
    return Quad(
        ref_to_native(message.subject, 'subject'),
        iri_to_native(message.predicate),
        to_native(message.object),
        ref_to_native(message.label, 'label'),
    )


class Variant(Enum):
    '''The shape of the quad messages of a stream, selected once from its options.'''
    WIRE   = 'wire'
    STRICT = 'strict'

    @classmethod
    def from_options(cls, options) -> "Variant":
        return cls.STRICT if options.strict else cls.WIRE

    @property
    def message_cls(self):
        return variant2conversion[self][0]

    def to_message(self, quad: Quad):
        return variant2conversion[self][1](quad)

    def to_native(self, message) -> Quad:
        return variant2conversion[self][2](message)


variant2conversion = {
    Variant.WIRE:   (WireQuad,   make_wire_quad,   wire_quad_to_native),
    Variant.STRICT: (StrictQuad, make_strict_quad, strict_quad_to_native),
}
