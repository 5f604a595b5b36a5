import pytest

from pquads.core import Message
from pquads.exceptions import UnpackError
from pquads.messages import Header, WireValue, WireQuad, TypedString
from pquads import fields


def test_message_declaration():
    """Check that the fields of a message are collected in order."""
    class Dummy(Message):
        a = fields.VarintField(1)
        b = fields.StringField(2)
        c = fields.MessageField(3, Header)

    assert Dummy._meta.fields == ['a', 'b', 'c']
    assert Dummy.b.tag == 2

    dummy = Dummy(b='kebab')

    assert dummy.a == 0
    assert dummy.b == 'kebab'
    assert dummy.c is None
    assert dummy.pack() == b'\x12\x05kebab'


def test_message_inheritance():
    class Base(Message):
        a = fields.VarintField(1)

    class Child(Base):
        b = fields.VarintField(2)

    assert Child._meta.fields == ['a', 'b']
    assert Child(a=1, b=2).pack() == b'\x08\x01\x10\x02'


def test_message_duplicated_tag():
    with pytest.raises(AttributeError):
        class Wrong(Message):
            a = fields.VarintField(1)
            b = fields.VarintField(1)


def test_message_unknown_keyword():
    with pytest.raises(TypeError):
        Header(kebab=True)

    with pytest.raises(TypeError):
        WireValue(iri=42)


def test_header_pack():
    assert Header().pack() == b''
    assert Header(full=True).pack() == b'\x08\x01'
    assert Header(full=True, not_strict=True).pack() == b'\x08\x01\x10\x01'


def test_unpack_skips_unknown_fields():
    header = Header.unpack(b'\x28\x05' + b'\x08\x01' + b'\x32\x01x' + b'\x3d\x00\x00\x00\x00')

    assert header == Header(full=True)


def test_unpack_wrong_wire_type():
    with pytest.raises(UnpackError) as e:
        Header.unpack(b'\x0a\x00')

    assert e.value.chain == ['full']


def test_unpack_chain():
    """A failure inside an embedded message tells where it happened."""
    with pytest.raises(UnpackError) as e:
        WireQuad.unpack(b'\x0a\x05\x1a\x08abc')

    assert e.value.chain == ['subject', 'iri']
    assert str(e.value) == 'subject.iri: expected 8 bytes, found 3'


def test_unpack_truncated_key():
    with pytest.raises(UnpackError):
        Header.unpack(b'\x80')


def test_oneof():
    value = WireValue(iri='http://a')

    assert value.which_oneof('value') == 'iri'

    value.bnode = 'b0'

    assert value.which_oneof('value') == 'bnode'
    assert value.iri is None
    assert value.pack() == b'\x22\x02b0'


def test_oneof_empty_string_is_written():
    assert WireValue(string='').pack() == b'\x12\x00'
    assert WireValue.unpack(b'\x12\x00').which_oneof('value') == 'string'


def test_embedded_message_roundtrip():
    quad = WireQuad(
        subject=WireValue(iri='http://a'),
        object=WireValue(typed_str=TypedString(value='5', type='http://www.w3.org/2001/XMLSchema#integer')),
    )

    raw = quad.pack()

    assert raw.startswith(b'\x0a\x0a\x1a\x08http://a')
    assert WireQuad.unpack(raw) == quad
    assert WireQuad.unpack(raw).predicate is None


def test_empty_embedded_message_is_written():
    assert WireQuad(subject=WireValue()).pack() == b'\x0a\x00'
    assert WireQuad.unpack(b'\x0a\x00').subject == WireValue()
