import io
import struct

import pytest
from rdflib import BNode, Literal, URIRef
from rdflib.namespace import XSD

from pquads import (
    DEFAULT_MAX_SIZE,
    FormatError,
    MagicError,
    Options,
    Quad,
    Reader,
    StrictViolationError,
    UnpackError,
    VersionError,
    Writer,
)
from pquads.header import MAGIC, write_header
from pquads.messages import StrictQuad, StrictRef, WireQuad, WireValue
from pquads.pio import MessageWriter


A = URIRef('http://example.org/a')
B = URIRef('http://example.org/b')
P = URIRef('http://example.org/p')
P2 = URIRef('http://example.org/p2')
O1 = Literal('o1')
O2 = Literal('o2', lang='en')
G = URIRef('http://example.org/g')

QUADS = [
    Quad(A, P, O1),
    Quad(A, P, O2),
    Quad(A, P2, O2, G),
    Quad(B, P2, O2, G),
    Quad(B, P2, Literal('42', datatype=XSD.integer)),
    Quad(BNode('b0'), P, A),
    Quad(BNode('b0'), P, A),
    Quad(A, P, O1),
]

ALL_OPTIONS = [
    Options(),
    Options(full=True),
    Options(strict=True),
    Options(full=True, strict=True),
]


def encode(quads, options=None):
    buffer = io.BytesIO()
    Writer(buffer, options).write_quads(quads)

    return buffer.getvalue()


def stream_with(options, *messages):
    '''Build a stream by hand, to have messages a Writer wouldn't produce'''
    buffer = io.BytesIO()
    write_header(buffer, options)
    writer = MessageWriter(buffer)
    for message in messages:
        writer.write_message(message)

    return buffer.getvalue()


@pytest.mark.parametrize('options', ALL_OPTIONS)
def test_roundtrip(options):
    reader = Reader(encode(QUADS, options))

    assert reader.options == options
    assert list(reader) == QUADS


@pytest.mark.parametrize('options', ALL_OPTIONS)
def test_skip_equivalence(options):
    data = encode(QUADS, options)

    for n in range(len(QUADS)):
        reader = Reader(data)
        for _ in range(n):
            reader.skip_quad()

        assert reader.read_quad() == QUADS[n]


def test_skip_full_does_not_decode(monkeypatch):
    def boom(cls, data):
        raise AssertionError('the message should not be decoded')

    data = encode(QUADS, Options(full=True))
    reader = Reader(data)

    monkeypatch.setattr(WireQuad, 'unpack', classmethod(boom))

    for _ in QUADS:
        reader.skip_quad()

    with pytest.raises(EOFError):
        reader.skip_quad()


def test_skip_delta_decodes(monkeypatch):
    calls = []
    unpack = WireQuad.unpack.__func__

    def spy(cls, data):
        calls.append(data)
        return unpack(cls, data)

    reader = Reader(encode(QUADS))

    monkeypatch.setattr(WireQuad, 'unpack', classmethod(spy))

    reader.skip_quad()
    reader.skip_quad()

    assert len(calls) == 2
    assert reader._delta.subject == A
    assert reader._delta.object == O2


def test_expand_scenario():
    data = encode([Quad(A, P, O1), Quad(B, P, O1)])

    assert list(Reader(data)) == [Quad(A, P, O1), Quad(B, P, O1)]


def test_end_of_stream_is_sticky():
    reader = Reader(encode([]))

    with pytest.raises(EOFError) as e:
        reader.read_quad()

    with pytest.raises(EOFError) as again:
        reader.read_quad()

    assert again.value is e.value
    assert list(reader) == []


def test_bad_magic(counting_stream):
    stream = counting_stream(b'\x00PQ\x00\x01\x00\x00\x00\x00')
    reader = Reader(stream)
    calls = stream.calls

    with pytest.raises(MagicError) as e:
        reader.read_quad()

    with pytest.raises(MagicError) as again:
        reader.skip_quad()

    assert e.value is again.value
    assert isinstance(e.value, FormatError)
    assert stream.calls == calls


def test_unsupported_version():
    reader = Reader(MAGIC + struct.pack('<I', 2) + b'\x00')

    assert isinstance(reader.error, VersionError)

    with pytest.raises(FormatError):
        reader.read_quad()


def test_empty_stream():
    with pytest.raises(UnpackError):
        Reader(b'').read_quad()


def test_truncated_quad_is_sticky(counting_stream):
    data = encode([Quad(A, P, O1), Quad(B, P, O2)])
    stream = counting_stream(data[:-3])
    reader = Reader(stream)

    assert reader.read_quad() == Quad(A, P, O1)

    with pytest.raises(UnpackError) as e:
        reader.read_quad()

    calls = stream.calls

    with pytest.raises(UnpackError) as again:
        reader.read_quad()

    assert again.value is e.value
    assert stream.calls == calls


def test_truncated_skip_full():
    data = encode([Quad(A, P, O1)], Options(full=True))

    reader = Reader(data[:-3])

    with pytest.raises(UnpackError):
        reader.skip_quad()


def test_max_size():
    quad = Quad(A, P, Literal('x' * 200))
    data = encode([quad])

    assert Reader(data, max_size=0).max_size == DEFAULT_MAX_SIZE
    assert Reader(data, max_size=-1).read_quad() == quad

    reader = Reader(data, max_size=100)
    with pytest.raises(UnpackError):
        reader.read_quad()


def test_missing_previous_value():
    """The first quad can't refer to a previous one."""
    data = stream_with(
        Options(),
        WireQuad(predicate=WireValue(iri=str(P)), object=WireValue(string='o')),
    )

    reader = Reader(data)

    with pytest.raises(UnpackError):
        reader.read_quad()


def test_empty_value_is_missing():
    data = stream_with(
        Options(),
        WireQuad(subject=WireValue(iri=str(A)), predicate=WireValue(iri=str(P)), object=WireValue(string='o')),
        WireQuad(subject=WireValue(), object=WireValue(string='o2')),
    )

    assert list(Reader(data)) == [Quad(A, P, Literal('o')), Quad(A, P, Literal('o2'))]


def test_strict_empty_ref():
    data = stream_with(
        Options(strict=True),
        StrictQuad(subject=StrictRef(), predicate=str(P), object=WireValue(string='o')),
    )

    reader = Reader(data)

    with pytest.raises(StrictViolationError) as e:
        reader.read_quad()

    assert e.value.chain == ['subject']


def test_strict_stream_uses_strict_messages():
    data = encode([Quad(A, P, O1, BNode('g'))], Options(strict=True))

    # 8 bytes of magic and version, 1 for the empty options, 1 for the length
    message = StrictQuad.unpack(data[10:])

    assert message.subject == StrictRef(iri=str(A))
    assert message.predicate == str(P)
    assert message.label == StrictRef(bnode='g')


def test_reader_closer(tmp_path):
    path = tmp_path / 'quads.pq'
    path.write_bytes(encode(QUADS))

    reader = Reader(str(path))
    assert next(iter(reader)) == QUADS[0]
    reader.close()
    reader.close()

    assert reader.stream.closed

    # a file object is left to its owner
    with open(path, 'rb') as fd:
        with Reader(fd) as reader:
            assert list(reader) == QUADS
        assert not fd.closed
