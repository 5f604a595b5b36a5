"""
# pquads: protobuf-encoded RDF quads

A pquads stream is a binary serialization of a sequence of quads (subject,
predicate, object and an optional label) made of

 1. a fixed header: the magic bytes and the version of the format
 2. the options of the stream, written once
 3. one length-delimited message for each quad

By default a quad doesn't repeat the subject, the predicate or the object of the
previous quad when they are the same, so a stream must be read in order. Two
options change how the quads are written:

 - full: every field is always written; the file is bigger but a quad can be
   skipped without decoding it.
 - strict: only quads allowed by the RDF model are accepted (for example a
   predicate must be an IRI) and a more compact message is used.

The values are rdflib terms:

    from rdflib import URIRef, Literal
    from pquads import Writer, Reader, Options

    with Writer('out.pq', Options(strict=True)) as writer:
        writer.write_quad((URIRef('http://a'), URIRef('http://p'), Literal('o')))

    with Reader('out.pq') as reader:
        quads = list(reader)
"""
from .exceptions import (
    PQuadsError,
    FormatError,
    MagicError,
    VersionError,
    UnpackError,
    ValidationError,
    StrictViolationError,
    BatchWriteError,
)
from .header import Options, MAGIC, CURRENT_VERSION
from .quads import Quad
from .reader import Reader, DEFAULT_MAX_SIZE
from .values import marshal_value, unmarshal_value
from .writer import Writer


CONTENT_TYPE = 'application/x-protobuf'
EXTENSION = '.pq'
