from .quads import Quad


class DeltaState(object):
    '''The subject, predicate and object of the last quad on a stream.

    Each Writer and Reader owns its own instance: the writer omits the fields
    equal to the ones here, the reader fills the missing fields from here.'''

    def __init__(self):
        self.subject = None
        self.predicate = None
        self.object = None

    def __repr__(self):
        return '<%s(%r, %r, %r)>' % (self.__class__.__name__, self.subject, self.predicate, self.object)

    def compact(self, quad: Quad) -> Quad:
        '''Return the quad without the fields equal to the last ones; the label is always kept.'''
        return Quad(
            None if quad.subject == self.subject else quad.subject,
            None if quad.predicate == self.predicate else quad.predicate,
            None if quad.object == self.object else quad.object,
            quad.label,
        )

    def expand(self, quad: Quad) -> Quad:
        '''Return the quad with the missing fields taken from the last ones.'''
        return Quad(
            self.subject if quad.subject is None else quad.subject,
            self.predicate if quad.predicate is None else quad.predicate,
            self.object if quad.object is None else quad.object,
            quad.label,
        )

    def update(self, quad: Quad) -> None:
        '''Remember the fields present in the quad'''
        if quad.subject is not None:
            self.subject = quad.subject
        if quad.predicate is not None:
            self.predicate = quad.predicate
        if quad.object is not None:
            self.object = quad.object
