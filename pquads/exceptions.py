class PQuadsError(Exception):
    '''Base class to extend in order to throw exception in pquads.

    Other than the message it takes the chain of the message fields that
    caused the exception, outermost first.
    '''

    def __init__(self, message='', chain=None):
        self.message = message
        self.chain = chain if chain is not None else []
        super().__init__(message)

    def __str__(self):
        if not self.chain:
            return self.message

        return '%s: %s' % ('.'.join(self.chain), self.message)


class FormatError(PQuadsError):
    '''The stream is not a pquads stream or it is corrupted.'''
    pass


class MagicError(FormatError):
    pass


class VersionError(FormatError):

    def __init__(self, version, chain=None):
        self.version = version
        super().__init__('unsupported version: %d' % version, chain=chain)


class UnpackError(FormatError):
    pass


class ValidationError(PQuadsError):
    '''The quad can't be represented: it is missing a required field
    or it contains a term of unknown type.'''
    pass


class StrictViolationError(PQuadsError):
    '''A value is placed where the RDF model doesn't allow it (e.g. a literal as predicate).'''
    pass


class BatchWriteError(PQuadsError):
    '''Raised by Writer.write_quads(): "index" is the position of the quad that failed,
    i.e. the number of quads written before it.'''

    def __init__(self, index, chain=None):
        self.index = index
        super().__init__('failed to write quad at index %d' % index, chain=chain)
