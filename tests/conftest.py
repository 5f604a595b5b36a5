import io

import pytest


class CountingStream(object):
    '''File-like object counting the calls that reach it.

    With "fail_at" the n-th write (starting from 1) raises OSError.'''

    def __init__(self, data=b'', fail_at=None):
        self.buffer = io.BytesIO(data)
        self.reads = 0
        self.writes = 0
        self.fail_at = fail_at

    @property
    def calls(self):
        return self.reads + self.writes

    def read(self, n=-1):
        self.reads += 1
        return self.buffer.read(n)

    def write(self, data):
        self.writes += 1
        if self.fail_at is not None and self.writes >= self.fail_at:
            raise OSError('broken pipe')

        return self.buffer.write(data)

    def getvalue(self):
        return self.buffer.getvalue()


@pytest.fixture
def counting_stream():
    return CountingStream
