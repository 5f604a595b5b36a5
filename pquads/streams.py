import io
import os
import logging


logger = logging.getLogger(__name__)

# reads are split so that a bogus length doesn't allocate everything at once
READ_CHUNK_SIZE = 64 * 1024


class Stream(object):
    '''This is a simple wrapper around path/bytes/file object to
    uniform its properties: the codec only needs read(), write()
    and a way to skip forward.

    If the Stream opened the underlying file itself, "owned" is True
    and whoever created it is responsible to close() it.'''
    def __init__(self, obj, flags='r'):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        self.flags = flags
        self.obj = obj
        self.owned = False

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.obj)

    def init_str(self):
        '''We think this is a path'''
        mode = 'wb' if 'w' in self.flags else 'rb'
        logger.debug('opening path \'%s\' with mode \'%s\'' % (self.obj, mode))
        self.obj = open(self.obj, mode)
        self.owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_file(self):
        '''Anything else must already behave like a binary file object'''
        wanted = 'write' if 'w' in self.flags else 'read'
        if not hasattr(self.obj, wanted):
            raise ValueError('\'%s\' has no %s() method' % (self.obj.__class__.__name__, wanted))

    def read_exactly(self, n):
        '''Read n bytes, looping over short reads. It returns less than n bytes
        only if the stream ends before.'''
        data = []
        missing = n
        while missing > 0:
            chunk = self.obj.read(min(missing, READ_CHUNK_SIZE))
            if not chunk:
                break
            data.append(chunk)
            missing -= len(chunk)

        return b''.join(data)

    def skip(self, n):
        '''Move forward n bytes, it returns the number of bytes actually skipped.'''
        seekable = getattr(self.obj, 'seekable', None)
        if seekable is not None and seekable():
            start = self.obj.tell()
            end = self.obj.seek(0, io.SEEK_END)
            target = min(start + n, end)
            self.obj.seek(target)
            return target - start

        return len(self.read_exactly(n))

    def write(self, data):
        return self.obj.write(data)

    def close(self):
        self.obj.close()


class Handle(object):
    '''Common behaviour of the readers and writers of a stream:

     - the first error is remembered and raised again by every following call
     - an optional closer (anything with a close() method) is released once by close()
    '''

    def __init__(self):
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self._err = None
        self._closer = None
        self._closed = False

    @property
    def error(self):
        '''The sticky error, if any'''
        return self._err

    def _check(self):
        if self._err is not None:
            raise self._err.with_traceback(None)

    def _fail(self, err):
        if self._err is not None:
            return

        if isinstance(err, EOFError):
            self.logger.debug('end of stream reached')
        else:
            self.logger.warning('stream is unusable from now on: %s' % err)

        self._err = err

    def set_closer(self, closer):
        self._closer = closer

    def close(self):
        if self._closer is None or self._closed:
            return

        self._closed = True
        self._closer.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
