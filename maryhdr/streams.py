import io
import os
import logging

from bitstring import Bits


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around path/bytes/file/buffer objects to
    uniform their properties: mainly we need read() and write() to
    behave in the same way for all of them.

    Buffers (the bitstring's ConstBitStream and BitStream) are read from and
    written to at their current position, that is advanced by the operation.

    It can be used as a context manager: at exit only the objects opened by
    the Stream itself are closed, the ones passed by the caller are left open.'''
    def __init__(self, obj, flags='rb'):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.flags = flags
        self.obj = obj
        self.owned = False

        # Path, DirEntry and any other os.PathLike are opened like a str
        if isinstance(self.obj, os.PathLike):
            self.obj = os.fspath(self.obj)

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            if not (hasattr(self.obj, 'read') or hasattr(self.obj, 'write')):
                raise ValueError('\'%s\' is the wrong kind of object to use as a stream' % self._type.__name__)
            init_method = self.init_fileobj

        init_method()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._type.__name__)

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        if self.owned and not self.obj.closed:
            logger.debug('closing %r', self.obj)
            self.obj.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, self.flags)
        self.owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_fileobj(self):
        '''Something with read() and/or write(), owned by the caller'''
        pass

    def init_ConstBitStream(self):
        self.read = self._read_buffer

    def init_BitStream(self):
        self.read = self._read_buffer
        self.write = self._write_buffer

    def _read_buffer(self, size):
        available = (self.obj.len - self.obj.pos) // 8
        return self.obj.read(min(size, available) * 8).bytes

    def _write_buffer(self, data):
        self.obj.insert(Bits(bytes=data))
        return len(data)

    def read(self, size):
        '''Read exactly size bytes, less only at the end of the data.

        Unbuffered readers (pipes, sockets) can return short reads while
        more data is on the way, so we keep asking until read() returns b''.'''
        data = b''
        while len(data) < size:
            chunk = self.obj.read(size - len(data))
            if not chunk:
                break
            data += chunk

        return data

    def write(self, data):
        return self.obj.write(data)
