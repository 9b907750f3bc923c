"""
Core module for the abstraction of a file format
"""
from typing import Tuple, List, Dict

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import MaryException


class Chunk(Field, metaclass=MetaChunk):
    """
    A sequence of fields, declared in the class body.

    The fields are packed/unpacked in the order of declaration, one after the
    other without padding, so offset and size of the chunk are derived from them.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.relayout()

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented

        return self.raw == other.raw

    __hash__ = None

    def __repr__(self):
        inner = ','.join(f'{name}={field!r}' for name, field in self.get_fields())
        return f'<{self.__class__.__name__}({inner})>'

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(name, getattr(self, name)) for name in self._meta.fields]

    def init(self):
        for _, field in self.get_fields():
            field.init()

    def _get_value(self) -> Dict[str, object]:
        return {name: field.value for name, field in self.get_fields()}

    def _get_size(self):
        return sum(field.size for _, field in self.get_fields())

    def _get_raw(self) -> bytes:
        return b''.join(field.raw for _, field in self.get_fields())

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        return {name: (field.offset, field.size) for name, field in self.get_fields()}

    def relayout(self, offset=0):
        '''Set the offsets of the fields, relative to the start of the chunk.'''
        self.offset = offset

        end = offset
        for _, field in self.get_fields():
            end += field.relayout(offset=end)

        return end - offset

    def pack(self, stream=None, relayout=True):
        '''Encode the fields one after the other into the stream, if given.

        It returns the raw data packed.'''
        if relayout:
            self.relayout()

        stream = Stream(b'') if stream is None else stream

        for field_name, field in self.get_fields():
            self.logger.debug('packing %s.%s', self.__class__.__name__, field_name)
            field.pack(stream=stream, relayout=False)

        return self.raw

    def unpack(self, stream):
        '''Read the fields from the current position of the stream, in order.

        There is no seeking: each field starts where the previous one ended, so
        the stream can be a pipe or a buffer positioned somewhere in the middle.
        Any exception raised by a field gets the field name appended to its chain.'''
        for field_name, field in self.get_fields():
            self.logger.debug('unpacking %s.%s', self.__class__.__name__, field_name)

            try:
                field.unpack(stream)
            except MaryException as e:
                e.chain.append(field_name)
                raise

        self.relayout(offset=self.offset or 0)
