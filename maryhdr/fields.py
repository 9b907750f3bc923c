"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable without need for relayouting.
"""
import logging
import struct
from enum import Enum

from .enum import Compliant
from .meta import FieldBase, Endianess
from .exceptions import (
    UnpackException,
    MagicException,
    TruncatedInputException,
)


# struct byte order characters
BYTE_ORDER = {
    Endianess.LITTLE_ENDIAN: '<',
    Endianess.BIG_ENDIAN: '>',
    Endianess.NETWORK: '!',
    Endianess.NATIVE: '=',
}


class Field(FieldBase):
    """Base class to subclass from: a value that knows its offset, its size
    and how to become bytes."""

    def __init__(self, name=None, father=None, default=None, offset=None,
                 endianess=Endianess.LITTLE_ENDIAN, compliant=Compliant.INHERIT, is_magic=False):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.endianess = endianess
        self.compliant = compliant
        self.is_magic = is_magic

        self.init()

    def init(self):
        self.value = self.default

    def is_compliant(self, level):
        '''Returns True if this field, or the first ancestor not delegating
        via Compliant.INHERIT, requires the given compliantness level.'''
        instance = self
        while instance is not None:
            if instance.compliant & level:
                return True
            if not instance.compliant & Compliant.INHERIT:
                break

            instance = instance.father

        return False

    value = property(
        fget=lambda self: self._get_value(),
        fset=lambda self, value: self._set_value(value))

    size = property(
        fget=lambda self: self._get_size(),
    )

    raw = property(
        fget=lambda self: self._get_raw(),
        fset=lambda self, value: self._set_raw(value),
    )

    def _get_value(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_value() not implemented")

    def _set_value(self, value):
        raise NotImplementedError(f"method {self.__class__.__name__}._set_value() not implemented")

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    def _get_raw(self) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}._get_raw() not implemented")

    def _set_raw(self, value) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}._set_raw() not implemented")

    def relayout(self, offset=0):
        self.offset = offset

        return self.size

    def pack(self, stream, relayout=True):
        raise NotImplementedError('you need to implement this in the subclass')

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    A single integer packed/unpacked with the struct module.

    Passing an enum.Enum subclass as "enum" makes the value the member with the
    same number. A number without a member is kept as a plain integer, unless the
    field is compliant with Compliant.ENUM.
    """

    def __init__(self, format, default=0, enum=None, **kw):
        self.format = format
        self.enum = enum
        super().__init__(default=default, **kw)

    def __repr__(self):
        if isinstance(self.value, Enum):
            return f'<{self.__class__.__name__}({self.value!r})>'

        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    @property
    def number(self) -> int:
        '''The value as it is going to be packed.'''
        return self.value.value if isinstance(self.value, Enum) else self.value

    def get_struct(self):
        return struct.Struct(BYTE_ORDER[self.endianess] + self.format)

    def _get_value(self):
        return self._value

    def _set_value(self, value) -> None:
        if self.enum and not isinstance(value, self.enum):
            value = self._to_enum(value)

        self._value = value

    def _get_size(self):
        return self.get_struct().size

    def _get_raw(self) -> bytes:
        return self.get_struct().pack(self.number)

    def _set_raw(self, raw: bytes) -> None:
        try:
            (value,) = self.get_struct().unpack(raw)
        except struct.error as e:
            self.logger.error(e)
            raise UnpackException(chain=[], value=raw)

        if self.enum:
            value = self._to_enum(value)

        if self.is_magic and value != self.default:
            self.logger.warning(f'the magic doesn\'t correspond: 0x{value:08x} instead of 0x{self.default:08x}')
            if self.is_compliant(Compliant.MAGIC):
                raise MagicException(chain=[], value=value)

        self._value = value

    def _to_enum(self, value: int):
        try:
            return self.enum(value)
        except ValueError:
            if self.is_compliant(Compliant.ENUM):
                raise UnpackException(chain=[], value=value)

        # legal for the non compliant fields: no noise
        self.logger.debug(f'no {self.enum.__name__} member for 0x{value:x}, keeping the number')

        return value

    def pack(self, stream, relayout=True):
        if relayout:
            self.relayout()

        raw = self.raw
        self.logger.debug('packing %s=%r', self.name, raw)
        stream.write(raw)

        return len(raw)

    def unpack(self, stream):
        raw = stream.read(self.size)
        self.logger.debug('unpacking %s from %r', self.name, raw)

        if len(raw) < self.size:
            raise TruncatedInputException(
                chain=[],
                value=raw,
                message=f'needed {self.size} bytes for field {self.name!r}, got {len(raw)}',
            )

        self.raw = raw
