'''
# MARY header

Every MARY data file (CARTs, unit inventories, feature files, timelines...)
starts with the same 12 bytes

    +--------+---------+--------+
    | magic  | version | type   |
    +--------+---------+--------+
      int32    int32     int32      (big endian)

The magic is always 0x4d415259 ("MARY"), the version is encoded as
major * 10 + minor and the type tells which kind of payload follows.

A header is valid when the magic is right and the type is inside the legal
range; the version is not taken into account, use has_current_version()
to know if a migration is needed.
'''
import logging
from contextlib import nullcontext

from .core import Chunk
from . import fields
from .enum import (
    MAGIC,
    VERSION,
    LEGAL_TYPE_RANGE,
    Compliant,
    MaryFileType,
    Validity,
)
from .exceptions import (
    ConstructionException,
    IllegalTypeException,
    IllFormedHeaderException,
    MagicException,
    NotAMaryFileException,
    TypeException,
)
from .meta import Endianess
from .streams import Stream


logger = logging.getLogger(__name__)


class MaryHeader(Chunk):
    magic   = fields.StructField('i', default=MAGIC, endianess=Endianess.BIG_ENDIAN, is_magic=True)
    version = fields.StructField('i', default=VERSION, endianess=Endianess.BIG_ENDIAN)
    type    = fields.StructField('i', enum=MaryFileType, default=MaryFileType.UNKNOWN, endianess=Endianess.BIG_ENDIAN)

    @classmethod
    def create(cls, type_code):
        '''Build a brand new header for a file of the given type.'''
        if isinstance(type_code, bool) or not isinstance(type_code, int) or type_code not in LEGAL_TYPE_RANGE:
            raise ConstructionException(
                chain=['type'],
                value=type_code,
                message=f'unauthorized Mary file type [{type_code!r}]',
            )

        header = cls()
        header.type.value = type_code

        return header

    @classmethod
    def load(cls, source, compliant=Compliant.NONE):
        '''Read the three fields from the source without validating them.

        The source can be a path, raw bytes, a file object or a bitstring
        buffer; in the latter two cases the reading starts from the current
        position. Only a path is opened (and closed) here.'''
        header = cls(compliant=compliant)

        with _as_stream(source) as stream:
            header.unpack(stream)

        logger.debug('loaded %r', header)

        return header

    @classmethod
    def from_source(cls, source, compliant=Compliant.MAGIC):
        '''Like load() but the header must be valid, otherwise
        IllFormedHeaderException is raised.

        The magic and the type range are always checked; adding Compliant.ENUM
        to the flags also refuses the type codes without a name.'''
        header = cls.load(source)

        validity = header.validate()
        if validity is Validity.INVALID_MAGIC:
            raise IllFormedHeaderException(['magic'], validity, value=header.magic.value)
        if validity is Validity.INVALID_TYPE:
            raise IllFormedHeaderException(['type'], validity, value=header.type.value)
        if compliant & Compliant.ENUM and not header.has_known_type():
            raise IllFormedHeaderException(['type'], Validity.INVALID_TYPE, value=header.type.value)

        return header

    @classmethod
    def peek_file_type(cls, path):
        '''For the given file, look inside and determine the file type
        without reading anything past the header.'''
        with Stream(path) as stream:
            header = cls.load(stream)

        validity = header.validate()

        if validity is Validity.INVALID_MAGIC:
            raise NotAMaryFileException(path, validity, value=header.magic.value) \
                from MagicException(['magic'], value=header.magic.value)
        if validity is Validity.INVALID_TYPE:
            raise NotAMaryFileException(path, validity, value=header.type.value) \
                from TypeException(['type'], value=header.type.value)

        return header.type.value

    def _check_type(self):
        if self.has_bad_type():
            raise IllegalTypeException(
                chain=['type'],
                value=self.type.value,
                message=f'unknown Mary file type [{self.type.value!r}]',
            )

    def pack(self, stream=None, relayout=True):
        self._check_type()

        return super().pack(stream=stream, relayout=relayout)

    def write_to(self, output):
        '''Write the header to a file object, a bitstring BitStream or a path,
        returning the number of bytes written.

        A path is created (or truncated) and closed afterwards; nothing is
        opened when the type is illegal.'''
        self._check_type()

        with _as_stream(output, flags='wb') as stream:
            self.pack(stream)

        return self.size

    @property
    def file_type(self):
        return self.type.value

    @property
    def version_major(self):
        return self.version.value // 10

    @property
    def version_minor(self):
        return self.version.value % 10

    @property
    def version_string(self):
        return f'{self.version_major}.{self.version_minor}'

    def has_legal_magic(self):
        return self.magic.value == MAGIC

    def has_current_version(self):
        return self.version.value == VERSION

    def has_bad_type(self):
        return self.type.value not in LEGAL_TYPE_RANGE

    def has_legal_type(self):
        return not self.has_bad_type()

    def has_known_type(self):
        '''Stricter than has_legal_type(): the code must have a name.'''
        return isinstance(self.type.value, MaryFileType) and self.type.value is not MaryFileType.UNKNOWN

    def is_mary_header(self):
        return self.has_legal_magic() and self.has_legal_type()

    def validate(self):
        if not self.has_legal_magic():
            return Validity.INVALID_MAGIC

        if not self.has_legal_type():
            return Validity.INVALID_TYPE

        return Validity.VALID


def _as_stream(source, flags='rb'):
    # a Stream given by the caller stays open
    if isinstance(source, Stream):
        return nullcontext(source)

    return Stream(source, flags=flags)


def peek_file_type(path):
    return MaryHeader.peek_file_type(path)
