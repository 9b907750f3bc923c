'''
This module contains the constant values used by the MARY data files.

Note: use Enum for value that cannot ORed together, Flag for the others.
'''
from enum import Enum, Flag, IntEnum, auto
from typing import NamedTuple


MAGIC   = 0x4d415259  # "MARY"
VERSION = 40          # 4.0


class Compliant(Flag):
    '''It indicates which degree of compliantness the data must reflect the format'''
    NONE  = 0
    ENUM  = 1 << 0
    MAGIC = 1 << 1
    INHERIT = 1 << 2


class MaryFileType(IntEnum):
    '''The payload category of a MARY file. The codes are sparse: values
    between two of them are not assigned to anything.'''
    UNKNOWN               = 0
    CARTS                 = 100
    DIRECTED_GRAPH        = 110
    UNITS                 = 200
    LISTENERUNITS         = 225
    UNITFEATS             = 300
    HALFPHONE_UNITFEATS   = 301
    LISTENERFEATS         = 325
    JOINFEATS             = 400
    SCOST                 = 445
    PRECOMPUTED_JOINCOSTS = 450
    TIMELINE              = 500


class TypeRange(NamedTuple):
    '''Half-open interval (low, high] of the type codes a header may carry.

    Any integer inside it is accepted, also the ones without a name in
    MaryFileType: readers written before a new type code was introduced
    must still accept the files using it.'''
    low: int
    high: int

    def __contains__(self, value):
        return self.low < value <= self.high


LEGAL_TYPE_RANGE = TypeRange(low=MaryFileType.UNKNOWN, high=max(MaryFileType))


class Validity(Enum):
    VALID         = auto()
    INVALID_MAGIC = auto()
    INVALID_TYPE  = auto()
