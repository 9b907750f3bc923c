#!/usr/bin/env python3
'''
Dump the header of MARY data files, in the style of readelf(1).

 $ maryinfo.py cart.mry timeline_basenames.mry
'''
import sys
import os
import logging

from maryhdr.header import MaryHeader
from maryhdr.enum import MaryFileType, Validity
from maryhdr.exceptions import TruncatedInputException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s <mary file> [<mary file> ...]' % progname)
    sys.exit(1)


def type_name(value):
    return value.name if isinstance(value, MaryFileType) else f'<unassigned {value}>'


def dump_header(path, hdr):
    magic = hdr.magic.raw
    print(f'''{path}:
  Magic:                             {magic.hex()} ({magic.decode('latin1')!r})
  Version:                           {hdr.version_string} ({hdr.version.value}){"" if hdr.has_current_version() else " [not current]"}
  Type:                              {type_name(hdr.type.value)} ({int(hdr.type.value)})
  Validity:                          {hdr.validate().name}''')


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    status = 0

    for path in sys.argv[1:]:
        try:
            hdr = MaryHeader.load(path)
        except (TruncatedInputException, OSError) as e:
            logger.error(f'failed to read header from \'{path}\': {e}')
            status = 1
            continue

        dump_header(path, hdr)

        if hdr.validate() is not Validity.VALID:
            status = 1

    sys.exit(status)
