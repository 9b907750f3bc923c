import struct

import pytest

from maryhdr.enum import MAGIC, VERSION


@pytest.fixture
def raw_header():
    """Build the 12 bytes of a header with arbitrary field values."""
    def _raw_header(type, magic=MAGIC, version=VERSION):
        return struct.pack('>iii', magic, version, type)

    return _raw_header
