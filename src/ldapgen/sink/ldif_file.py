import io
import logging
import os

import ldif

from ldapgen.common import encode_attrs, decode_attrs
from ldapgen.errors import OutputError
from ldapgen.generator import LdapEntry
from ldapgen.sink.base import SinkBase

LOGGER = logging.getLogger(__name__)


class LdifFileSink(SinkBase):
    # owner can read/write, everybody else can only read
    FILE_MODE = 0o644

    def __init__(self, path: str):
        self.path: str = path

    @property
    def target(self) -> str:
        return 'LDIF file "%s"' % self.path

    def write_impl(self, batch: list[LdapEntry]) -> None:
        try:
            text = serialize(batch)
        except (ValueError, TypeError) as err:
            raise OutputError(self.path, 'serialization failed: %s' % err) from err

        if os.path.exists(self.path):
            LOGGER.warning('overwriting existing file "%s"', self.path)

        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.FILE_MODE)
            with os.fdopen(fd, 'w', encoding='utf8') as f:
                f.write(text)
        except OSError as err:
            raise OutputError(self.path, err) from err


def serialize(batch: list[LdapEntry]) -> str:
    with io.StringIO() as buffer:
        writer = ldif.LDIFWriter(buffer)
        for entry in batch:
            writer.unparse(entry.dn, encode_attrs(entry.attributes))
        return buffer.getvalue()


def read_ldif_file(path: str) -> list[LdapEntry]:
    LOGGER.debug('reading LDIF at %s...', path)
    with open(path, 'r', encoding='utf8') as f:
        parser = ldif.LDIFRecordList(f)
        parser.parse()
    return [
        LdapEntry(dn, decode_attrs(entry))
        for dn, entry in parser.all_records
    ]
