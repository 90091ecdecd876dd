import logging
import time
from typing import Optional

from ldapgen.common import fully_qualified_class_name
from ldapgen.config import RunConfig
from ldapgen.generator import (
    FakeDataSource,
    FakerDataSource,
    LdapEntry,
    generate_record,
    to_ldap_entry,
)
from ldapgen.sink import SinkBase, create_sink

LOGGER = logging.getLogger(__name__)


def resolve_seed(seed: Optional[int]) -> int:
    if seed is None:
        return time.time_ns()
    return seed


def generate_batch(config: RunConfig, data_source: FakeDataSource) -> list[LdapEntry]:
    seed = resolve_seed(config.seed)
    LOGGER.info('generating %d entries under "%s" (seed=%d)...', config.count, config.suffix_dn, seed)
    data_source.seed(seed)

    batch = []
    for _ in range(config.count):
        record = generate_record(data_source, config.suffix_dn, config.template)
        batch.append(to_ldap_entry(record))
    return batch


def run(
        config: RunConfig,
        data_source: Optional[FakeDataSource] = None,
        sink: Optional[SinkBase] = None) -> list[LdapEntry]:
    """
    Validates the configuration, generates the entries and hands them
    over to exactly one sink (an LDIF file or an LDAP server).

    Nothing is generated or written when the configuration is invalid.
    """
    config.validate()

    batch = generate_batch(config, data_source or FakerDataSource())

    sink = sink or create_sink(config)
    LOGGER.debug('dispatching to %s', fully_qualified_class_name(type(sink)))
    sink.write(batch)

    return batch
