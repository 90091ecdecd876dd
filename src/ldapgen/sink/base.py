import abc
import logging

from ldapgen.generator import LdapEntry

LOGGER = logging.getLogger(__name__)


class SinkBase(abc.ABC):
    @property
    @abc.abstractmethod
    def target(self) -> str:
        pass

    def write(self, batch: list[LdapEntry]) -> None:
        LOGGER.info('writing %d entries to %s...', len(batch), self.target)
        self.write_impl(batch)
        LOGGER.info('wrote %d entries to %s', len(batch), self.target)

    @abc.abstractmethod
    def write_impl(self, batch: list[LdapEntry]) -> None:
        raise NotImplementedError
