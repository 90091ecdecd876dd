import abc
import logging
from typing import Callable, Optional

import ldap
import ldap.modlist
from ldap.ldapobject import LDAPObject

from ldapgen.common import encode_attrs
from ldapgen.errors import ConnectError, AuthError, SubmitError
from ldapgen.generator import LdapEntry
from ldapgen.sink.base import SinkBase

LOGGER = logging.getLogger(__name__)

# bind failures caused by the transport rather than by the credentials
CONNECTION_FAILURES = (ldap.SERVER_DOWN, ldap.CONNECT_ERROR, ldap.TIMEOUT)


def describe_ldap_error(err: Exception) -> str:
    if err.args and isinstance(err.args[0], dict):
        details = err.args[0]
        desc = details.get('desc') or type(err).__name__
        if details.get('info'):
            return '%s (%s)' % (desc, details['info'])
        return desc
    return str(err) or type(err).__name__


class DirectoryClient(abc.ABC):
    @abc.abstractmethod
    def connect(self) -> None:
        pass

    @abc.abstractmethod
    def authenticate(self, who: str, cred: str) -> None:
        pass

    @abc.abstractmethod
    def add(self, dn: str, attributes: dict[str, list[str]]) -> None:
        pass

    @abc.abstractmethod
    def close(self) -> None:
        pass


class LdapDirectoryClient(DirectoryClient):
    def __init__(self, url: str, timeout: float, tls_require_cert: bool = False):
        self.url: str = url
        self.timeout: float = timeout
        self.tls_require_cert: bool = tls_require_cert
        self.client: Optional[LDAPObject] = None

    def connect(self) -> None:
        LOGGER.debug('connecting to %s...', self.url)
        try:
            client = ldap.initialize(self.url)
            client.set_option(ldap.OPT_PROTOCOL_VERSION, ldap.VERSION3)
            client.set_option(ldap.OPT_NETWORK_TIMEOUT, self.timeout)
            client.set_option(ldap.OPT_TIMEOUT, self.timeout)
            if self.tls_require_cert:
                client.set_option(ldap.OPT_X_TLS_REQUIRE_CERT, ldap.OPT_X_TLS_DEMAND)
            else:
                LOGGER.warning('TLS certificate verification is disabled for %s', self.url)
                client.set_option(ldap.OPT_X_TLS_REQUIRE_CERT, ldap.OPT_X_TLS_NEVER)
            # TLS options only apply to a fresh context
            client.set_option(ldap.OPT_X_TLS_NEWCTX, 0)
        except (ldap.LDAPError, ValueError) as err:
            raise ConnectError('failed to connect to LDAP server %s: %s' % (
                self.url, describe_ldap_error(err))) from err
        self.client = client

    def authenticate(self, who: str, cred: str) -> None:
        LOGGER.debug('authenticate at %s as "%s"...', self.url, who)
        try:
            self.client.simple_bind_s(who=who, cred=cred)
        except CONNECTION_FAILURES as err:
            raise ConnectError('failed to connect to LDAP server %s: %s' % (
                self.url, describe_ldap_error(err))) from err
        except ldap.LDAPError as err:
            raise AuthError('failed to bind to LDAP server %s as "%s": %s' % (
                self.url, who, describe_ldap_error(err))) from err
        LOGGER.debug('authenticated')

    def add(self, dn: str, attributes: dict[str, list[str]]) -> None:
        self.client.add_s(dn, ldap.modlist.addModlist(encode_attrs(attributes)))

    def close(self) -> None:
        if self.client is None:
            return
        try:
            self.client.unbind_s()
        except ldap.LDAPError as err:
            LOGGER.warning('error while closing connection to %s: %s', self.url, err)
        finally:
            self.client = None


class LdapServerSink(SinkBase):
    """
    Adds entries to an LDAP server one by one, in batch order.

    The first rejected entry aborts the whole batch. Entries added before
    it stay on the server: there is no rollback.
    """
    def __init__(
            self, url: str, bind_dn: str, bind_password: str,
            timeout: float = 30.0, tls_require_cert: bool = False,
            client_factory: Optional[Callable[[], DirectoryClient]] = None):
        self.url: str = url
        self.bind_dn: str = bind_dn
        self.bind_password: str = bind_password
        self.client_factory = client_factory or (
            lambda: LdapDirectoryClient(url, timeout, tls_require_cert))

    @property
    def target(self) -> str:
        return 'LDAP server %s' % self.url

    def write_impl(self, batch: list[LdapEntry]) -> None:
        client = self.client_factory()
        try:
            client.connect()
            client.authenticate(self.bind_dn, self.bind_password)

            for idx, entry in enumerate(batch):
                LOGGER.debug('adding entry #%d "%s"...', idx + 1, entry.dn)
                try:
                    client.add(entry.dn, entry.attributes)
                except Exception as err:
                    LOGGER.error(
                        'entry #%d of %d rejected, %d entries were already added',
                        idx + 1, len(batch), idx)
                    raise SubmitError(entry.dn, describe_ldap_error(err)) from err
        finally:
            client.close()
