from ldapgen.config import RunConfig, MODE_FILE, MODE_NETWORK
from ldapgen.errors import ConfigError

from .base import SinkBase
from .ldif_file import LdifFileSink, read_ldif_file
from .ldap_server import DirectoryClient, LdapDirectoryClient, LdapServerSink


def create_sink(config: RunConfig) -> SinkBase:
    if config.mode == MODE_FILE:
        return LdifFileSink(config.ldif_file)
    elif config.mode == MODE_NETWORK:
        return LdapServerSink(
            url=config.ldap_url,
            bind_dn=config.bind_dn,
            bind_password=config.bind_password,
            timeout=config.timeout,
            tls_require_cert=config.tls_require_cert)
    else:
        raise ConfigError('unsupported mode: %s' % config.mode)
