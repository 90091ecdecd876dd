import logging
from typing import Optional

from ldapgen.errors import ConfigError
from ldapgen.template import RecordTemplate

LOGGER = logging.getLogger(__name__)

MODE_FILE = 'file'
MODE_NETWORK = 'network'
MODES = (MODE_FILE, MODE_NETWORK)

DEFAULT_LDIF_FILE = 'fake_users.ldif'
DEFAULT_TIMEOUT = 30.0


class RunConfig:
    def __init__(
            self,
            suffix_dn: str,
            count: int = 1,
            mode: str = MODE_FILE,
            ldif_file: str = DEFAULT_LDIF_FILE,
            ldap_url: Optional[str] = None,
            bind_dn: Optional[str] = None,
            bind_password: Optional[str] = None,
            template: Optional[RecordTemplate] = None,
            seed: Optional[int] = 0,
            timeout: float = DEFAULT_TIMEOUT,
            tls_require_cert: bool = False):
        self.suffix_dn: str = suffix_dn
        self.count: int = count
        self.mode: str = mode
        self.ldif_file: str = ldif_file
        self.ldap_url: Optional[str] = ldap_url
        self.bind_dn: Optional[str] = bind_dn
        self.bind_password: Optional[str] = bind_password
        self.template: Optional[RecordTemplate] = template
        # None means "seed from the current time"
        self.seed: Optional[int] = seed
        self.timeout: float = timeout
        self.tls_require_cert: bool = tls_require_cert

    def validate(self) -> None:
        if not self.suffix_dn:
            raise ConfigError('suffix required (--suffix-dn)')

        if self.count < 1:
            raise ConfigError('count must be >= 1 (got %d)' % self.count)

        if self.mode not in MODES:
            raise ConfigError('invalid mode "%s" (known: %s)' % (self.mode, list(MODES)))

        if self.mode == MODE_NETWORK:
            missing = [
                option for option, value in [
                    ('--ldap-url', self.ldap_url),
                    ('--bind-dn', self.bind_dn),
                    ('--bind-password', self.bind_password),
                ] if not value
            ]
            if missing:
                raise ConfigError(
                    'missing network credentials: mode "%s" requires %s' % (
                        MODE_NETWORK, ', '.join(missing)))

        LOGGER.debug('configuration is valid (mode=%s, count=%d)', self.mode, self.count)
