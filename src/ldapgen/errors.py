class LdapGenError(Exception):
    kind = 'unknown'


class ConfigError(LdapGenError):
    kind = 'config'


class InputError(LdapGenError):
    kind = 'input'

    def __init__(self, path: str, reason):
        super().__init__('unable to load template from "%s": %s' % (path, reason))
        self.path = path


class OutputError(LdapGenError):
    kind = 'io'

    def __init__(self, path: str, reason):
        super().__init__('unable to write LDIF to "%s": %s' % (path, reason))
        self.path = path


class ConnectError(LdapGenError):
    kind = 'connection'


class AuthError(LdapGenError):
    kind = 'auth'


class SubmitError(LdapGenError):
    kind = 'submit'

    def __init__(self, dn: str, reason):
        super().__init__('failed to add entry "%s": %s' % (dn, reason))
        self.dn = dn
