import itertools

import ldap
import pytest

from ldapgen.generator import FakeDataSource
from ldapgen.sink import DirectoryClient


class CountingDataSource(FakeDataSource):
    """Predictable data source: every value carries a running number."""
    def __init__(self):
        self.seeds = []
        self.calls = 0
        self.counter = itertools.count(1)

    def seed(self, value: int) -> None:
        self.seeds.append(value)

    def _next(self, prefix):
        self.calls += 1
        return '%s%d' % (prefix, next(self.counter))

    def first_name(self) -> str:
        return self._next('First')

    def last_name(self) -> str:
        return self._next('Last')

    def email(self) -> str:
        return self._next('mail') + '@example.com'

    def username(self) -> str:
        return self._next('user')


class RecordingClient(DirectoryClient):
    def __init__(self, fail_on_dn=None, connect_error=None, auth_error=None, add_error=None):
        self.fail_on_dn = fail_on_dn
        self.add_error = add_error or ldap.ALREADY_EXISTS({'desc': 'Already exists'})
        self.connect_error = connect_error
        self.auth_error = auth_error
        self.events = []
        self.added = []

    def connect(self) -> None:
        self.events.append('connect')
        if self.connect_error:
            raise self.connect_error

    def authenticate(self, who: str, cred: str) -> None:
        self.events.append(('authenticate', who, cred))
        if self.auth_error:
            raise self.auth_error

    def add(self, dn: str, attributes: dict[str, list[str]]) -> None:
        self.events.append(('add', dn))
        if dn == self.fail_on_dn:
            raise self.add_error
        self.added.append((dn, attributes))

    def close(self) -> None:
        self.events.append('close')


@pytest.fixture
def data_source():
    return CountingDataSource()


@pytest.fixture
def suffix_dn():
    return 'ou=employee,ou=users,o=rtx'


@pytest.fixture
def make_client():
    return RecordingClient
