import abc
import logging
import typing
from typing import Optional

import faker

from ldapgen.common import load_text_attr
from ldapgen.template import RecordTemplate

LOGGER = logging.getLogger(__name__)

OBJECT_CLASS = 'inetOrgPerson'


PersonRecord = typing.NamedTuple('PersonRecord', [
    ('dn', str),
    ('uid', str),
    ('cn', str),
    ('sn', str),
    ('mail', str),
])


LdapEntry = typing.NamedTuple('LdapEntry', [
    ('dn', str),
    ('attributes', dict[str, list[str]]),
])


class FakeDataSource(abc.ABC):
    @abc.abstractmethod
    def seed(self, value: int) -> None:
        pass

    @abc.abstractmethod
    def first_name(self) -> str:
        pass

    @abc.abstractmethod
    def last_name(self) -> str:
        pass

    @abc.abstractmethod
    def email(self) -> str:
        pass

    @abc.abstractmethod
    def username(self) -> str:
        pass


class FakerDataSource(FakeDataSource):
    def __init__(self, locale: Optional[str] = None):
        # own instance so that seeding does not leak into other Faker users
        self.fake = faker.Faker(locale)

    def seed(self, value: int) -> None:
        LOGGER.debug('seeding fake data source with %d', value)
        self.fake.seed_instance(value)

    def first_name(self) -> str:
        return self.fake.first_name()

    def last_name(self) -> str:
        return self.fake.last_name()

    def email(self) -> str:
        return self.fake.email()

    def username(self) -> str:
        return self.fake.user_name()


def make_dn(uid: str, suffix_dn: str) -> str:
    return 'uid={},{}'.format(uid, suffix_dn)


def generate_record(
        data_source: FakeDataSource, suffix_dn: str,
        template: Optional[RecordTemplate] = None) -> PersonRecord:
    """
    Generates a single person using fake data, then applies the non-empty
    fields of the template on top of it.

    The display name is not drawn on its own: unless the template sets it,
    it is built as "<first name> <last name>".
    """
    first = data_source.first_name()
    last = data_source.last_name()
    email = data_source.email()
    uid = data_source.username()

    if template is not None:
        uid = template.uid or uid
        last = template.sn or last
        email = template.mail or email

    cn = '%s %s' % (first, last)
    if template is not None and template.cn:
        cn = template.cn

    return PersonRecord(
        dn=make_dn(uid, suffix_dn),
        uid=uid,
        cn=cn,
        sn=last,
        mail=email,
    )


def to_ldap_entry(record: PersonRecord) -> LdapEntry:
    return LdapEntry(record.dn, {
        'objectClass': [OBJECT_CLASS],
        'uid': [record.uid],
        'cn': [record.cn],
        'sn': [record.sn],
        'mail': [record.mail],
    })


def from_ldap_entry(entry: LdapEntry) -> PersonRecord:
    attributes = entry.attributes
    return PersonRecord(
        dn=entry.dn,
        uid=load_text_attr(attributes, 'uid'),
        cn=load_text_attr(attributes, 'cn'),
        sn=load_text_attr(attributes, 'sn'),
        mail=load_text_attr(attributes, 'mail'),
    )
