import json
import logging
from typing import Optional

from ldapgen.errors import InputError

LOGGER = logging.getLogger(__name__)

TEMPLATE_FIELDS = ('uid', 'cn', 'sn', 'mail')


class RecordTemplate:
    """
    Attribute values which override the generated ones.

    Empty or missing fields are filled with fake data by the generator.
    """
    def __init__(
            self, uid: Optional[str] = None, cn: Optional[str] = None,
            sn: Optional[str] = None, mail: Optional[str] = None):
        self.uid: Optional[str] = uid
        self.cn: Optional[str] = cn
        self.sn: Optional[str] = sn
        self.mail: Optional[str] = mail

    def __repr__(self):
        return 'RecordTemplate(uid=%r, cn=%r, sn=%r, mail=%r)' % (
            self.uid, self.cn, self.sn, self.mail)


def load_template(path: str) -> RecordTemplate:
    """
    Loads a template from a JSON file like this one:

        {"uid": "jdoe", "cn": "John Doe", "sn": "Doe", "mail": "jdoe@example.com"}
    """
    LOGGER.info('loading template at %s...', path)
    try:
        with open(path, 'r', encoding='utf8') as f:
            data = json.load(f)
    except OSError as err:
        raise InputError(path, err) from err
    except ValueError as err:
        raise InputError(path, 'invalid JSON: %s' % err) from err

    if not isinstance(data, dict):
        raise InputError(path, 'expected JSON object, got %s' % type(data).__name__)

    unknown = sorted(set(data) - set(TEMPLATE_FIELDS))
    if unknown:
        LOGGER.warning('ignoring unknown template fields: %s', unknown)

    values = {}
    for field in TEMPLATE_FIELDS:
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            raise InputError(path, 'field "%s" must be a string' % field)
        values[field] = value

    template = RecordTemplate(**values)
    LOGGER.debug('loaded %r', template)
    return template
