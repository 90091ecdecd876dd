import logging
from typing import List, Dict

LOGGER = logging.getLogger(__name__)


def encode_text(value: str) -> bytes:
    return value.encode('utf8')


def decode_text(value: bytes):
    return value.decode('utf8')


def encode_attrs(attributes: Dict[str, List[str]]) -> Dict[str, List[bytes]]:
    return {
        name: [encode_text(value) for value in values]
        for name, values in attributes.items()
    }


def decode_attrs(entry: Dict[str, List[bytes]]) -> Dict[str, List[str]]:
    return {
        name: [decode_text(value) for value in values]
        for name, values in entry.items()
    }


def single_value(value: List[str]):
    if len(value) > 1:
        LOGGER.warning('unexpectedly more than one value for attribute: "%s"', value)
    return value[0]


def load_text_attr(attributes: Dict, attr_name: str):
    if attr_name not in attributes:
        return None
    return single_value(attributes[attr_name])


def fully_qualified_class_name(klass):
    module = klass.__module__
    if module == 'builtins':
        return klass.__qualname__
    return module + '.' + klass.__qualname__
