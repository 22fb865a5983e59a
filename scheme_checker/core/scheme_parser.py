"""Parser for colour scheme XML files.

Reads the two option lists of a scheme document:

  /scheme/attributes/option[@name, @baseAttributes]/value/option[@name, @value]
  /scheme/colors/option[@name, @value]

An attribute with baseAttributes becomes {'inherit': <base>} and its children
are ignored. Otherwise the options under its first <value> child become the
property mapping, keyed by lower-cased name. Missing name/value attributes
default to the empty string. Later duplicates overwrite earlier ones.
"""

import os
from os import PathLike

from lxml import etree

from scheme_checker.core.types import INHERIT, ColorScheme, PropertyMap
from scheme_checker.core.xml_access import XNode, load_document, parse_document, query

ATTRIBUTES_PATH = '/scheme/attributes/option'
COLORS_PATH = '/scheme/colors/option'


class SchemeNotFoundError(FileNotFoundError):
    """The scheme path does not point to an existing file."""

    def __init__(self, path: str | PathLike):
        self.path = os.path.abspath(path)
        super().__init__(f'Scheme file "{self.path}" does not exist')


def parse_scheme_file(path: str | PathLike) -> ColorScheme:
    """Parse a colour scheme file from disk."""
    if not os.path.isfile(path):
        raise SchemeNotFoundError(path)
    return parse_scheme_document(load_document(path))


def parse_scheme_string(text: str | bytes) -> ColorScheme:
    """Parse a colour scheme from a string."""
    return parse_scheme_document(parse_document(text))


def parse_scheme_document(document: etree._ElementTree) -> ColorScheme:
    attributes = {}
    for option in query(document, ATTRIBUTES_PATH):
        attributes[option.attribute('name') or ''] = _extract_properties(option)

    colors = {}
    for option in query(document, COLORS_PATH):
        colors[option.attribute('name') or ''] = option.attribute('value') or ''

    return ColorScheme(attributes=attributes, colors=colors)


def _extract_properties(option: XNode) -> PropertyMap:
    base = option.attribute('baseAttributes')
    if base is not None:
        return {INHERIT: base}

    value = option.first_child('value')
    if value is None:
        return {}
    return {(prop.attribute('name') or '').lower(): prop.attribute('value') or '' for prop in value.children()}
