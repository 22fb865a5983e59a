"""Tests for scheme_checker.core.xml_access — read-only lxml adapter."""

import os

import pytest
from lxml import etree
from scheme_checker.core.xml_access import load_document, parse_document, query

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')
BASELINE_XML = os.path.join(FIXTURES_DIR, 'baseline.xml')

DOC = """<?xml version="1.0" encoding="UTF-8"?>
<scheme>
  <attributes>
    <option name="FIRST" extra="x">
      <!-- note -->
      <value>
        <option name="FOREGROUND" value="ffffff" />
      </value>
      <value />
    </option>
    <option />
  </attributes>
</scheme>
"""


@pytest.fixture
def doc():
    return parse_document(DOC)


class TestQuery:
    def test_document_order(self, doc):
        nodes = query(doc, '/scheme/attributes/option')
        assert [n.attribute('name') for n in nodes] == ['FIRST', None]

    def test_no_match_is_empty(self, doc):
        assert query(doc, '/scheme/colors/option') == []

    def test_malformed_path_raises(self, doc):
        with pytest.raises(etree.XPathError):
            query(doc, '/scheme/attributes/option[')

    def test_non_node_result_rejected(self, doc):
        with pytest.raises(TypeError):
            query(doc, 'count(/scheme/attributes/option)')

    def test_string_results_rejected(self, doc):
        with pytest.raises(TypeError):
            query(doc, '/scheme/attributes/option/@name')

    def test_load_from_disk(self):
        nodes = query(load_document(BASELINE_XML), '/scheme/colors/option')
        assert len(nodes) == 4


class TestXNode:
    def test_attributes_copied(self, doc):
        node = query(doc, '/scheme/attributes/option')[0]
        assert dict(node.attributes) == {'name': 'FIRST', 'extra': 'x'}

    def test_attributes_read_only(self, doc):
        node = query(doc, '/scheme/attributes/option')[0]
        with pytest.raises(TypeError):
            node.attributes['name'] = 'other'

    def test_attributes_detached_from_document(self, doc):
        node = query(doc, '/scheme/attributes/option')[0]
        doc.getroot().find('attributes/option').set('name', 'CHANGED')
        assert node.attribute('name') == 'FIRST'

    def test_missing_attribute(self, doc):
        node = query(doc, '/scheme/attributes/option')[1]
        assert node.attribute('name') is None

    def test_children_skip_comments(self, doc):
        node = query(doc, '/scheme/attributes/option')[0]
        assert [c.tag for c in node.children()] == ['value', 'value']

    def test_children_with_comments(self, doc):
        node = query(doc, '/scheme/attributes/option')[0]
        kids = node.children(elements_only=False)
        assert [c.tag for c in kids] == [None, 'value', 'value']
        assert dict(kids[0].attributes) == {}

    def test_children_by_tag(self, doc):
        node = query(doc, '/scheme')[0]
        assert [c.tag for c in node.children('attributes')] == ['attributes']
        assert node.children('colors') == []

    def test_first_child(self, doc):
        node = query(doc, '/scheme/attributes/option')[0]
        value = node.first_child('value')
        assert value is not None
        grandchildren = value.children()
        assert grandchildren[0].attribute('value') == 'ffffff'

    def test_first_child_absent(self, doc):
        node = query(doc, '/scheme/attributes/option')[1]
        assert node.first_child('value') is None


class TestParseDocument:
    def test_bytes_input(self):
        doc = parse_document(b'<scheme><colors /></scheme>')
        assert len(query(doc, '/scheme/colors')) == 1

    def test_malformed_raises(self):
        with pytest.raises(etree.XMLSyntaxError):
            parse_document('<scheme><colors></scheme>')

    def test_str_ignores_declared_encoding(self):
        doc = parse_document('<?xml version="1.0" encoding="ISO-8859-1"?><scheme><option name="café" /></scheme>')
        assert query(doc, '/scheme/option')[0].attribute('name') == 'café'

    def test_bytes_honour_declared_encoding(self):
        text = '<?xml version="1.0" encoding="ISO-8859-1"?><scheme><option name="café" /></scheme>'
        doc = parse_document(text.encode('iso-8859-1'))
        assert query(doc, '/scheme/option')[0].attribute('name') == 'café'
