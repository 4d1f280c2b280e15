import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from lxml import etree

from xliffsync import xmltree


def test_parse_document_keeps_declaration():
    root, declaration = xmltree.parse_document('<?xml version="1.0" encoding="UTF-8"?>\n<xliff version="1.2"/>')
    assert declaration == '<?xml version="1.0" encoding="UTF-8"?>'
    assert root.get('version') == '1.2'


def test_parse_document_without_declaration():
    root, declaration = xmltree.parse_document(b'<xliff version="2.0"/>')
    assert declaration is None
    assert xmltree.local_name(root) == 'xliff'


def test_parse_document_malformed():
    with pytest.raises(etree.XMLSyntaxError):
        xmltree.parse_document('<xliff version="1.2">')


def test_build_leaves_out_tail():
    root = etree.fromstring('<unit><source>Hi <x id="1"/></source> tail</unit>')
    assert xmltree.build(root[0]) == '<source>Hi <x id="1"/></source>'


def test_build_document_prefixes_declaration():
    root = etree.fromstring('<xliff version="1.2"/>')
    assert xmltree.build_document(root, '<?xml version="1.0"?>') == '<?xml version="1.0"?><xliff version="1.2"/>'
    assert xmltree.build_document(root) == '<xliff version="1.2"/>'


def test_local_name():
    root = etree.fromstring('<xliff xmlns="urn:oasis:names:tc:xliff:document:2.0"><!--c--><file/></xliff>')
    assert xmltree.local_name(root) == 'xliff'
    assert xmltree.local_name(root[0]) is None
    assert xmltree.local_name(root[1]) == 'file'


def test_find_node_depth_first_including_self():
    root = etree.fromstring('<a><b><c id="1"/></b><c id="2"/></a>')
    assert xmltree.find_node('a', root) is root
    assert xmltree.find_node('c', root).get('id') == '1'
    assert xmltree.find_node('d', root) is None
    assert xmltree.find_node('a', None) is None


def test_find_child_matches_attributes():
    unit = etree.fromstring('<trans-unit><note from="description">D</note><note from="meaning">M</note></trans-unit>')
    assert xmltree.find_child('note', unit).text == 'D'
    assert xmltree.find_child('note', unit, {'from': 'meaning'}).text == 'M'
    assert xmltree.find_child('note', unit, {'from': 'other'}) is None


def test_find_child_index():
    segment = etree.fromstring('<segment><!--c--><source/><target/></segment>')
    assert xmltree.find_child_index('source', segment) == 1
    assert xmltree.find_child_index('target', segment) == 2
    assert xmltree.find_child_index('note', segment) == -1


def test_new_element_takes_namespace():
    ns = 'urn:oasis:names:tc:xliff:document:1.2'
    unit = etree.fromstring('<trans-unit xmlns="{0}"/>'.format(ns))
    target = xmltree.new_element('target', unit)
    assert etree.QName(target).namespace == ns
    assert xmltree.local_name(target) == 'target'
    assert xmltree.new_element('target', etree.Element('unit')).tag == 'target'


def test_parse_document_bytes_use_declared_encoding():
    text = '<?xml version="1.0" encoding="ISO-8859-1"?>\n<xliff version="1.2"><source>Café</source></xliff>'
    root, declaration = xmltree.parse_document(text.encode('iso-8859-1'))
    assert declaration == '<?xml version="1.0" encoding="ISO-8859-1"?>'
    assert root[0].text == 'Café'


def test_parse_document_bytes_with_bom():
    text = '<?xml version="1.0" encoding="UTF-8"?><xliff version="2.0"/>'
    root, declaration = xmltree.parse_document(b'\xef\xbb\xbf' + text.encode('utf-8'))
    assert declaration == '<?xml version="1.0" encoding="UTF-8"?>'
    assert root.get('version') == '2.0'


def test_parse_document_str_with_bom():
    root, declaration = xmltree.parse_document('\ufeff<?xml version="1.0" encoding="UTF-8"?>\n<xliff version="2.0"/>')
    assert declaration == '<?xml version="1.0" encoding="UTF-8"?>'
    assert root.get('version') == '2.0'


def test_parse_document_large_text_node():
    big = 'a' * (11 * 1024 * 1024)
    root, _ = xmltree.parse_document('<xliff version="1.2"><source>' + big + '</source></xliff>')
    assert len(root[0].text) == len(big)
