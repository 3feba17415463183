# -*- coding: utf-8 -*-

"""
Tests for serializing trees and subtrees
"""

import unittest

from lxml import etree

from xedit import edit, serializer
from xedit.document import XML
from xedit.serializer import XMLSerializer

from .common_imports import (HelperTestCase, LIBRARY_XML, doctest,
                             fileInTestDir, make_suite)


class SerializerTestCase(HelperTestCase):

    def test_serialize_document(self):
        xml = self.library()
        self.assertEqual(LIBRARY_XML.rstrip('\n'), edit.serialize(xml))

    def test_serialize_subtree(self):
        xml = self.library()
        title = edit.find_node_by_path(xml.document, '//book[2]/title')
        self.assertEqual('<title>Book 2</title>', edit.serialize(xml, title))

    def test_serialize_without_tail(self):
        root = etree.XML('<a><b>text</b>tail</a>')
        self.assertEqual('<b>text</b>',
                         XMLSerializer().serialize_to_string(root[0]))

    def test_serialize_escapes(self):
        xml = XML.fromstring('<a/>')
        edit.modify_node_text(xml.root, '<&>')
        edit.modify_node_attribute(xml.root, 'q', '"')
        self.assertEqual('<a q="&quot;">&lt;&amp;&gt;</a>', edit.serialize(xml))

    def test_serialize_keeps_top_level_siblings(self):
        xml = XML.parse(fileInTestDir('library.xml'))
        result = edit.serialize(xml)
        self.assertTrue(result.startswith('<!-- a small catalogue -->'))
        self.assertTrue('<library name="city">' in result)

    def test_xml_declaration(self):
        xml = XML.fromstring(
            '<a>ä</a>',
            serializer=XMLSerializer(xml_declaration=True, encoding='UTF-8'))
        self.assertEqual(
            "<?xml version='1.0' encoding='UTF-8'?>\n<a>ä</a>",
            edit.serialize(xml))

    def test_xml_declaration_needs_encoding(self):
        s = XMLSerializer(xml_declaration=True)
        self.assertEqual('<a/>', s.serialize_to_string(etree.XML('<a/>')))

    def test_xml_declaration_unicode(self):
        s = XMLSerializer(xml_declaration=True, encoding='unicode')
        self.assertEqual('<a/>', s.serialize_to_string(etree.XML('<a/>')))

    def test_encoding(self):
        s = XMLSerializer(encoding='ASCII')
        result = s.serialize_to_string(etree.XML('<a>ä</a>'))
        self.assertEqual('<a>&#228;</a>', result)
        self.assertTrue(isinstance(result, str))

    def test_pretty_print(self):
        s = XMLSerializer(pretty_print=True)
        self.assertEqual('<a>\n  <b/>\n</a>\n',
                         s.serialize_to_string(etree.XML('<a><b/></a>')))

    def test_method_text(self):
        s = XMLSerializer(method='text')
        self.assertEqual('xy',
                         s.serialize_to_string(etree.XML('<a>x<b>y</b></a>')))

    def test_serialize_text_node_fails(self):
        xml = self.library()
        text = edit.find_node_by_path(xml.document, '//title/text()')
        self.assertRaises(TypeError, edit.serialize, xml, text)

    def test_repr(self):
        self.assertEqual("<XMLSerializer method='xml' encoding=None>",
                         repr(XMLSerializer()))


def test_suite():
    suite = make_suite(SerializerTestCase)
    suite.addTests(doctest.DocTestSuite(serializer))
    return suite

test_suite.__test__ = False  # run by unittest, pytest collects the cases

if __name__ == '__main__':
    unittest.main(defaultTest='test_suite')
