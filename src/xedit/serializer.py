"""
Serialization of trees and subtrees back to text.
"""

from lxml import etree


class XMLSerializer(object):
    """Serializer capability of a document handle.

    The keyword options are those of ``lxml.etree.tostring()``.  The
    result is always text, never bytes::

        >>> from lxml import etree
        >>> root = etree.XML('<a><b>text</b>tail</a>')
        >>> XMLSerializer().serialize_to_string(root[0])
        '<b>text</b>'
        >>> print(XMLSerializer(xml_declaration=True, encoding='UTF-8')
        ...       .serialize_to_string(root))
        <?xml version='1.0' encoding='UTF-8'?>
        <a><b>text</b>tail</a>

    Serialising a single node leaves out the tail text that follows it
    in its parent.
    """
    def __init__(self, method="xml", pretty_print=False, xml_declaration=False,
                 encoding=None):
        self.method = method
        self.pretty_print = pretty_print
        self.xml_declaration = xml_declaration
        self.encoding = encoding

    def serialize_to_string(self, node):
        encoding = self.encoding or "unicode"
        # lxml refuses a declaration for unicode output
        xml_declaration = self.xml_declaration and encoding.lower() != "unicode"
        result = etree.tostring(
            node, method=self.method, pretty_print=self.pretty_print,
            xml_declaration=xml_declaration,
            encoding=encoding, with_tail=False)
        if isinstance(result, bytes):
            result = result.decode(encoding)
        return result

    def __repr__(self):
        return '<%s method=%r encoding=%r>' % (
            self.__class__.__name__, self.method, self.encoding)
