"""
The document handle: a parsed tree together with the parser that built it
and the serializer that writes it back.
"""

import logging

from lxml import etree

from xedit.serializer import XMLSerializer

logger = logging.getLogger(__name__)

__all__ = ['XML', 'make_parser', 'XML_MIME_TYPES', 'HTML_MIME_TYPES']

XML_MIME_TYPES = frozenset([
    'text/xml', 'application/xml', 'application/xhtml+xml', 'image/svg+xml',
])
HTML_MIME_TYPES = frozenset(['text/html'])


def make_parser(mime_type='text/xml', **kwargs):
    """Create a parser for documents of the given MIME type.

    Keyword arguments are passed on to ``etree.XMLParser`` or
    ``etree.HTMLParser``.
    """
    if mime_type in XML_MIME_TYPES:
        return etree.XMLParser(**kwargs)
    if mime_type in HTML_MIME_TYPES:
        return etree.HTMLParser(**kwargs)
    raise ValueError("Unsupported MIME type: %r" % (mime_type,))


class XML(object):
    """A document handle.

    Holds the ``parser``, the ``serializer`` and the parsed ``document``
    (an ElementTree).  The helper functions in `xedit.edit` borrow it for
    the duration of a call::

        >>> xml = XML.fromstring('<library><book id="1"/></library>')
        >>> xml.root.tag
        'library'
        >>> xml.serializer.serialize_to_string(xml.document)
        '<library><book id="1"/></library>'
    """
    def __init__(self, parser=None, serializer=None, document=None):
        if parser is None:
            parser = make_parser()
        if serializer is None:
            serializer = XMLSerializer()
        self.parser = parser
        self.serializer = serializer
        self.document = document

    @classmethod
    def fromstring(cls, text, mime_type='text/xml', parser=None,
                   serializer=None):
        """Parse ``text`` into a new document handle.

        ``mime_type`` selects the parser when none is passed in, like the
        type argument of DOM's ``parseFromString()``.
        """
        if parser is None:
            parser = make_parser(mime_type)
        root = etree.fromstring(text, parser)
        if root is None:
            raise etree.ParserError("Document is empty")
        logger.debug("parsed %s document with root element %r",
                     mime_type, root.tag)
        return cls(parser, serializer, root.getroottree())

    @classmethod
    def parse(cls, source, mime_type='text/xml', parser=None,
              serializer=None):
        """Parse a file name, path or file-like object into a new handle.
        """
        if parser is None:
            parser = make_parser(mime_type)
        tree = etree.parse(source, parser)
        if tree.getroot() is None:
            raise etree.ParserError("Document is empty")
        logger.debug("parsed %s document from %r", mime_type,
                     tree.docinfo.URL)
        return cls(parser, serializer, tree)

    @property
    def root(self):
        "The document element, or None before a document was set."
        if self.document is None:
            return None
        return self.document.getroot()

    def __repr__(self):
        root = self.root
        return '<%s %s for %r>' % (
            self.__class__.__name__,
            hex(abs(id(self)))[2:],
            root.tag if root is not None else None)
