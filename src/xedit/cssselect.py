"""Attribute lookups based on CSS selectors.

This module selects elements by the value of one of their attributes.
See the `AttributeSelector` class for details.

This is a thin wrapper around cssselect.
"""

from lxml import etree

try:
    from cssselect import (GenericTranslator, SelectorError,
                           SelectorSyntaxError, ExpressionError)
except ImportError:
    raise ImportError('cssselect seems not to be installed. '
                      'See https://pypi.org/project/cssselect/')


__all__ = ['SelectorError', 'SelectorSyntaxError', 'ExpressionError',
           'AttributeSelector', 'attribute_selector']


def attribute_selector(node, attribute, value):
    """Build the CSS selector text matching ``node[attribute='value']``.

    The values are interpolated as they are, a value containing a
    single quote yields a selector that cssselect refuses to parse::

        >>> attribute_selector('book', 'id', '1')
        "book[id='1']"
    """
    return "%s[%s='%s']" % (node, attribute, value)


class AttributeSelector(etree.XPath):
    """A CSS attribute selector.

    Usage::

        >>> from lxml import etree
        >>> from xedit.cssselect import AttributeSelector
        >>> select = AttributeSelector("book", "id", "2")

        >>> root = etree.XML('<library><book id="1"/><book id="2"/></library>')
        >>> [ el.get("id") for el in select(root) ]
        ['2']

    Element names are matched case-sensitively, as XML requires.  Like
    ``querySelectorAll()``, calling the selector on an element only
    returns its descendants, never the element itself::

        >>> [ el.tag for el in AttributeSelector("library", "id", "x")(
        ...     etree.XML('<library id="x"><library id="x"/></library>')) ]
        ['library']
    """
    def __init__(self, node, attribute, value, namespaces=None):
        self.css = attribute_selector(node, attribute, value)
        path = GenericTranslator().css_to_xpath(self.css)
        etree.XPath.__init__(self, path, namespaces=namespaces)

    def __call__(self, root, **variables):
        result = etree.XPath.__call__(self, root, **variables)
        if etree.iselement(root):
            result = [el for el in result if el is not root]
        return result

    def __repr__(self):
        return '<%s %s for %r>' % (
            self.__class__.__name__,
            hex(abs(id(self)))[2:],
            self.css)
