"""Helpers for finding, creating, deleting and modifying nodes.

All functions take the tree or node they work on as explicit argument
and act on the live tree; no node is ever copied.  Errors raised by lxml
or cssselect are passed on unchanged.

Usage::

    >>> from xedit import XML, edit
    >>> xml = XML.fromstring(
    ...     '<library><book id="1"><title>Book 1</title></book>'
    ...     '<book id="2"><title>Book 2</title></book></library>')
    >>> len(edit.find_nodes_by_path(xml.document, '//library/book'))
    2
    >>> edit.delete_node(edit.find_node_by_path(xml.document, '//library/book'))
    >>> title = edit.find_node_by_path(xml.document, '//library/book[1]/title')
    >>> edit.node_text(title)
    'Book 2'
    >>> edit.modify_node_attribute(title.getparent(), 'id', '42')
    >>> edit.serialize(xml)
    '<library><book id="42"><title>Book 2</title></book></library>'
"""

import logging

from lxml import etree

from xedit.cssselect import AttributeSelector

logger = logging.getLogger(__name__)

__all__ = [
    'serialize', 'find_node_by_path', 'find_nodes_by_path',
    'find_nodes_by_attribute', 'create_node', 'delete_node', 'delete_nodes',
    'modify_node_text', 'modify_nodes_text', 'modify_node_attribute',
    'modify_nodes_attribute', 'remove_node_attribute', 'node_text',
    'node_attribute',
]


def _is_text_node(node):
    # XPath text() results are "smart strings" that know their parent
    return getattr(node, 'is_text', False) or getattr(node, 'is_tail', False)


def _is_attribute_node(node):
    return getattr(node, 'is_attribute', False)


def _evaluate(xdoc, path, namespaces):
    result = xdoc.xpath(path, namespaces=namespaces)
    if not isinstance(result, list):
        raise TypeError(
            "XPath expression %r does not select a node-set, got %r" % (
                path, result))
    return result


def _drop_tree(node, parent):
    # keep the tail text in the tree, it belongs to the parent
    if node.tail:
        previous = node.getprevious()
        if previous is None:
            parent.text = (parent.text or '') + node.tail
        else:
            previous.tail = (previous.tail or '') + node.tail
    parent.remove(node)


def serialize(xmlp, root=None):
    """Serialize the document of the handle ``xmlp``, or the subtree
    below ``root`` if given, using the handle's serializer.
    """
    if root is None:
        root = xmlp.document
    return xmlp.serializer.serialize_to_string(root)


def find_node_by_path(xdoc, path, namespaces=None):
    """Return the first node selected by the XPath expression ``path``
    in document order, or None if nothing matches.

    ``xdoc`` is an ElementTree or an element serving as context node.
    """
    result = _evaluate(xdoc, path, namespaces)
    if not result:
        return None
    return result[0]


def find_nodes_by_path(xdoc, path, namespaces=None):
    """Return the list of nodes selected by the XPath expression ``path``
    in document order.
    """
    return _evaluate(xdoc, path, namespaces)


def find_nodes_by_attribute(root, node, attribute, value, namespaces=None):
    """Return the elements named ``node`` below ``root`` whose attribute
    ``attribute`` has the value ``value``.

    The names and the value are interpolated into the CSS selector
    ``node[attribute='value']`` without escaping.
    """
    return AttributeSelector(node, attribute, value,
                             namespaces=namespaces)(root)


def create_node(xdoc, parent, name):
    """Append a new, empty element called ``name`` to ``parent``.

    The element is created by the document ``xdoc`` so that it uses the
    same parser setup as the rest of the tree.
    """
    if isinstance(xdoc, etree._ElementTree):
        xdoc = xdoc.getroot()
    parent.append(xdoc.makeelement(name))
    logger.debug("created element %r below %r", name, parent.tag)


def delete_node(node):
    """Remove ``node`` from its parent.

    Nothing happens for nodes without a parent (the document element,
    attributes, plain strings).  Text following a removed element is
    kept in the tree.  A text node is deleted by clearing the text it
    stands for.
    """
    if _is_text_node(node):
        parent = node.getparent()
        if node.is_tail:
            parent.tail = None
        else:
            parent.text = None
        logger.debug("deleted text node of %r", parent.tag)
        return
    if _is_attribute_node(node):
        return
    getparent = getattr(node, 'getparent', None)
    if getparent is None:
        return
    parent = getparent()
    if parent is None:
        return
    _drop_tree(node, parent)
    logger.debug("deleted element %r from %r", node.tag, parent.tag)


def delete_nodes(nodes):
    """Remove each of ``nodes`` from its parent.

    The removals are not transactional.  If one of them fails, the
    remaining nodes are still removed and the first error is raised
    afterwards.
    """
    error = None
    for node in nodes:
        try:
            delete_node(node)
        except Exception as e:
            logger.debug("failed to delete %r: %s", node, e)
            if error is None:
                error = e
    if error is not None:
        raise error


def modify_node_text(node, new_text):
    """Replace the text content of ``node`` by ``new_text``.

    For elements, all children are removed first, as setting
    ``textContent`` does in the DOM.  Text and attribute nodes returned
    by an XPath expression change the text or attribute value they were
    read from.  A whole document is left unchanged.
    """
    if isinstance(node, etree._ElementTree):
        return
    if _is_text_node(node):
        parent = node.getparent()
        if node.is_tail:
            parent.tail = new_text or None
        else:
            parent.text = new_text or None
        return
    if _is_attribute_node(node):
        node.getparent().set(node.attrname, new_text)
        return
    if isinstance(node.tag, str):
        del node[:]
    node.text = new_text or None
    logger.debug("modified text of %r", node.tag)


def modify_nodes_text(nodes, new_text):
    for node in nodes:
        modify_node_text(node, new_text)


def modify_node_attribute(node, attribute, new_value):
    """Set the attribute ``attribute`` of the element ``node``, creating
    it if it does not exist yet.
    """
    node.set(attribute, new_value)
    logger.debug("set attribute %r of %r", attribute, node.tag)


def modify_nodes_attribute(nodes, attribute, new_value):
    for node in nodes:
        modify_node_attribute(node, attribute, new_value)


def remove_node_attribute(node, attribute):
    """Remove the attribute ``attribute`` from ``node`` if present.
    """
    if node.attrib.pop(attribute, None) is not None:
        logger.debug("removed attribute %r of %r", attribute, node.tag)


def node_text(node):
    """Return the text content of ``node``.

    This is the concatenated text of an element and all its descendants,
    the value of a text or attribute node, and None for a whole document.
    """
    if isinstance(node, str):
        return str(node)
    if isinstance(node, etree._ElementTree):
        return None
    return str(node.xpath('string()'))


def node_attribute(node, attribute):
    "Return the value of an attribute of ``node``, or None if it is unset."
    return node.get(attribute)
