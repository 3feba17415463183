# this is a package

__version__ = "1.0.0"

from xedit.document import XML, make_parser
from xedit.serializer import XMLSerializer
from xedit.edit import (
    serialize, find_node_by_path, find_nodes_by_path,
    find_nodes_by_attribute, create_node, delete_node, delete_nodes,
    modify_node_text, modify_nodes_text, modify_node_attribute,
    modify_nodes_attribute, remove_node_attribute, node_text, node_attribute)
