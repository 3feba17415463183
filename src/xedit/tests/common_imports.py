"""
Common helpers for the xedit tests.
"""

import doctest
import os.path
import unittest

from io import BytesIO, StringIO

from lxml import etree

from xedit import XML

LIBRARY_XML = '''\
<library>
  <book id="1">
    <title>Book 1</title>
  </book>
  <book id="2">
    <title>Book 2</title>
  </book>
</library>
'''


def make_suite(*test_classes):
    loader = unittest.defaultTestLoader
    suite = unittest.TestSuite()
    for test_class in test_classes:
        suite.addTests(loader.loadTestsFromTestCase(test_class))
    return suite


class HelperTestCase(unittest.TestCase):
    def parse(self, text, parser=None):
        f = BytesIO(text) if isinstance(text, bytes) else StringIO(text)
        return etree.parse(f, parser=parser)

    def library(self):
        return XML.fromstring(LIBRARY_XML)


def fileInTestDir(name):
    _testdir = os.path.dirname(__file__)
    return os.path.join(_testdir, name)
