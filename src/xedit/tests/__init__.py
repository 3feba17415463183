"""
Test suite for xedit.
"""
