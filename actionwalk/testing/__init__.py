"""Testing utilities for action-walk consumers."""

from .fixtures import ExpectedTree, Fifo, Link, LinkInfo, TreeBuilder, enumerate_tree

__all__ = ['TreeBuilder', 'Link', 'Fifo', 'LinkInfo', 'ExpectedTree', 'enumerate_tree']
