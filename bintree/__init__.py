"""Binary trees with parent links: construction, traversal, measurement and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["node", "traverse", "measure", "printer"]