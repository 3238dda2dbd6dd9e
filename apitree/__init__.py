from apitree.errors import DuplicateLabelError, InvalidArgumentError, TreeError
from apitree.tree import UrlTree, UrlTreeNode
from apitree.docs.mermaid import MERMAID_COLOR_SCHEME, MermaidGenerator, sanitize_node

__version__ = "0.1"

__all__ = [
    "DuplicateLabelError",
    "InvalidArgumentError",
    "MERMAID_COLOR_SCHEME",
    "MermaidGenerator",
    "TreeError",
    "UrlTree",
    "UrlTreeNode",
    "sanitize_node",
]
