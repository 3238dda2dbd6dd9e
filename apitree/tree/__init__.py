from .patterns import PATH_SEPARATOR, ROOT_PATH_SEGMENT, UrlTreeNode
from .core import UrlTree

__all__ = ["PATH_SEPARATOR", "ROOT_PATH_SEGMENT", "UrlTree", "UrlTreeNode"]
