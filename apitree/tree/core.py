import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, TextIO

from apitree.config.settings import MermaidConfig
from apitree.docs.mermaid import MermaidGenerator
from apitree.errors import (
    check_argument_not_null,
    check_argument_not_null_or_empty,
)
from .patterns import ROOT_PATH_SEGMENT, UrlTreeNode

logger = logging.getLogger(__name__)


def _document_paths(source: Any) -> Optional[Mapping[str, Any]]:
    """获取文档中的路径映射,source本身是映射时直接使用"""
    if isinstance(source, Mapping):
        return source
    return getattr(source, "paths", None)


# 路径树
class UrlTree:
    """
    由API路径构成的目录结构
    多个来源的路径可以用不同的标签挂载到同一棵树上
    """
    def __init__(self, root: Optional[UrlTreeNode] = None):
        self.root = root or UrlTreeNode.create_root()  # 创建路径树根节点

    @classmethod
    def create(cls) -> "UrlTree":
        """创建只有根节点的空树"""
        return cls()

    @classmethod
    def from_document(cls, source: Any, label: str) -> "UrlTree":
        """
        根据文档中的路径创建路径树
        :param source: 带有paths映射的文档,或路径到路径项的映射
        :param label: 节点标签
        :return: 新建的路径树
        """
        check_argument_not_null(source, "source")
        check_argument_not_null_or_empty(label, "label")

        tree = cls.create()
        tree.attach_document(source, label)
        return tree

    def attach_document(self, source: Any, label: str) -> None:
        """把文档中的所有路径挂载到当前树上"""
        check_argument_not_null(source, "source")
        check_argument_not_null_or_empty(label, "label")

        paths = _document_paths(source)
        if paths is not None:
            self.attach_all(paths, label)

    def attach(self, path: str, path_item: Any, label: str) -> UrlTreeNode:
        """
        挂载单个路径
        :param path: URL路径模板
        :param path_item: 描述路径上可用操作的路径项
        :param label: 节点标签
        :return: 路径对应的终点节点
        """
        return self.root.attach(path, path_item, label)

    def attach_all(self, paths: Mapping[str, Any], label: str) -> None:
        """
        按迭代顺序挂载所有路径
        出错时直接抛出,之前已挂载的路径保留
        """
        check_argument_not_null(paths, "paths")
        check_argument_not_null_or_empty(label, "label")

        count = 0
        for path, path_item in paths.items():
            self.attach(path, path_item, label)
            count += 1
        logger.debug("Attached %d paths under label %s", count, label)

    # 查找节点
    def find_node(self, path: str) -> Optional[UrlTreeNode]:
        """
        按路径片段精确查找节点
        :param path: URL路径模板
        :return: 找到的节点,否则返回None
        """
        if path.startswith(ROOT_PATH_SEGMENT):
            path = path[1:]
        current = self.root  # 从根节点开始查找
        for part in path.split("/"):
            if not part:
                break
            current = current.get_child(part)
            if current is None:
                return None  # 未找到匹配的节点
        return current

    def iter_nodes(self) -> Iterator[UrlTreeNode]:
        """先序遍历所有节点,根节点最先返回"""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            # 逆序入栈以保持子节点的插入顺序
            stack.extend(reversed(list(node.children.values())))

    def get_paths(self) -> List[Dict[str, Any]]:
        """
        获取所有挂载了路径项的节点信息

        Returns:
            List[Dict]: 节点信息列表
        """
        paths = []
        for node in self.iter_nodes():
            if not node.path_items:
                continue
            paths.append({
                "path": node.path,
                "segment": node.segment,
                "labels": list(node.path_items),
                "operations": node.operation_keys(),
                "is_parameter": node.is_parameter
            })
        return paths

    def labels(self) -> List[str]:
        """获取树中出现过的所有标签,保持首次出现的顺序"""
        labels: List[str] = []
        for node in self.iter_nodes():
            for label in node.path_items:
                if label not in labels:
                    labels.append(label)
        return labels

    def write_mermaid(self, writer: TextIO, config: Optional[MermaidConfig] = None) -> int:
        """把路径树以Mermaid语法写入流"""
        return MermaidGenerator(config).write(self.root, writer)

    def to_mermaid(self, config: Optional[MermaidConfig] = None) -> str:
        return MermaidGenerator(config).render(self.root)
