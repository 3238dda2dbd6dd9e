# 路径前缀树节点类
import logging
from typing import Any, Dict, List, Mapping, Optional

from apitree.errors import (
    DuplicateLabelError,
    check_argument_not_null,
    check_argument_not_null_or_empty,
)
from apitree.models.path_item import operation_keys

logger = logging.getLogger(__name__)

ROOT_PATH_SEGMENT = "/"  # 根节点的路径片段
PATH_SEPARATOR = "\\"  # 节点内部路径的分隔符,与URL的"/"区分


class UrlTreeNode:
    """
    路径树节点
    每个节点对应URL路径中的一个片段,共享前缀的路径共享祖先节点
    """
    def __init__(self, segment: str, path: str = ""):
        self.segment = segment  # 节点对应的路径片段
        self.path = path  # 从根节点到当前节点的相对路径
        self.children: Dict[str, "UrlTreeNode"] = {}  # 子节点字典,key为路径片段
        self.path_items: Dict[str, Any] = {}  # 标签到路径项的映射
        self.additional_data: Dict[str, List[str]] = {}  # 附加信息

    @classmethod
    def create_root(cls) -> "UrlTreeNode":
        """创建根节点"""
        return cls(ROOT_PATH_SEGMENT)

    @property
    def is_parameter(self) -> bool:
        """是否为路径参数片段,如{id}"""
        return self.segment.startswith("{")

    @property
    def is_root(self) -> bool:
        return self.segment == ROOT_PATH_SEGMENT and self.path == ""

    def has_operations(self, label: str) -> bool:
        """
        判断指定标签下的路径项是否包含操作
        :param label: path_items中的标签
        :return: 存在至少一个操作时返回True
        """
        check_argument_not_null_or_empty(label, "label")

        if label not in self.path_items:
            return False
        return len(operation_keys(self.path_items[label])) > 0

    def operation_keys(self) -> List[str]:
        """汇总所有标签下的操作键,去重并保持首次出现的顺序"""
        keys: List[str] = []
        for path_item in self.path_items.values():
            for key in operation_keys(path_item):
                if key not in keys:
                    keys.append(key)
        return keys

    def attach(self, path: str, path_item: Any, label: str) -> "UrlTreeNode":
        """
        把路径及其路径项挂载到以当前节点为根的树上
        :param path: URL路径模板,如/users/{id}
        :param path_item: 路径项
        :param label: 来源标签
        :return: 路径对应的终点节点
        """
        check_argument_not_null_or_empty(label, "label")
        check_argument_not_null_or_empty(path, "path")
        check_argument_not_null(path_item, "path_item")

        if path.startswith(ROOT_PATH_SEGMENT):
            # 去掉开头的斜杠
            path = path[1:]

        segments = path.split("/")

        current = self
        current_path = ""
        for segment in segments:
            # 空片段表示已到达终点
            if not segment:
                break
            current_path = current_path + PATH_SEPARATOR + segment
            child = current.children.get(segment)
            if child is None:
                child = UrlTreeNode(segment, current_path)
                current.children[segment] = child
                logger.debug("Created node %s", current_path)
            current = child

        return current._bind(path_item, label, current_path)

    def _bind(self, path_item: Any, label: str, current_path: str) -> "UrlTreeNode":
        """在终点节点记录标签和路径项"""
        if label in self.path_items:
            logger.warning(
                "Duplicate label '%s' at %s", label, current_path or ROOT_PATH_SEGMENT,
                extra={"label": label, "path": current_path}
            )
            raise DuplicateLabelError(label, current_path)

        self.path = current_path
        self.path_items[label] = path_item
        logger.debug("Bound label %s to %s", label, current_path or ROOT_PATH_SEGMENT)
        return self

    def add_additional_data(self, additional_data: Mapping[str, List[str]]) -> None:
        """
        合并附加信息,键已存在时整体覆盖
        :param additional_data: 键到字符串列表的映射
        """
        check_argument_not_null(additional_data, "additional_data")

        for key, value in additional_data.items():
            self.additional_data[key] = value

    def get_child(self, segment: str) -> Optional["UrlTreeNode"]:
        return self.children.get(segment)

    def __repr__(self) -> str:
        return f"UrlTreeNode(segment={self.segment!r}, path={self.path!r})"
