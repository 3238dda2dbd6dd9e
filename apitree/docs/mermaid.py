import io
import logging
from typing import Iterator, List, Optional, TextIO, Tuple

from apitree.config.settings import MermaidConfig, settings
from apitree.tree.patterns import PATH_SEPARATOR, ROOT_PATH_SEGMENT, UrlTreeNode

logger = logging.getLogger(__name__)

# 操作集合到颜色的映射,键为排序后大写并用下划线连接的HTTP方法
MERMAID_COLOR_SCHEME: List[Tuple[str, str]] = [
    ("GET", "lightSteelBlue"),
    ("POST", "SteelBlue"),
    ("GET_POST", "forestGreen"),
    ("DELETE_GET_PATCH", "yellowGreen"),
    ("DELETE_GET_PUT", "olive"),
    ("DELETE_GET", "DarkSeaGreen"),
    ("DELETE", "tomato"),
    ("OTHER", "white"),
]

# 节点标识的替换规则,按顺序执行
_SANITIZE_RULES: List[Tuple[str, str]] = [
    (PATH_SEPARATOR, "/"),
    ("{", ":"),
    ("}", ""),
    (".", "_"),
    (";", "_"),
    ("-", "_"),
    ("default", "def_ault"),  # default是Mermaid样式类的保留字
]


def sanitize_node(token: str) -> str:
    """把节点路径转换为合法的Mermaid节点标识"""
    for old, new in _SANITIZE_RULES:
        token = token.replace(old, new)
    return token


class MermaidGenerator:
    """
    Mermaid流程图生成器
    深度优先遍历路径树,输出边和节点样式类
    """

    def __init__(self, config: Optional[MermaidConfig] = None):
        self.config = config or settings.get_mermaid_config()
        self.color_scheme = MERMAID_COLOR_SCHEME

    def node_id(self, node: UrlTreeNode) -> str:
        """获取节点标识,根节点使用根片段"""
        return sanitize_node(node.path) if node.path else ROOT_PATH_SEGMENT

    def classify(self, node: UrlTreeNode) -> str:
        """
        计算节点的样式类
        :param node: 路径树节点
        :return: 所有标签下操作键去重、大写、排序后用下划线连接的结果
        """
        methods = sorted({key.upper() for key in node.operation_keys()})
        return "_".join(methods) or self.config.fallback_class

    def iter_lines(self, root: UrlTreeNode) -> Iterator[str]:
        """逐行生成Mermaid文本"""
        yield f"graph {self.config.direction}"
        for token, color in self.color_scheme:
            yield (
                f"classDef {token} fill:{color},"
                f"stroke:{self.config.stroke},stroke-width:{self.config.stroke_width}"
            )
        yield from self._process_node(root)

    def _process_node(self, root: UrlTreeNode) -> Iterator[str]:
        """
        深度优先遍历,子节点的边在入栈时输出,样式类在节点的子节点处理完后输出
        使用显式栈,树的深度不受递归深度限制
        """
        stack = [(root, iter(root.children.items()))]
        while stack:
            node, children = stack[-1]
            path = self.node_id(node)
            child_entry = next(children, None)
            if child_entry is None:
                stack.pop()
                yield f"class {path} {self.classify(node)}"
                continue
            segment, child = child_entry
            yield f'{path} --> {sanitize_node(child.path)}["{segment}"]'
            stack.append((child, iter(child.children.items())))

    def write(self, root: UrlTreeNode, writer: TextIO) -> int:
        """
        把Mermaid文本写入流
        :param root: 路径树根节点
        :param writer: 文本流
        :return: 写入的行数
        """
        count = 0
        for line in self.iter_lines(root):
            writer.write(line + "\n")
            count += 1
        logger.debug("Wrote %d mermaid lines", count)
        return count

    def render(self, root: UrlTreeNode) -> str:
        """生成完整的Mermaid文本"""
        buffer = io.StringIO()
        self.write(root, buffer)
        return buffer.getvalue()
