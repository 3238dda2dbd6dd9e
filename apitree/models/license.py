from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class OpenApiLicense(BaseModel):
    """
    License对象

    属性:
        name (str): API使用的许可证名称(必填)
        url (str): 许可证地址
        extensions (dict): 以"x-"开头的扩展字段
    """
    name: Optional[str] = None
    url: Optional[str] = None
    extensions: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def copy_of(cls, other: Optional["OpenApiLicense"]) -> "OpenApiLicense":
        """复制一个License对象,扩展字段使用新的字典"""
        if other is None:
            return cls()
        return cls(
            name=other.name,
            url=other.url,
            extensions=dict(other.extensions)
        )

    def serialize_v3(self) -> Dict[str, Any]:
        """序列化为OpenAPI 3.0格式"""
        return self._serialize()

    def serialize_v2(self) -> Dict[str, Any]:
        """序列化为OpenAPI 2.0格式"""
        return self._serialize()

    def _serialize(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        if self.url is not None:
            data["url"] = self.url
        for key, value in self.extensions.items():
            # 只输出规范扩展字段
            if key.startswith("x-"):
                data[key] = value
        return data
