from .license import OpenApiLicense
from .path_item import (
    OpenApiDocument,
    OpenApiOperation,
    OpenApiPathItem,
    OperationType,
    operation_keys,
)

__all__ = [
    "OpenApiDocument",
    "OpenApiLicense",
    "OpenApiOperation",
    "OpenApiPathItem",
    "OperationType",
    "operation_keys",
]
