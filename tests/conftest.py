import pytest

from apitree.models.path_item import OpenApiDocument
from apitree.tree.core import UrlTree

from tests.fakedata import make_path_item


@pytest.fixture
def tree() -> UrlTree:
    return UrlTree.create()


@pytest.fixture
def items_document() -> OpenApiDocument:
    return OpenApiDocument(
        paths={
            "/items": make_path_item("get"),
            "/items/{id}": make_path_item("get", "delete"),
        }
    )


@pytest.fixture
def users_document() -> OpenApiDocument:
    return OpenApiDocument.model_validate(
        {
            "paths": {
                "/": {"operations": {"get": {}}},
                "/users": {"operations": {"get": {}, "post": {}}},
                "/users/{id}": {"operations": {"get": {}, "put": {}, "delete": {}}},
                "/users/{id}/roles": {"operations": {}},
                "/default.json": {"operations": {"get": {"operationId": "spec"}}},
            }
        }
    )
