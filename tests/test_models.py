from apitree.models.license import OpenApiLicense
from apitree.models.path_item import OpenApiDocument, OperationType, operation_keys


def test_document_keeps_path_order():
    document = OpenApiDocument.model_validate(
        {"paths": {"/b": {}, "/a": {"operations": {"patch": {"operationId": "patchA"}}}}}
    )

    assert list(document.paths) == ["/b", "/a"]
    item = document.paths["/a"]
    assert OperationType.PATCH in item.operations
    assert item.operations[OperationType.PATCH].operation_id == "patchA"


def test_operation_keys():
    document = OpenApiDocument.model_validate(
        {"paths": {"/a": {"operations": {"get": {}, "delete": {}}}}}
    )

    assert operation_keys(document.paths["/a"]) == ["get", "delete"]
    assert operation_keys({"operations": {"POST": {}}}) == ["post"]
    assert operation_keys(object()) == []


def test_license_serialization():
    mit = OpenApiLicense(
        name="MIT",
        url="https://opensource.org/licenses/MIT",
        extensions={"x-spdx": "MIT", "ignored": True},
    )

    expected = {"name": "MIT", "url": "https://opensource.org/licenses/MIT", "x-spdx": "MIT"}
    assert mit.serialize_v3() == expected
    assert mit.serialize_v2() == expected
    assert OpenApiLicense(name="MIT").serialize_v3() == {"name": "MIT"}


def test_license_copy_is_independent():
    original = OpenApiLicense(name="Apache 2.0", extensions={"x-a": 1})
    copy = OpenApiLicense.copy_of(original)
    copy.extensions["x-b"] = 2

    assert copy.name == "Apache 2.0"
    assert original.extensions == {"x-a": 1}
    assert OpenApiLicense.copy_of(None) == OpenApiLicense()


def test_license_without_name_omits_it():
    assert OpenApiLicense(url="https://example.com/license").serialize_v3() == {
        "url": "https://example.com/license"
    }
    assert OpenApiLicense().serialize_v2() == {}
