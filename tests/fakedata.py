from apitree.models.path_item import OpenApiOperation, OpenApiPathItem


def make_path_item(*methods: str) -> OpenApiPathItem:
    return OpenApiPathItem(
        operations={method: OpenApiOperation(summary=f"{method} op") for method in methods}
    )
