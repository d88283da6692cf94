"""Parameter flattener — catalog parameter descriptors to OpenAPI parameters.

Every parameter is placed in the query string. Structured parameters become
a single object-typed parameter; only one level of ``extra`` is expanded.
"""

from steam_openapi.catalog.base import (
    ArrayShape,
    ObjectShape,
    ParameterDescriptor,
    ScalarShape,
)
from steam_openapi.openapi.types import map_type


def flatten_parameters(descriptors: list[ParameterDescriptor]) -> list[dict]:
    """Convert a method's parameter descriptors into OpenAPI parameter objects."""
    return [_flatten(d) for d in descriptors]


def _flatten(descriptor: ParameterDescriptor) -> dict:
    shape = descriptor.shape
    name = descriptor.name

    if isinstance(shape, ObjectShape):
        schema = _object_schema(shape)
    elif isinstance(shape, ArrayShape):
        name = shape.name
        schema = {"type": "array", "items": {"type": map_type(shape.element_type)}}
    else:
        schema = _scalar_schema(shape)

    param = {"name": name, "in": "query", "required": descriptor.required}
    if descriptor.description is not None:
        param["description"] = descriptor.description
    param["schema"] = schema
    return param


def _object_schema(shape: ObjectShape) -> dict:
    properties = {}
    for field in shape.fields:
        prop = {"type": map_type(field.type)}
        if field.description is not None:
            prop["description"] = field.description
        properties[field.name] = prop

    return {
        "type": "object",
        "properties": properties,
        "required": [f.name for f in shape.fields if f.required],
    }


def _scalar_schema(shape: ScalarShape) -> dict:
    return {"type": map_type(shape.type)}
