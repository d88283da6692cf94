"""Catalog type names -> OpenAPI primitive types."""

TYPE_MAP = {
    "uint32": "integer",
    "uint64": "integer",
    "int32": "integer",
    "int64": "integer",
    "fixed64": "integer",
    "fixed32": "integer",
    "bool": "boolean",
    "string": "string",
    "float": "number",
    "double": "number",
    "bytes": "string",
}


def map_type(type_name: str) -> str:
    """Return the OpenAPI type for a catalog type name.

    Unknown names (enums, message types such as ``{message}``) pass through
    lower-cased.
    """
    return TYPE_MAP.get(type_name, type_name.lower())
