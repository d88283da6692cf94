"""Document assembler — builds one OpenAPI 3.0 document per audience."""

import logging
from collections.abc import Iterable

from steam_openapi.catalog.base import ApiCatalog, MethodDescriptor
from steam_openapi.config import AUDIENCE_CONFIG, AUDIENCES, INFO_VERSION, OPENAPI_VERSION
from steam_openapi.openapi.params import flatten_parameters

logger = logging.getLogger(__name__)

RESPONSES = {
    "200": {"description": "Successful response"},
    "400": {"description": "Invalid input"},
}


def build_document(catalog: ApiCatalog, audience: str) -> dict:
    """Build the OpenAPI document for every callable method of ``audience``.

    Methods without an HTTP verb are never emitted. Methods tagged with an
    audience outside AUDIENCES are logged and dropped. If two methods map to
    the same path the later one wins.
    """
    if audience not in AUDIENCES:
        raise ValueError(f"Unknown audience: {audience}")

    config = AUDIENCE_CONFIG[audience]
    paths: dict[str, dict] = {}

    for service_name, method_name, method in catalog.iter_methods():
        if not is_callable(method):
            logger.debug("Skipping %s/%s: no HTTP method", service_name, method_name)
            continue
        if method.audience not in AUDIENCES:
            logger.warning(
                "Dropping %s/%s: unknown audience tag %r",
                service_name, method_name, method.audience,
            )
            continue
        if method.audience != audience:
            continue

        path = f"/{service_name}/{method_name}/v{method.version}"
        if path in paths:
            logger.debug("Overwriting duplicate path %s", path)
        paths[path] = {
            method.httpmethod.lower(): _build_operation(service_name, method_name, method),
        }

    logger.debug("Generated %d paths for audience %s", len(paths), audience)
    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": config.title,
            "description": config.description,
            "version": INFO_VERSION,
        },
        "servers": [{"url": config.server_url}],
        "paths": paths,
    }


def _build_operation(service_name: str, method_name: str, method: MethodDescriptor) -> dict:
    summary = method.description or f"{method_name} method of the {service_name} interface"
    return {
        "summary": summary,
        "description": method.description or "",
        "operationId": f"{service_name}_{method_name}",
        "parameters": flatten_parameters(method.parameters),
        "responses": {code: dict(resp) for code, resp in RESPONSES.items()},
    }


def is_callable(method: MethodDescriptor) -> bool:
    """Methods without an HTTP verb cannot be called on their own."""
    return bool(method.httpmethod)


def count_callable(methods: Iterable[MethodDescriptor]) -> int:
    return sum(1 for m in methods if is_callable(m))


def count_methods(catalog: ApiCatalog) -> dict[str, int]:
    """Count callable methods per effective audience, unknown tags included."""
    counts = {a: 0 for a in AUDIENCES}
    for _, _, method in catalog.iter_methods():
        if is_callable(method):
            counts[method.audience] = counts.get(method.audience, 0) + 1
    return counts
