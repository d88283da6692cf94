"""Serialize a generated document as JSON or YAML."""

import json

import yaml

FORMATS = ("json", "yaml")


def render_document(document: dict, fmt: str = "json") -> str:
    """Render the document; key order is preserved for both formats."""
    if fmt == "json":
        return json.dumps(document, indent=2, ensure_ascii=False)
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True, default_flow_style=False)
    raise ValueError(f"Unknown output format: {fmt}")
