"""Generate OpenAPI 3.0 documents from the Steam Web API catalog."""
