"""Static per-audience document settings."""

from pydantic import BaseModel

OPENAPI_VERSION = "3.0.0"
INFO_VERSION = "1.0.0"

AUDIENCES = ("public", "publisher_only", "undocumented")
DEFAULT_AUDIENCE = "public"


class AudienceConfig(BaseModel):
    title: str
    description: str
    server_url: str


AUDIENCE_CONFIG: dict[str, AudienceConfig] = {
    "public": AudienceConfig(
        title="Steam Web API",
        description="Public Steam Web API methods callable with a regular Steam Web API key.",
        server_url="https://api.steampowered.com",
    ),
    "publisher_only": AudienceConfig(
        title="Steam Web API (Publisher)",
        description=(
            "Steam Web API methods that require a publisher Web API key. "
            "Requests must be sent to the partner host."
        ),
        server_url="https://partner.steam-api.com",
    ),
    "undocumented": AudienceConfig(
        title="Steam Web API (Undocumented)",
        description=(
            "Methods exposed by the Steam Web API that Valve does not document. "
            "Behaviour may change without notice."
        ),
        server_url="https://api.steampowered.com",
    ),
}
