"""Data models for the Steam Web API catalog.

The catalog maps service name -> method name -> method descriptor.
Parameter descriptors encode their shape loosely (an ``extra`` list for
structured messages, a ``[0]`` name suffix for arrays); ``shape`` resolves
that once into an explicit variant.
"""

from collections.abc import Iterator
from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field

PUBLIC = "public"


class ParameterDescriptor(BaseModel):
    """A single method parameter as written in the catalog."""

    name: str
    type: str = ""
    optional: bool | None = None
    description: str | None = None
    extra: list["ParameterDescriptor"] | None = None

    @property
    def required(self) -> bool:
        return self.optional is False

    @cached_property
    def shape(self) -> "ObjectShape | ArrayShape | ScalarShape":
        # extra wins even when the name also carries [0]
        if self.extra:
            return ObjectShape(fields=self.extra)
        if "[0]" in self.name:
            return ArrayShape(
                name=self.name.replace("[0]", "", 1),
                element_type=self.type.removesuffix("[]"),
            )
        return ScalarShape(type=self.type)


class ObjectShape(BaseModel):
    """Structured parameter rendered as an OpenAPI object schema."""

    fields: list[ParameterDescriptor]


class ArrayShape(BaseModel):
    """Array-of-scalar parameter, name already stripped of its ``[0]``."""

    name: str
    element_type: str


class ScalarShape(BaseModel):
    type: str


class MethodDescriptor(BaseModel):
    """A single versioned method of a service."""

    model_config = ConfigDict(populate_by_name=True)

    version: int
    httpmethod: str | None = None
    parameters: list[ParameterDescriptor] = []
    description: str | None = None
    audience_tag: str | None = Field(default=None, alias="_type")

    @property
    def audience(self) -> str:
        return self.audience_tag or PUBLIC


class ApiCatalog(BaseModel):
    """Ordered mapping of service name -> method name -> descriptor."""

    services: dict[str, dict[str, MethodDescriptor]]

    def iter_methods(self) -> Iterator[tuple[str, str, MethodDescriptor]]:
        """Yield (service, method_name, method) in catalog order."""
        for service_name, methods in self.services.items():
            for method_name, method in methods.items():
                yield service_name, method_name, method
