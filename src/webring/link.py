from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, field_validator, model_serializer


class Link(BaseModel):
    """A single member site of a webring."""
    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Display name of the site.")
    # May be a bare host without a scheme, e.g. "libdb.so".
    link: str = Field("", description="Address of the site.")

    @field_validator("name", "link", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_zero(self) -> bool:
        """Whether this is the empty link returned by out-of-range lookups."""
        return not self.name and not self.link


class LinkStatus(BaseModel):
    """Health record for a link listed in the status document."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dead: bool = Field(False, description="The site could not be reached.")
    missing_webring: bool = Field(
        False,
        alias="missingWebring",
        description="The site no longer links back to the webring.",
    )

    @field_validator("dead", "missing_webring", mode="before")
    @classmethod
    def null_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    @model_serializer(mode="wrap")
    def serialize_set_flags(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        # Flags that are not set are left out of the document.
        return {key: value for key, value in handler(self).items() if value}


# Keyed by Link.link (the address), never by the whole Link.
Anomalies = Dict[str, LinkStatus]
