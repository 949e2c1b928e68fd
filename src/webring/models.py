"""
Root documents of a webring: the ring itself and its status companion.

Both documents carry a version number. The library owns the wire version:
whatever an in-memory record holds, it is always encoded as
SUPPORTED_VERSION. Validation rejects any other declared version, and
validation from JSON (or with the REQUIRE_VERSION context, as webring.codec
does) also rejects a document that declares none.
"""

from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from webring.link import Anomalies, Link, LinkStatus
from webring.ring import Ring

SUPPORTED_VERSION = 1

UNSUPPORTED_VERSION_ERROR = "unsupported_version"

# Validation context key: treat a missing version as unsupported.
REQUIRE_VERSION = "require_version"


def is_supported_version(version: Any) -> bool:
    # bool is an int subclass; true is not version 1.
    return not isinstance(version, bool) and version == SUPPORTED_VERSION


def check_declared_version(data: Any, info: ValidationInfo) -> Any:
    """Reject a document whose declared version is not SUPPORTED_VERSION."""
    if not isinstance(data, dict):
        return data
    required = info.mode == "json" or bool((info.context or {}).get(REQUIRE_VERSION))
    if "version" not in data and not required:
        return data
    version = data.get("version")
    if not is_supported_version(version):
        raise PydanticCustomError(
            UNSUPPORTED_VERSION_ERROR,
            "unsupported version {version}, only version {supported} is supported",
            {"version": repr(version), "supported": SUPPORTED_VERSION},
        )
    return data


class Data(BaseModel):
    """The webring document."""
    model_config = ConfigDict(frozen=True)

    version: StrictInt = Field(SUPPORTED_VERSION, description="Document format version.")
    name: Optional[str] = Field(None, description="Display name of the webring.")
    root: Optional[str] = Field(None, description="Canonical URL of the webring.")
    ring: Ring = Field(default_factory=Ring, description="Member links, in ring order.")

    @model_validator(mode="before")
    @classmethod
    def check_version(cls, data: Any, info: ValidationInfo) -> Any:
        return check_declared_version(data, info)

    @field_validator("ring", mode="before")
    @classmethod
    def null_as_empty_ring(cls, value: Any) -> Any:
        return Ring() if value is None else value

    @field_serializer("version")
    def serialize_version(self, version: int) -> int:
        return SUPPORTED_VERSION

    def working_ring(self, status: "StatusData") -> Ring:
        """The ring without the links the status document reports as anomalous."""
        return self.ring.exclude_anomalies(status.anomalies)


class StatusData(BaseModel):
    """The status document. It only lists links that are not working."""
    model_config = ConfigDict(frozen=True)

    version: StrictInt = Field(SUPPORTED_VERSION, description="Document format version.")
    anomalies: Anomalies = Field(default_factory=dict, description="Link statuses keyed by link address.")

    @model_validator(mode="before")
    @classmethod
    def check_version(cls, data: Any, info: ValidationInfo) -> Any:
        return check_declared_version(data, info)

    @field_validator("anomalies", mode="before")
    @classmethod
    def null_as_no_anomalies(cls, value: Any) -> Any:
        # A healthy ring may publish "anomalies": null.
        return {} if value is None else value

    @field_serializer("version")
    def serialize_version(self, version: int) -> int:
        return SUPPORTED_VERSION

    def status_of(self, link: Link) -> Optional[LinkStatus]:
        return self.anomalies.get(link.link)

    def is_anomalous(self, link: Link) -> bool:
        """Whether link is listed, whichever of its flags are set."""
        return link.link in self.anomalies
