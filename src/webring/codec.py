"""
JSON codec for the webring and status documents.

The models check the declared version before any field, so a document
from a newer format is reported as unsupported rather than malformed.
Unknown keys are ignored. Encoding always writes the supported version.
"""

import json
from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from webring.exceptions import DecodeError, UnsupportedVersionError
from webring.models import REQUIRE_VERSION, SUPPORTED_VERSION, UNSUPPORTED_VERSION_ERROR, Data, StatusData

Document = TypeVar("Document", Data, StatusData)

RawDocument = Union[str, bytes, bytearray]

DOCUMENT_KINDS = {Data: "webring", StatusData: "status"}


def decode_document(raw: RawDocument, model: Type[Document]) -> Document:
    """
    Decode a JSON document into the given model.

    Args:
        raw: The JSON text or bytes.
        model: Data or StatusData.

    Raises:
        UnsupportedVersionError: If the version is missing or not supported.
        DecodeError: If the input is not JSON or does not match the schema.
    """
    kind = DOCUMENT_KINDS[model]
    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise DecodeError(f"failed to decode {kind} document: {e}") from e

    if not isinstance(payload, dict):
        raise DecodeError(
            f"failed to decode {kind} document: expected a JSON object, got {type(payload).__name__}"
        )

    try:
        return model.model_validate(payload, context={REQUIRE_VERSION: True})
    except ValidationError as e:
        if any(error["type"] == UNSUPPORTED_VERSION_ERROR for error in e.errors()):
            version = payload.get("version")
            raise UnsupportedVersionError(
                f"failed to decode {kind} document: unsupported version {version!r}, "
                f"only version {SUPPORTED_VERSION} is supported",
                version=version,
            ) from e
        raise DecodeError(f"failed to decode {kind} document: {e}") from e


def decode_data(raw: RawDocument) -> Data:
    return decode_document(raw, Data)


def decode_status(raw: RawDocument) -> StatusData:
    return decode_document(raw, StatusData)


def encode_document(document: BaseModel, indent: Optional[int] = None) -> str:
    """Encode a Data or StatusData document, always as the supported version."""
    return document.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def encode_data(data: Data, indent: Optional[int] = None) -> str:
    return encode_document(data, indent=indent)


def encode_status(status: StatusData, indent: Optional[int] = None) -> str:
    return encode_document(status, indent=indent)
