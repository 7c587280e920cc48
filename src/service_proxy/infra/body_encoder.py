import dataclasses
import json
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlencode

from service_proxy.domain.entities.body import (
    Body,
    FormBody,
    JsonBody,
    RawBody,
    TextBody,
)
from service_proxy.domain.exception import BodyEncodingError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class EncodedBody:
    content: bytes
    content_type: Optional[str] = None


def _to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def encode_body(body: Optional[Body]) -> Optional[EncodedBody]:
    """
    Raw and text bodies go out verbatim without a content type.
    Form bodies are encoded fresh, JSON bodies compactly.
    """
    if body is None:
        return None

    if isinstance(body, RawBody):
        return EncodedBody(content=body.data)

    if isinstance(body, TextBody):
        return EncodedBody(content=body.text.encode("utf-8"))

    if isinstance(body, FormBody):
        content = urlencode(sorted(body.fields.items())).encode("ascii")
        return EncodedBody(content=content, content_type=FORM_CONTENT_TYPE)

    if isinstance(body, JsonBody):
        try:
            content = json.dumps(
                _to_jsonable(body.value),
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise BodyEncodingError(f"Failed to serialize JSON body: {e}") from e
        return EncodedBody(content=content, content_type=JSON_CONTENT_TYPE)

    raise BodyEncodingError(f"Unsupported body type {type(body).__name__}")
