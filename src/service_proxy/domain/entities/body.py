import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from service_proxy.domain.exception import BodyEncodingError


@dataclass(frozen=True)
class RawBody:
    data: bytes


@dataclass(frozen=True)
class TextBody:
    text: str


@dataclass(frozen=True)
class FormBody:
    fields: Mapping[str, str]


@dataclass(frozen=True)
class JsonBody:
    value: Any


Body = Union[RawBody, TextBody, FormBody, JsonBody]

BODY_TYPES = (RawBody, TextBody, FormBody, JsonBody)


def _is_form_mapping(value: Any) -> bool:
    if not isinstance(value, Mapping):
        return False
    return all(isinstance(k, str) and isinstance(v, str) for k, v in value.items())


def to_body(value: Any) -> Optional[Body]:
    """
    Classify a loose Python value into exactly one body variant:
    - None            -> no body
    - bytes/bytearray -> RawBody
    - str             -> TextBody
    - Mapping[str,str]-> FormBody
    - dataclass obj   -> JsonBody
    Anything else is rejected; wrap it in JsonBody explicitly to send JSON.
    """
    if value is None or isinstance(value, BODY_TYPES):
        return value

    if isinstance(value, (bytes, bytearray)):
        return RawBody(bytes(value))

    if isinstance(value, str):
        return TextBody(value)

    if _is_form_mapping(value):
        return FormBody(dict(value))

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return JsonBody(value)

    raise BodyEncodingError(
        f"Unsupported body type {type(value).__name__}: "
        "only bytes, str, Mapping[str, str] and dataclass instances are supported"
    )
