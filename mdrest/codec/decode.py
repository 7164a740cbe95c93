"""
JSON payload decoding into response models.

Response payloads have the shape ``{..envelope.., "results": ...}`` where the
results are a single record or a list of records. Keys absent from the
payload, or set to null, leave the model field at its zero value; unknown keys
are ignored. A value of the wrong JSON type is an error, reported with the
path of the offending field.
"""

import json
import types
from dataclasses import fields, is_dataclass
from functools import lru_cache
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

try:
    import orjson
    HAS_ORJSON = True
except ImportError:
    HAS_ORJSON = False

from ..errors import DecodeError, MalformedPayloadError
from ..logging.config import get_logger
from ..models.fields import FORMAT, OMIT_EMPTY, WIRE
from .wire import from_json_value, to_json_value

logger = get_logger(__name__)

M = TypeVar("M")


def parse_json_payload(raw_data: Union[str, bytes, bytearray]) -> dict[str, Any]:
    """
    Parse a raw JSON body into a dictionary.

    Uses orjson when available, falls back to the standard json module.

    Raises:
        MalformedPayloadError: If the body is not valid JSON or not an object
    """
    try:
        if HAS_ORJSON:
            payload = orjson.loads(raw_data)
        else:
            payload = json.loads(raw_data)
    except Exception as e:
        if (isinstance(e, json.JSONDecodeError) or
                (HAS_ORJSON and isinstance(e, orjson.JSONDecodeError))):
            raise MalformedPayloadError(f"Invalid JSON: {e}", raw_data=_preview(raw_data)) from e
        raise MalformedPayloadError(f"Unexpected JSON parsing error: {e}",
                                    raw_data=_preview(raw_data)) from e

    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            f"Payload must be a JSON object, got {type(payload).__name__}",
            raw_data=_preview(raw_data),
        )
    return payload


def decode_response(payload: Union[dict[str, Any], str, bytes, bytearray],
                    response_type: type[M]) -> M:
    """
    Decode an endpoint payload into its response model.

    Args:
        payload: Parsed JSON object, or the raw JSON body
        response_type: Response dataclass, e.g. ListTickersResponse

    Returns:
        Populated response model

    Raises:
        MalformedPayloadError: If the payload is not a JSON object
        DecodeError: If a value does not match its field type
    """
    if isinstance(payload, (str, bytes, bytearray)):
        payload = parse_json_payload(payload)
    elif not isinstance(payload, dict):
        raise MalformedPayloadError(
            f"Payload must be a dictionary, got {type(payload).__name__}"
        )

    response = decode_model(payload, response_type)

    results = getattr(response, "results", None)
    logger.debug(
        "Response decoded",
        response_type=response_type.__name__,
        status=getattr(response, "status", None),
        result_count=len(results) if isinstance(results, list) else int(results is not None),
    )
    return response


def decode_model(data: dict[str, Any], model_type: type[M], path: str = "") -> M:
    """Build a record dataclass from a JSON object."""
    hints = _type_hints(model_type)
    values = {}

    for f in fields(model_type):
        key = f.metadata.get(WIRE) or f.name
        raw = data.get(key)
        if raw is None:
            continue
        field_path = f"{path}.{key}" if path else key
        values[f.name] = _decode_value(raw, hints[f.name], f.metadata.get(FORMAT), field_path)

    return model_type(**values)


def encode_model(model: Any) -> dict[str, Any]:
    """
    Encode a record dataclass back into a JSON-ready dictionary.

    Zero values are omitted unless the field is declared with
    ``omit_empty=False``; date and time fields use their declared wire format.
    """
    encoded = {}
    for f in fields(model):
        value = _encode_value(getattr(model, f.name), f.metadata.get(FORMAT))
        if f.metadata.get(OMIT_EMPTY, True) and _is_empty(value):
            continue
        encoded[f.metadata.get(WIRE) or f.name] = value
    return encoded


@lru_cache(maxsize=None)
def _type_hints(model_type: type) -> dict[str, Any]:
    return get_type_hints(model_type)


def _decode_value(raw: Any, tp: Any, fmt: Any, path: str) -> Any:
    tp = _unwrap_optional(tp)

    if fmt is not None:
        try:
            return from_json_value(raw, fmt)
        except (TypeError, ValueError, OverflowError) as e:
            raise DecodeError(f"Invalid {fmt.value} value at {path}: {e}",
                              path=path, raw=raw, expected_type=fmt.value) from e

    if get_origin(tp) is list:
        if not isinstance(raw, list):
            raise _mismatch(raw, "array", path)
        (item_type,) = get_args(tp)
        return [_decode_value(item, item_type, None, f"{path}[{i}]")
                for i, item in enumerate(raw)]

    if is_dataclass(tp):
        if not isinstance(raw, dict):
            raise _mismatch(raw, "object", path)
        return decode_model(raw, tp, path)

    if tp is bool:
        if not isinstance(raw, bool):
            raise _mismatch(raw, "boolean", path)
        return raw

    if tp is int:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise _mismatch(raw, "integer", path)
        if isinstance(raw, float):
            if not raw.is_integer():
                raise _mismatch(raw, "integer", path)
            return int(raw)
        return raw

    if tp is float:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise _mismatch(raw, "number", path)
        return float(raw)

    if tp is str:
        if not isinstance(raw, str):
            raise _mismatch(raw, "string", path)
        return raw

    return raw


def _encode_value(value: Any, fmt: Any) -> Any:
    if value is None:
        return None
    if fmt is not None:
        return to_json_value(value, fmt)
    if is_dataclass(value):
        return encode_model(value)
    if isinstance(value, list):
        return [_encode_value(item, None) for item in value]
    return value


def _is_empty(value: Any) -> bool:
    if value is None or isinstance(value, (str, list, dict)) and not value:
        return True
    return isinstance(value, (bool, int, float)) and not value


def _unwrap_optional(tp: Any) -> Any:
    if get_origin(tp) in (Union, types.UnionType):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _mismatch(raw: Any, expected: str, path: str) -> DecodeError:
    return DecodeError(
        f"Expected {expected} at {path}, got {type(raw).__name__}",
        path=path,
        raw=raw,
        expected_type=expected,
    )


def _preview(raw_data: Any, limit: int = 200) -> str:
    if isinstance(raw_data, (bytes, bytearray)):
        raw_data = raw_data.decode("utf-8", errors="replace")
    return str(raw_data)[:limit]
