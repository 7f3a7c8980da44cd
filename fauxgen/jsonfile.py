"""JSON documents built from rows of lookup-generated fields."""

from __future__ import annotations

import base64
import json
import random
from dataclasses import dataclass
from dataclasses import field as dc_field
from typing import Any, Optional

from fauxgen.helpers import resolve_rng
from fauxgen.lookup import (
    Field,
    FuncLookupError,
    Info,
    MapParams,
    Param,
    add_func_lookup,
    get_func_lookup,
)

_AUTOINCREMENT = "autoincrement"
_HTML_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


@dataclass
class JSONOptions:
    """Settings for JSON generation: 'array' or 'object', row count, fields, indent."""

    type: str = ""
    row_count: int = 0
    fields: list[Field] = dc_field(default_factory=list)
    indent: bool = False


def _encode_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"value of type {type(value).__name__} is not JSON serializable")


def _dump(value: Any, indent: bool) -> bytes:
    if indent:
        text = json.dumps(
            value, indent=4, ensure_ascii=False, allow_nan=False, default=_encode_default
        )
    else:
        text = json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_default,
        )
    return text.translate(_HTML_ESCAPES).encode("utf-8")


def _build_row(fields: list[Field], index: int, rng: random.Random) -> dict[str, Any]:
    row: dict[str, Any] = {}
    for fld in fields:
        if fld.function == _AUTOINCREMENT:
            row[fld.name] = index + 1
            continue
        info = get_func_lookup(fld.function)
        if info is None:
            raise ValueError(f"invalid function, {fld.function} does not exist")
        row[fld.name] = info.generate(rng, fld.params, info)
    return row


def generate_json(options: JSONOptions, rng: Optional[random.Random] = None) -> bytes:
    """Generate a JSON object, or an array of objects, as UTF-8 bytes."""
    if options.type not in ("array", "object"):
        raise ValueError("invalid type, must be array or object")
    if not options.fields:
        raise ValueError("must pass fields in order to build json object(s)")
    rng = resolve_rng(rng)

    if options.type == "object":
        return _dump(_build_row(options.fields, 0, rng), options.indent)

    if options.row_count <= 0:
        raise ValueError("must have row count")
    rows = [_build_row(options.fields, i, rng) for i in range(options.row_count)]
    return _dump(rows, options.indent)


def _parse_field(text: str) -> Field:
    error = FuncLookupError("unable to decode json string")
    try:
        data = json.loads(text)
    except ValueError:
        raise error from None
    if data is None:
        return Field(name="", function="")
    if not isinstance(data, dict):
        raise error
    name = data.get("name") or ""
    function = data.get("function") or ""
    raw_params = data.get("params") or {}
    if not isinstance(name, str) or not isinstance(function, str):
        raise error
    if not isinstance(raw_params, dict):
        raise error
    params = MapParams()
    for key, values in raw_params.items():
        if values is None:
            params[key] = []
            continue
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise error
        params[key] = list(values)
    return Field(name=name, function=function, params=params)


def _gen_json(rng: random.Random, params: Optional[MapParams], info: Info) -> bytes:
    options = JSONOptions()
    options.type = info.get_string(params, "type")
    options.row_count = info.get_int(params, "rowcount")
    options.fields = [_parse_field(text) for text in info.get_string_array(params, "fields")]
    options.indent = info.get_bool(params, "indent")
    return generate_json(options, rng)


def add_file_json_lookup() -> None:
    """Register the JSON generator in the lookup registry."""
    add_func_lookup(
        "json",
        Info(
            display="JSON",
            category="file",
            description="Generates an object or an array of objects in json format",
            example=(
                "[\n"
                '\t{ "id": 1, "first_name": "Markus", "last_name": "Moen" },\n'
                '\t{ "id": 2, "first_name": "Alayna", "last_name": "Wuckert" },\n'
                '\t{ "id": 3, "first_name": "Lura", "last_name": "Lockman" }\n'
                "]"
            ),
            output="[]byte",
            params=[
                Param(field="type", display="Type", type="string", default="object",
                      options=["object", "array"],
                      description="Type of JSON, object or array"),
                Param(field="rowcount", display="Row Count", type="int", default="100",
                      description="Number of rows in JSON array"),
                Param(field="fields", display="Fields", type="[]Field",
                      description="Fields containing key name and function to run in json format"),
                Param(field="indent", display="Indent", type="bool", default="false",
                      description="Whether or not to add indents and newlines"),
            ],
            generate=_gen_json,
        ),
    )