"""Shared random helpers, the default generator and tag/parameter parsing."""

from __future__ import annotations

import math
import random
import secrets
import string
from typing import Optional

from fauxgen.lookup import Info, MapParams

LOWER = string.ascii_lowercase
UPPER = string.ascii_uppercase
NUMERIC = string.digits
SPECIAL = "!@#$%&*+-_=?:;,.|(){}<>"
SPACE = " "
ALL_CHARS = LOWER + UPPER + NUMERIC + SPECIAL + SPACE
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_HASHTAG = "#"
_QUESTION_MARK = "?"
_LETTERS = UPPER + LOWER

_GLOBAL_RNG = random.Random()


def seed(value: int) -> None:
    """Seed the shared generator; a value of 0 seeds it from the OS entropy source."""
    if value == 0:
        value = int.from_bytes(secrets.token_bytes(8), "big", signed=True)
    _GLOBAL_RNG.seed(value)


def default_rng() -> random.Random:
    """The generator used when none is given."""
    return _GLOBAL_RNG


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    """Return rng, or the shared generator when rng is None."""
    return _GLOBAL_RNG if rng is None else rng


def rand_letter(rng: Optional[random.Random] = None) -> str:
    """Random ASCII letter, upper or lower case."""
    return resolve_rng(rng).choice(_LETTERS)


def rand_hex_letter(rng: Optional[random.Random] = None) -> str:
    """Random lower case letter between a and f."""
    return "abcdef"[resolve_rng(rng).randrange(6)]


def rand_digit(rng: Optional[random.Random] = None) -> str:
    """Random ASCII digit."""
    return NUMERIC[resolve_rng(rng).randrange(10)]


def rand_character(chars: str, rng: Optional[random.Random] = None) -> str:
    """Random character from chars."""
    if not chars:
        raise ValueError("cannot pick a character from an empty string")
    return chars[resolve_rng(rng).randrange(len(chars))]


def rand_int_range(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Random integer between low and high, both inclusive."""
    if low == high:
        return low
    if low > high:
        raise ValueError(f"invalid range: {low} > {high}")
    return resolve_rng(rng).randint(low, high)


def _replace(text: str, marker: str, pick) -> str:
    return "".join(pick() if ch == marker else ch for ch in text)


def replace_with_numbers(text: str, rng: Optional[random.Random] = None) -> str:
    """Replace each '#' with a digit; a leading zero becomes a digit from 1 to 8."""
    if not text:
        return text
    rng = resolve_rng(rng)
    result = _replace(text, _HASHTAG, lambda: rand_digit(rng))
    if result[0] == "0":
        result = str(rng.randrange(8) + 1) + result[1:]
    return result


def replace_with_letters(text: str, rng: Optional[random.Random] = None) -> str:
    """Replace each '?' with a random ASCII letter."""
    if not text:
        return text
    rng = resolve_rng(rng)
    return _replace(text, _QUESTION_MARK, lambda: rand_letter(rng))


def replace_with_hex_letters(text: str, rng: Optional[random.Random] = None) -> str:
    """Replace each '?' with a random letter between a and f."""
    if not text:
        return text
    rng = resolve_rng(rng)
    return _replace(text, _QUESTION_MARK, lambda: rand_hex_letter(rng))


def to_fixed(num: float, precision: int) -> float:
    """Truncate num (towards minus infinity) to the given number of decimals."""
    factor = math.pow(10, precision)
    scaled = num * factor
    if math.isfinite(scaled):
        scaled = math.floor(scaled)
    return scaled / factor


def func_lookup_split(text: str) -> list[str]:
    """Split a comma separated parameter string, keeping bracketed lists whole."""
    out: list[str] = []
    while text:
        if text.startswith("["):
            end = text.find("]")
            if end < 0:
                out.append(text.strip())
                break
            out.append(text[: end + 1].strip())
            text = text[end + 1 :]
            if text.startswith(","):
                text = text[1:]
        else:
            head, sep, rest = text.partition(",")
            out.append(head.strip())
            text = rest if sep else ""
    return out


def parse_name_and_params_from_tag(tag: str) -> tuple[str, str]:
    """Split a '{name:params}' tag into its function name and parameter string."""
    name, _, params = tag.lstrip("{").rstrip("}").partition(":")
    return name, params


def parse_map_params(info: Info, params: str) -> Optional[MapParams]:
    """Turn a tag's parameter string into MapParams for the given lookup, or None."""
    map_params = MapParams()
    if len(info.params) == 1 and info.params[0].type == "string":
        map_params.add(info.params[0].field, params)
    elif info.params and params != "":
        for param, value in zip(info.params, func_lookup_split(params)):
            if value.startswith("["):
                for item in func_lookup_split(value.lstrip("[").rstrip("]")):
                    map_params.add(param.field, item)
            else:
                map_params.add(param.field, value)
    return map_params if map_params.size() > 0 else None