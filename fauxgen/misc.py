"""Booleans, UUIDs, coin flips and in-place shuffling, plus their lookups."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any, Optional

from fauxgen.helpers import rand_int_range, resolve_rng
from fauxgen.lookup import Info, MapParams, add_func_lookup

_UUID_VERSION = 4


def boolean(rng: Optional[random.Random] = None) -> bool:
    """Random boolean value."""
    return rand_int_range(0, 1, rng) == 1


def uuid(rng: Optional[random.Random] = None) -> str:
    """Random version 4 UUID in the form xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx."""
    raw = bytearray(resolve_rng(rng).getrandbits(128).to_bytes(16, "big"))
    raw[6] = (raw[6] & 0x0F) | (_UUID_VERSION << 4)
    raw[8] = (raw[8] & 0xBF) | 0x80
    text = raw.hex()
    return "-".join((text[:8], text[8:12], text[12:16], text[16:20], text[20:]))


def shuffle_any_slice(values: Any, rng: Optional[random.Random] = None) -> None:
    """Shuffle a mutable sequence in place; anything else is left untouched."""
    if values is None or not isinstance(values, MutableSequence):
        return
    if len(values) <= 1:
        return
    resolve_rng(rng).shuffle(values)


def flip_a_coin(rng: Optional[random.Random] = None) -> str:
    """Randomly 'Heads' or 'Tails'."""
    return "Heads" if boolean(rng) else "Tails"


def _simple(func):
    def generate(rng: random.Random, params: Optional[MapParams], info: Info):
        return func(rng)

    return generate


def add_misc_lookup() -> None:
    """Register the misc generators in the lookup registry."""
    add_func_lookup(
        "uuid",
        Info(
            display="UUID",
            category="misc",
            description="Random uuid",
            example="590c1440-9888-45b0-bd51-a817ee07c3f2",
            output="string",
            generate=_simple(uuid),
        ),
    )
    add_func_lookup(
        "bool",
        Info(
            display="Boolean",
            category="misc",
            description="Random boolean",
            example="true",
            output="bool",
            generate=_simple(boolean),
        ),
    )
    add_func_lookup(
        "flipacoin",
        Info(
            display="Flip A Coin",
            category="misc",
            description="Random Heads or Tails outcome",
            example="Tails",
            output="string",
            generate=_simple(flip_a_coin),
        ),
    )