"""Random numbers of fixed-width integer and float kinds, plus their lookups."""

from __future__ import annotations

import math
import random
import struct
from typing import Optional, Sequence

from fauxgen.helpers import rand_int_range, resolve_rng
from fauxgen.lookup import FuncLookupError, Info, MapParams, Param, add_func_lookup

_MAX_UINT8 = 2**8 - 1
_MAX_UINT16 = 2**16 - 1
_MAX_INT32 = 2**31 - 1
_MIN_INT32 = -(2**31)
_MAX_INT64 = 2**63 - 1
_MIN_INT64 = -(2**63)
_MIN_INT8, _MAX_INT8 = -(2**7), 2**7 - 1
_MIN_INT16, _MAX_INT16 = -(2**15), 2**15 - 1

_SMALLEST_FLOAT32 = 1.401298464324817e-45
_MAX_FLOAT32 = 3.4028234663852886e38
_SMALLEST_FLOAT64 = 5e-324
_MAX_FLOAT64 = 1.7976931348623157e308

_HEX_DIGITS = "0123456789abcdef"


def _to_float32(value: float) -> float:
    """Round a float to the nearest single-precision value."""
    if not math.isfinite(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def number(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Random integer between low and high, both inclusive."""
    return rand_int_range(low, high, rng)


def uint8(rng: Optional[random.Random] = None) -> int:
    """Random value in the uint8 range."""
    return rand_int_range(0, _MAX_UINT8, rng)


def uint16(rng: Optional[random.Random] = None) -> int:
    """Random value in the uint16 range."""
    return rand_int_range(0, _MAX_UINT16, rng)


def uint32(rng: Optional[random.Random] = None) -> int:
    """Random non-negative value no larger than the largest int32."""
    return rand_int_range(0, _MAX_INT32, rng)


def uint64(rng: Optional[random.Random] = None) -> int:
    """Random non-negative value below the largest int64."""
    return resolve_rng(rng).randrange(_MAX_INT64)


def int8(rng: Optional[random.Random] = None) -> int:
    """Random value in the int8 range."""
    return rand_int_range(_MIN_INT8, _MAX_INT8, rng)


def int16(rng: Optional[random.Random] = None) -> int:
    """Random value in the int16 range."""
    return rand_int_range(_MIN_INT16, _MAX_INT16, rng)


def int32(rng: Optional[random.Random] = None) -> int:
    """Random value in the int32 range."""
    return rand_int_range(_MIN_INT32, _MAX_INT32, rng)


def int64(rng: Optional[random.Random] = None) -> int:
    """Random negative int64 value: the smallest int64 plus a value below the largest."""
    return resolve_rng(rng).randrange(_MAX_INT64) + _MIN_INT64


def float32(rng: Optional[random.Random] = None) -> float:
    """Random positive single-precision float."""
    return float32_range(_SMALLEST_FLOAT32, _MAX_FLOAT32, rng)


def float32_range(
    low: float, high: float, rng: Optional[random.Random] = None
) -> float:
    """Random single-precision float between low and high."""
    low, high = _to_float32(low), _to_float32(high)
    if low == high:
        return low
    spread = _to_float32(high - low)
    sample = _to_float32(resolve_rng(rng).random())
    return _to_float32(_to_float32(sample * spread) + low)


def float64(rng: Optional[random.Random] = None) -> float:
    """Random positive double-precision float."""
    return float64_range(_SMALLEST_FLOAT64, _MAX_FLOAT64, rng)


def float64_range(
    low: float, high: float, rng: Optional[random.Random] = None
) -> float:
    """Random double-precision float between low and high."""
    if low == high:
        return low
    return resolve_rng(rng).random() * (high - low) + low


def shuffle_ints(values: list[int], rng: Optional[random.Random] = None) -> None:
    """Shuffle a list of ints in place."""
    resolve_rng(rng).shuffle(values)


def random_int(values: Sequence[int], rng: Optional[random.Random] = None) -> int:
    """Pick one of the values; 0 when there are none."""
    if not values:
        return 0
    if len(values) == 1:
        return values[0]
    return resolve_rng(rng).choice(values)


def random_uint(values: Sequence[int], rng: Optional[random.Random] = None) -> int:
    """Pick one of the unsigned values; 0 when there are none."""
    return random_int(values, rng)


def hex_uint(bit_size: int, rng: Optional[random.Random] = None) -> str:
    """Random hex string with a '0x' prefix covering bit_size bits."""
    digit_count = bit_size >> 2
    if digit_count <= 0:
        return "0x"
    rng = resolve_rng(rng)
    return "0x" + "".join(_HEX_DIGITS[rng.randrange(16)] for _ in range(digit_count))


def hex_uint8(rng: Optional[random.Random] = None) -> str:
    """Random uint8 hex value with '0x' prefix."""
    return hex_uint(8, rng)


def hex_uint16(rng: Optional[random.Random] = None) -> str:
    """Random uint16 hex value with '0x' prefix."""
    return hex_uint(16, rng)


def hex_uint32(rng: Optional[random.Random] = None) -> str:
    """Random uint32 hex value with '0x' prefix."""
    return hex_uint(32, rng)


def hex_uint64(rng: Optional[random.Random] = None) -> str:
    """Random uint64 hex value with '0x' prefix."""
    return hex_uint(64, rng)


def hex_uint128(rng: Optional[random.Random] = None) -> str:
    """Random uint128 hex value with '0x' prefix."""
    return hex_uint(128, rng)


def hex_uint256(rng: Optional[random.Random] = None) -> str:
    """Random uint256 hex value with '0x' prefix."""
    return hex_uint(256, rng)


def _gen_number(rng: random.Random, params: Optional[MapParams], info: Info) -> int:
    low = info.get_int(params, "min")
    high = info.get_int(params, "max")
    if low > high:
        raise FuncLookupError("max integer must be larger than Min")
    return number(low, high, rng)


def _gen_float32_range(
    rng: random.Random, params: Optional[MapParams], info: Info
) -> float:
    low = info.get_float32(params, "min")
    high = info.get_float32(params, "max")
    return float32_range(low, high, rng)


def _gen_float64_range(
    rng: random.Random, params: Optional[MapParams], info: Info
) -> float:
    low = info.get_float64(params, "min")
    high = info.get_float64(params, "max")
    return float64_range(low, high, rng)


def _gen_shuffle_ints(
    rng: random.Random, params: Optional[MapParams], info: Info
) -> list[int]:
    values = info.get_int_array(params, "ints")
    shuffle_ints(values, rng)
    return values


def _simple(func):
    def generate(rng: random.Random, params: Optional[MapParams], info: Info):
        return func(rng)

    return generate


def _hex(bit_size: int):
    def generate(rng: random.Random, params: Optional[MapParams], info: Info) -> str:
        return hex_uint(bit_size, rng)

    return generate


def _range_params(kind: str, label: str) -> list[Param]:
    return [
        Param(field="min", display="Min", type=kind, description=f"Minimum {label} value"),
        Param(field="max", display="Max", type=kind, description=f"Maximum {label} value"),
    ]


def add_number_lookup() -> None:
    """Register every number generator in the lookup registry."""
    add_func_lookup(
        "number",
        Info(
            display="Number",
            category="number",
            description="Random number between given range",
            example="14866",
            output="int",
            params=[
                Param(field="min", display="Min", type="int", default="-2147483648",
                      description="Minimum integer value"),
                Param(field="max", display="Max", type="int", default="2147483647",
                      description="Maximum integer value"),
            ],
            generate=_gen_number,
        ),
    )

    simple = [
        ("uint8", "Uint8", "Random uint8 value", "152", uint8),
        ("uint16", "Uint16", "Random uint16 value", "34968", uint16),
        ("uint32", "Uint32", "Random uint32 value", "1075055705", uint32),
        ("uint64", "Uint64", "Random uint64 value", "843730692693298265", uint64),
        ("int8", "Int8", "Random int8 value", "24", int8),
        ("int16", "Int16", "Random int16 value", "2200", int16),
        ("int32", "Int32", "Random int32 value", "-1072427943", int32),
        ("int64", "Int64", "Random int64 value", "-8379641344161477543", int64),
        ("float32", "Float32", "Random float32 value", "3.1128167e+37", float32),
        ("float64", "Float64", "Random float64 value", "1.644484108270445e+307", float64),
    ]
    for name, display, description, example, func in simple:
        add_func_lookup(
            name,
            Info(
                display=display,
                category="number",
                description=description,
                example=example,
                output=name,
                generate=_simple(func),
            ),
        )

    add_func_lookup(
        "float32range",
        Info(
            display="Float32 Range",
            category="number",
            description="Random float32 between given range",
            example="914774.6",
            output="float32",
            params=_range_params("float", "float32"),
            generate=_gen_float32_range,
        ),
    )
    add_func_lookup(
        "float64range",
        Info(
            display="Float64 Range",
            category="number",
            description="Random float64 between given range",
            example="914774.5585333086",
            output="float64",
            params=_range_params("float", "float64"),
            generate=_gen_float64_range,
        ),
    )
    add_func_lookup(
        "shuffleints",
        Info(
            display="Shuffle Ints",
            category="number",
            description="Shuffle an array of ints",
            example="1,2,3,4 => 3,1,4,2",
            output="[]int",
            params=[
                Param(field="ints", display="Integers", type="[]int",
                      description="Delimited separated integers"),
            ],
            generate=_gen_shuffle_ints,
        ),
    )

    hex_entries = [
        (8, "0x87"),
        (16, "0x8754"),
        (32, "0x87546957"),
        (64, "0x875469578e51b5e5"),
        (128, "0x875469578e51b5e56c95b64681d147a1"),
        (256, "0x875469578e51b5e56c95b64681d147a12cde48a4f417231b0c486abbc263e48d"),
    ]
    for bits, example in hex_entries:
        add_func_lookup(
            f"hexuint{bits}",
            Info(
                display=f"HexUint{bits}",
                category="number",
                description=f"Random uint{bits} hex value",
                example=example,
                output="string",
                generate=_hex(bits),
            ),
        )