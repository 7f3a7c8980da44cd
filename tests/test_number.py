import random
import struct

import pytest

from fauxgen import number as num
from fauxgen.helpers import seed
from fauxgen.lookup import FuncLookupError, MapParams, get_func_lookup


@pytest.fixture
def rng():
    return random.Random(11)


def _is_float32(value):
    return struct.unpack("f", struct.pack("f", value))[0] == value


def test_number_in_range(rng):
    for _ in range(200):
        assert 50 <= num.number(50, 23456, rng) <= 23456


def test_number_same_bounds():
    assert num.number(5, 5) == 5


def test_number_inverted_bounds_raises(rng):
    with pytest.raises(ValueError):
        num.number(10, 1, rng)


def test_number_deterministic_with_seed():
    seed(42)
    first = [num.number(0, 1000) for _ in range(5)]
    seed(42)
    second = [num.number(0, 1000) for _ in range(5)]
    assert first == second


@pytest.mark.parametrize(
    "func, low, high",
    [
        (num.uint8, 0, 255),
        (num.uint16, 0, 65535),
        (num.uint32, 0, 2**31 - 1),
        (num.uint64, 0, 2**63 - 2),
        (num.int8, -128, 127),
        (num.int16, -32768, 32767),
        (num.int32, -(2**31), 2**31 - 1),
        (num.int64, -(2**63), -2),
    ],
)
def test_integer_ranges(func, low, high, rng):
    for _ in range(200):
        assert low <= func(rng) <= high


def test_float32_positive_and_single_precision(rng):
    for _ in range(50):
        value = num.float32(rng)
        assert 0 < value <= 3.4028234663852886e38
        assert _is_float32(value)


def test_float32_range_same():
    assert num.float32_range(5.0, 5.0) == 5.0


def test_float32_range_bounds(rng):
    for _ in range(100):
        value = num.float32_range(0, 9999999, rng)
        assert 0 <= value <= 9999999
        assert _is_float32(value)


def test_float64_range_same():
    assert num.float64_range(5.0, 5.0) == 5.0


def test_float64_range_bounds(rng):
    for _ in range(100):
        assert 0 <= num.float64_range(0, 9999999, rng) < 9999999


def test_float64_positive(rng):
    assert num.float64(rng) > 0


def test_shuffle_ints_is_permutation(rng):
    values = [52, 854, 941, 74125, 8413, 777, 89416, 841657]
    original = list(values)
    assert num.shuffle_ints(values, rng) is None
    assert sorted(values) == sorted(original)


def test_shuffle_ints_same_seed_same_order():
    a = [1, 2, 3, 4, 5, 6, 7, 8]
    b = list(a)
    num.shuffle_ints(a, random.Random(3))
    num.shuffle_ints(b, random.Random(3))
    assert a == b


def test_random_int_cases(rng):
    assert num.random_int([], rng) == 0
    assert num.random_int([1], rng) == 1
    ints = [52, 854, 941, 74125, 8413, 777, 89416, 841657]
    assert num.random_int(ints, rng) in ints


def test_random_uint_cases(rng):
    assert num.random_uint([], rng) == 0
    assert num.random_uint([1], rng) == 1
    ints = [52, 854, 941, 74125]
    assert num.random_uint(ints, rng) in ints


@pytest.mark.parametrize(
    "func, length",
    [
        (num.hex_uint8, 4),
        (num.hex_uint16, 6),
        (num.hex_uint32, 10),
        (num.hex_uint64, 18),
        (num.hex_uint128, 34),
        (num.hex_uint256, 66),
    ],
)
def test_hex_uint_shape(func, length, rng):
    value = func(rng)
    assert len(value) == length
    assert value.startswith("0x")
    assert set(value[2:]) <= set("0123456789abcdef")


def test_hex_uint_small_bit_sizes():
    assert num.hex_uint(0) == "0x"
    assert num.hex_uint(3) == "0x"


def test_lookup_number(rng):
    num.add_number_lookup()
    info = get_func_lookup("number")
    value = info.generate(rng, MapParams({"min": ["1"], "max": ["3"]}), info)
    assert 1 <= value <= 3


def test_lookup_number_defaults(rng):
    num.add_number_lookup()
    info = get_func_lookup("number")
    value = info.generate(rng, None, info)
    assert -2147483648 <= value <= 2147483647


def test_lookup_number_min_above_max(rng):
    num.add_number_lookup()
    info = get_func_lookup("number")
    with pytest.raises(FuncLookupError, match="max integer must be larger than Min"):
        info.generate(rng, MapParams({"min": ["10"], "max": ["1"]}), info)


def test_lookup_float32range_requires_params(rng):
    num.add_number_lookup()
    info = get_func_lookup("float32range")
    with pytest.raises(FuncLookupError):
        info.generate(rng, MapParams({"max": ["1.5"]}), info)


def test_lookup_float64range(rng):
    num.add_number_lookup()
    info = get_func_lookup("float64range")
    value = info.generate(rng, MapParams({"min": ["2.5"], "max": ["3.5"]}), info)
    assert 2.5 <= value <= 3.5


def test_lookup_shuffleints(rng):
    num.add_number_lookup()
    info = get_func_lookup("shuffleints")
    params = MapParams()
    for text in ["4", "-2", "9", "1"]:
        params.add("ints", text)
    assert sorted(info.generate(rng, params, info)) == [-2, 1, 4, 9]


def test_lookup_shuffleints_bad_value(rng):
    num.add_number_lookup()
    info = get_func_lookup("shuffleints")
    with pytest.raises(FuncLookupError):
        info.generate(rng, MapParams({"ints": ["1", "x"]}), info)


def test_lookup_hexuint64(rng):
    num.add_number_lookup()
    info = get_func_lookup("hexuint64")
    value = info.generate(rng, None, info)
    assert len(value) == 18 and value.startswith("0x")


def test_lookup_int8(rng):
    num.add_number_lookup()
    info = get_func_lookup("int8")
    assert info.output == "int8"
    assert -128 <= info.generate(rng, None, info) <= 127