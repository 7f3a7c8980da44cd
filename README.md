# fauxgen

Seedable fake data for tests, fixtures and demos.

fauxgen generates random integers in fixed-width ranges, floats, hex strings,
UUIDs, booleans, IPv4/IPv6/MAC addresses, noise images (as Pillow images, PNG
or JPEG bytes) and JSON documents built from named generator functions.

Every generator takes an optional `rng` argument, a `random.Random`. Leave it
out to use the shared generator, which `fauxgen.helpers.seed` resets. Pass
your own to keep a stream of values apart from the rest.

## Installation

```
pip install fauxgen
```

Pillow is installed as a dependency; it is used for the image functions.

## Quick start

```python
from fauxgen.helpers import seed
from fauxgen.number import number, hex_uint32, float64_range, int16
from fauxgen.misc import uuid, flip_a_coin, boolean
from fauxgen.internet import ipv4_address, ipv6_address, mac_address

seed(11)                      # repeatable output; seed(0) seeds from OS entropy

number(50, 23456)             # an int between 50 and 23456, both included
int16()                       # an int in the int16 range
hex_uint32()                  # "0x" followed by 8 hex digits
float64_range(0, 9999999)
uuid()                        # version 4 UUID string
boolean()
flip_a_coin()                 # "Heads" or "Tails"
ipv4_address()
ipv6_address()
mac_address()
```

`fauxgen.number` also has `uint8` to `uint64`, `int8` to `int64`, `float32`,
`float32_range`, `float64`, `shuffle_ints`, `random_int`, `random_uint` and
`hex_uint8` to `hex_uint256`. `fauxgen.misc.shuffle_any_slice` shuffles any
mutable sequence in place and leaves anything else untouched.

`fauxgen.helpers` holds smaller helpers: `replace_with_numbers` (each `#`
becomes a digit), `replace_with_letters` and `replace_with_hex_letters` (each
`?` becomes a letter), `rand_int_range`, `to_fixed`, and parsers for
`{name:params}` tags (`parse_name_and_params_from_tag`, `func_lookup_split`,
`parse_map_params`).

## Images

```python
from fauxgen.image import image, image_png, image_jpeg, image_url

pic = image(64, 48)           # Pillow RGBA image, every pixel a random opaque colour
png_bytes = image_png(64, 48)
jpeg_bytes = image_jpeg(64, 48)
image_url(640, 480)           # "https://picsum.photos/640/480"
```

## Function lookups

Generators are also registered under lower-case names, each with a
description of its parameters, so they can be picked by name, for example
from a config file or a template. `fauxgen.catalog.init_lookup()` registers
the built-in ones:

- numbers: `number`, `uint8`, `uint16`, `uint32`, `uint64`, `int8`, `int16`,
  `int32`, `int64`, `float32`, `float32range`, `float64`, `float64range`,
  `shuffleints`, `hexuint8` to `hexuint256`
- misc: `uuid`, `bool`, `flipacoin`
- internet: `ipv4address`, `ipv6address`
- image: `imageurl`, `imagejpeg`, `imagepng` (width and height from 10 to 999)
- file: `json`

```python
from fauxgen.catalog import init_lookup
from fauxgen.lookup import get_func_lookup, MapParams

init_lookup()
info = get_func_lookup("number")
params = MapParams()
params.add("min", "1")
params.add("max", "6")
roll = info.generate(None, params, info)
```

A parameter you leave out takes its default; if it has none, or a value
cannot be parsed, or it is out of range, `FuncLookupError` is raised. Register
your own generators with `add_func_lookup(name, Info(...))`, remove them with
`remove_func_lookup`, and list everything registered with `func_lookups()`.

## JSON documents

```python
from fauxgen.catalog import init_lookup
from fauxgen.jsonfile import JSONOptions, generate_json
from fauxgen.lookup import Field

init_lookup()
options = JSONOptions(
    type="array",
    row_count=3,
    fields=[
        Field(name="id", function="autoincrement"),
        Field(name="address", function="ipv4address"),
        Field(name="uid", function="uuid"),
    ],
    indent=True,
)
print(generate_json(options).decode())
```

`type` is `"object"` or `"array"`. The special function `autoincrement`
numbers the rows from 1. A function name that is not registered, a missing
row count for arrays, an empty field list or another type raises an error.
The result is UTF-8 bytes; byte values are written as base64 strings.

## What it does not do

fauxgen has no generators for names, words, sentences, companies, dates,
addresses or other text data, no user agents or URLs beyond `image_url`, and
no filling of objects from field tags. It is a library only; it installs no
command.

## Running the tests

```
pip install "fauxgen[test]"
pytest
```