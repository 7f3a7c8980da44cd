"""Random network addresses and their lookups."""

from __future__ import annotations

import random
from typing import Optional

from fauxgen.helpers import resolve_rng
from fauxgen.lookup import Info, MapParams, add_func_lookup


def ipv4_address(rng: Optional[random.Random] = None) -> str:
    """Random version 4 IP address in dotted decimal form."""
    rng = resolve_rng(rng)
    return ".".join(str(rng.randrange(256)) for _ in range(4))


def ipv6_address(rng: Optional[random.Random] = None) -> str:
    """Random version 6 IP address as eight colon separated hex groups."""
    rng = resolve_rng(rng)
    return ":".join(f"{rng.randrange(65536):x}" for _ in range(8))


def mac_address(rng: Optional[random.Random] = None) -> str:
    """Random MAC address; each octet is drawn from 0 to 254."""
    rng = resolve_rng(rng)
    return ":".join(f"{rng.randrange(255):02x}" for _ in range(6))


def _gen_ipv4(rng: random.Random, params: Optional[MapParams], info: Info) -> str:
    return ipv4_address(rng)


def _gen_ipv6(rng: random.Random, params: Optional[MapParams], info: Info) -> str:
    return ipv6_address(rng)


def add_internet_lookup() -> None:
    """Register the internet address generators in the lookup registry."""
    add_func_lookup(
        "ipv4address",
        Info(
            display="IPv4 Address",
            category="internet",
            description="Random ip address v4",
            example="222.83.191.222",
            output="string",
            generate=_gen_ipv4,
        ),
    )
    add_func_lookup(
        "ipv6address",
        Info(
            display="IPv6 Address",
            category="internet",
            description="Random ip address v6",
            example="2001:cafe:8898:ee17:bc35:9064:5866:d019",
            output="string",
            generate=_gen_ipv6,
        ),
    )