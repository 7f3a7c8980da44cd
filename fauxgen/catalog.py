"""Registration of every built-in lookup function."""

from __future__ import annotations

from fauxgen.image import add_image_lookup
from fauxgen.internet import add_internet_lookup
from fauxgen.jsonfile import add_file_json_lookup
from fauxgen.misc import add_misc_lookup
from fauxgen.number import add_number_lookup


def init_lookup() -> None:
    """Register (or re-register) all built-in lookup functions."""
    add_misc_lookup()
    add_internet_lookup()
    add_file_json_lookup()
    add_image_lookup()
    add_number_lookup()