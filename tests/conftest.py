# Copyright (C) DATADVANCE, 2010-2023
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Auxiliary fixtures to simplify testing."""

from typing import Any, Dict

import pytest

import kv_accessor

# Composite key: the interior color is looked up with the whole set.
BLUE_LEATHER = frozenset({("leather", "blue")})


@pytest.fixture
def car_details():
    """Car details dict with both string and composite keys."""
    return {
        "make": "Chevrolet",
        "model": "Camaro",
        "submodel": "SS",
        "model_year": 1967,
        "price": 40_000.00,
        BLUE_LEATHER: 2_000.00,
    }


@pytest.fixture
def car_class():
    """New car class with accessors over its `details` and `other` dicts.

    Accessors defined:
        read/write: `make`, `year` (`model_year`), `blue_interior`
            (composite key), `price`, `upc` (in `other`)
        read-only: `model`
        write-only: `color`

    Accessor tables are stored as class attributes, so tests can
    inspect them.
    """

    class Car:
        """Car wrapping two dicts."""

        DETAILS_ACCESSORS: Dict[str, Any]
        DETAILS_READERS: Dict[str, Any]
        DETAILS_WRITERS: Dict[str, Any]
        OTHER_ACCESSORS: Dict[str, Any]

        def __init__(self, details, other):
            """Remember the dicts, do not copy them."""
            self.details = details
            self.other = other

    Car.DETAILS_ACCESSORS = kv_accessor.kv_accessor(
        Car, "details", "make", year="model_year", blue_interior=BLUE_LEATHER
    )
    Car.DETAILS_READERS = {
        **Car.DETAILS_ACCESSORS,
        **kv_accessor.kv_reader(Car, "details", "model", "price"),
    }
    Car.DETAILS_WRITERS = {
        **Car.DETAILS_ACCESSORS,
        **kv_accessor.kv_writer(Car, "details", "color", "price"),
    }
    Car.OTHER_ACCESSORS = kv_accessor.kv_accessor(Car, "other", "upc")
    return Car


@pytest.fixture
def car(car_class, car_details):
    """Car instance with the copy of `car_details`."""
    return car_class(dict(car_details), {"upc": "808"})


@pytest.fixture(scope="function", autouse=True)
def extra_print_in_the_beginning():
    """Improve output of `pytest -s` by adding EOL in the beginning."""
    print()
