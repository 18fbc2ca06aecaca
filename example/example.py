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

"""Key-value accessors example: cars and employees."""

import logging
import pprint

import kv_accessor

# Module logger.
LOG = logging.getLogger(__name__)


class Car(kv_accessor.KvObject):
    """Car details, known by make, year, and interior cost."""

    make: str
    model: str
    year: int
    blue_interior: float


CAR_ATTRIBUTES = Car.kv_accessor(
    "_asdict", "make", year="model_year", blue_interior=("leather", "blue")
)
Car.kv_reader("_asdict", "model")


class Employee:
    """Employee keeping only the personal data it is allowed to."""

    ssid: str
    birth: str

    def __init__(self, info):
        """Keep only the entries the attributes expose."""
        self.info = kv_accessor.kv_select(info, EMPLOYEE_ATTRIBUTES)


EMPLOYEE_ATTRIBUTES = kv_accessor.kv_accessor(Employee, "info", "ssid", birth="dob")


def main():
    """Show accessors in action."""
    car = Car(
        {
            "make": "Chevrolet",
            "model": "Camaro",
            "model_year": 1967,
            "submodel": "SS",
            ("leather", "blue"): 2000.00,
        }
    )
    LOG.info("Car %s %s of %s.", car.make, car.model, car.year)
    car.year = 1968
    car.blue_interior = 4000.00
    LOG.info("Updated car details:\n%s", car)
    LOG.info("Car attributes: %s.", pprint.pformat(Car.kv_accessor_table))

    employee = Employee(
        {"ssid": "123-456-7890", "dob": "1979-06-23", "eye_color": "brown"}
    )
    employee.ssid = "555-555-5555"
    LOG.info("Employee born %s: %s.", employee.birth, employee.info)
    return car, employee


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )
    main()
