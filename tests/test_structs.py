import dataclasses

import pytest

from rustlings.exercises.structs import (
    ColorClassicStruct,
    ColorTupleStruct,
    Order,
    Package,
    UnitStruct,
    create_order_template,
)


def test_classic_c_structs():
    green = ColorClassicStruct(name="green", hex="#00FF00")
    assert green.name == "green"
    assert green.hex == "#00FF00"


def test_tuple_structs():
    green = ColorTupleStruct("green", "#00FF00")
    assert green[0] == "green"
    assert green[1] == "#00FF00"


def test_unit_structs():
    unit_struct = UnitStruct()
    assert f"{unit_struct!r}s are fun!" == "UnitStructs are fun!"


def test_your_order():
    template = create_order_template()
    your_order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert isinstance(your_order, Order)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == template.year
    assert your_order.made_by_phone == template.made_by_phone
    assert your_order.made_by_mobile == template.made_by_mobile
    assert your_order.made_by_email == template.made_by_email
    assert your_order.item_number == template.item_number
    assert your_order.count == 1


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="Weight can not be a negative number!"):
        Package("Spain", "Austria", -2210)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international() is True


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert package.is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500