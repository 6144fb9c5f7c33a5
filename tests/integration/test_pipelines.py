"""End-to-end use of the public API."""

import sys
from dataclasses import dataclass

sys.path.insert(0, "src")

import foldkit
from foldkit import (
    difference,
    every,
    filter,
    flatten,
    intersection,
    map,
    memoize,
    once,
    pluck,
    reduce,
    sort_by,
    uniq,
)


@dataclass
class Order:
    customer: str
    total: float
    tags: list[str]


ORDERS = [
    Order("ada", 30.0, ["books", "gift"]),
    Order("alan", 12.5, ["books"]),
    Order("grace", 99.0, ["hardware", "gift"]),
    Order("ada", 5.0, ["snacks"]),
]


def test_version():
    assert foldkit.__version__ == "0.1.0"


def test_report_pipeline():
    big = filter(ORDERS, lambda o: o.total > 10)
    ranked = sort_by(big, "total")
    assert pluck(ranked, "customer") == ["alan", "ada", "grace"]

    revenue = reduce(map(ORDERS, lambda o: o.total), lambda acc, t: acc + t, 0.0)
    assert revenue == 146.5

    all_tags = uniq(flatten(pluck(ORDERS, "tags")))
    assert all_tags == ["books", "gift", "hardware", "snacks"]


def test_tag_set_algebra():
    ada_tags = flatten(pluck(filter(ORDERS, lambda o: o.customer == "ada"), "tags"))
    grace_tags = flatten(pluck(filter(ORDERS, lambda o: o.customer == "grace"), "tags"))

    assert intersection(ada_tags, grace_tags) == ["gift"]
    assert difference(ada_tags, grace_tags) == ["books", "snacks"]


def test_decorated_lookup():
    lookups = []

    @memoize
    def orders_for(customer):
        lookups.append(customer)
        return filter(ORDERS, lambda o: o.customer == customer)

    load = once(lambda: sort_by(uniq(pluck(ORDERS, "customer"))))

    for customer in load():
        assert every(orders_for(customer), lambda o: o.customer == customer)
    for customer in load():
        orders_for(customer)

    assert lookups == ["ada", "alan", "grace"]
