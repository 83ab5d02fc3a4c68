"""Tests for get() call-form resolution."""

import pytest

from odataengine import InvalidArgumentError
from odataengine.request import KeyFilter, NoArgs, TopCount, resolve_get_call


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((), NoArgs()),
        ((9,), TopCount(9)),
        ((0,), TopCount(0)),
        ((2.5,), TopCount(2.5)),
        (({"ID": 1},), KeyFilter({"ID": 1})),
        (({},), KeyFilter({})),
    ],
    ids=["no_args", "int", "zero", "float", "mapping", "empty_mapping"],
)
def test_resolve_get_call_forms(args, expected):
    assert resolve_get_call(*args) == expected


@pytest.mark.parametrize(
    "args",
    [
        ("blah",),
        (None,),
        (True,),
        ([1, 2],),
        (("ID", 1),),
        ({}, "blah"),
        (1, "blah"),
        (1, 2),
    ],
    ids=["string", "none", "bool", "list", "tuple", "mapping_extra", "number_extra", "two_numbers"],
)
def test_resolve_get_call_rejects_other_shapes(args):
    with pytest.raises(InvalidArgumentError):
        resolve_get_call(*args)
