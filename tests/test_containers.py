# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for lists, tuples, sets and mappings."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Annotated

import pytest

from fieldrules import ComparisonError, MutabilityError, RequiredError, Rules, validate, validate_value


@dataclass
class Group:
    names: Annotated[list[str], Rules("arrlen>=1,toupper")] = field(default_factory=list)


@dataclass
class Tags:
    values: Annotated[list[str], Rules("len<=3")] = field(default_factory=list)


@dataclass
class Grid:
    cells: Annotated[list[list[int]], Rules("val>0")] = field(default_factory=list)


@dataclass
class Batch:
    items: Annotated[list[int], Rules("arrlen>=1")] = None


@dataclass
class Coords:
    axes: Annotated[tuple[str, ...], Rules("toupper")] = ()


@dataclass
class Lookup:
    names: Annotated[dict[int, str], Rules("maplen<=1,toupper")] = field(default_factory=dict)


@dataclass
class Codes:
    codes: Annotated[dict[int, str], Rules("len>=2")] = field(default_factory=dict)


@dataclass(frozen=True)
class Item:
    name: Annotated[str, Rules("toupper")] = ""


class TestSequences:
    """Tests for list and tuple validation."""

    def test_elements_normalized_in_place(self):
        """Test element rules rewrite list items."""
        g = Group(names=[" ann ", "bob"])
        validate(g)
        assert g.names == ["ANN", "BOB"]

    def test_arrlen(self):
        """Test arrlen applies to the list itself."""
        with pytest.raises(ComparisonError) as exc_info:
            validate(Group())
        assert str(exc_info.value) == "names: length must be greater than or equal to 1"

    def test_element_failure_path(self):
        """Test element failures carry the index."""
        with pytest.raises(ComparisonError) as exc_info:
            validate(Tags(values=["ab", "abcd"]))
        assert str(exc_info.value) == "values: [1]: length must be less than or equal to 3"
        assert exc_info.value.location == "values[1]"

    def test_nested_lists(self):
        """Test rules reach elements of nested lists."""
        with pytest.raises(ComparisonError) as exc_info:
            validate(Grid(cells=[[1], [2, 0]]))
        assert str(exc_info.value) == "cells: [1]: [1]: must be greater than 0"

    def test_missing_list_with_length_rule(self):
        """Test a length rule on a missing list fails as required."""
        with pytest.raises(RequiredError) as exc_info:
            validate(Batch())
        assert str(exc_info.value) == "items: value is required"

    def test_tuple_rebuilt_through_owner(self):
        """Test tuple fields are replaced with an updated tuple."""
        c = Coords(axes=("x", "y"))
        validate(c)
        assert c.axes == ("X", "Y")

    def test_tuple_standalone(self):
        """Test validate_value returns an updated tuple."""
        assert validate_value(("a", " b "), "toupper") == ("A", "B")

    def test_top_level_tuple_read_only(self):
        """Test a bare tuple cannot be updated."""
        with pytest.raises(MutabilityError) as exc_info:
            validate((" a ",))
        assert exc_info.value.path == ("[0]",)

    def test_set_read_only(self):
        """Test set elements cannot be rewritten."""
        with pytest.raises(MutabilityError):
            validate_value({"a"}, "toupper")

    def test_set_unchanged(self):
        """Test sets pass when no element changes."""
        assert validate_value({"A", "B"}, "toupper,len==1") == {"A", "B"}

    def test_arrlen_not_applied_to_elements(self):
        """Test length rules are consumed by the container."""
        assert validate_value([[1, 2, 3]], "arrlen==1") == [[1, 2, 3]]


class TestMappings:
    """Tests for dict validation."""

    def test_values_normalized(self):
        """Test value rules rewrite dict entries under the same key."""
        lookup = Lookup(names={1: "foo"})
        validate(lookup)
        assert lookup.names == {1: "FOO"}

    def test_maplen(self):
        """Test maplen applies to the mapping itself."""
        lookup = Lookup(names={1: "foo", 2: "bar"})
        with pytest.raises(ComparisonError) as exc_info:
            validate(lookup)
        assert str(exc_info.value) == "names: length must be less than or equal to 1"

    def test_value_failure_path(self):
        """Test value failures carry the key."""
        with pytest.raises(ComparisonError) as exc_info:
            validate(Codes(codes={1: "ok", 2: "x"}))
        assert str(exc_info.value) == "codes: [2]: length must be greater than or equal to 2"

    def test_top_level_dict_written(self):
        """Test a bare dict is still updated in place."""
        data = {"k": " v "}
        validate(data)
        assert data == {"k": "v"}

    def test_frozen_records_replaced(self):
        """Test frozen record values are replaced by updated copies."""
        data = {"a": Item(name="x")}
        original = data["a"]
        validate(data)
        assert data["a"] == Item(name="X")
        assert original.name == "x"

    def test_read_only_mapping(self):
        """Test read-only mappings reject rewrites with the key in the path."""
        with pytest.raises(MutabilityError) as exc_info:
            validate_value(MappingProxyType({"a": " x "}))
        assert exc_info.value.path == ("[a]",)

    def test_empty_maplen(self):
        """Test maplen on an empty mapping."""
        with pytest.raises(ComparisonError, match="length must be greater than or equal to 1"):
            validate_value({}, "maplen>=1")
