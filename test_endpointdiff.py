"""Tests for the EndpointDiff extraction and comparison engine."""

import copy
from unittest.mock import patch

import pytest
from endpointdiff import (
    ComparisonEngine,
    ComparisonResult,
    PathEvaluationError,
    PathExpression,
    PathSyntaxError,
    SetDiffer,
    ValueFlattener,
    compare,
    flatten,
    select,
)


TODOS = [
    {"userId": 1, "id": 1, "title": "delectus aut autem", "completed": False},
    {"userId": 1, "id": 2, "title": "quis ut nam facilis et officia qui", "completed": False},
]


class TestPathExpression:
    """Test JSONPath parsing."""

    def test_valid_expression(self):
        """Test that a valid expression keeps its text."""
        expr = PathExpression("$[*].title")
        assert expr.text == "$[*].title"
        assert str(expr) == "$[*].title"

    def test_equality_by_text(self):
        """Test that expressions compare and hash by value."""
        a = PathExpression("$.items[*].id")
        b = PathExpression("$.items[*].id")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1
        assert a != PathExpression("$.items[*].name")

    @pytest.mark.parametrize("text", ["$[*", "$.items[", ""])
    def test_invalid_expression(self, text):
        """Test that malformed expressions fail at construction."""
        with pytest.raises(PathSyntaxError) as exc_info:
            PathExpression(text)
        assert exc_info.value.side is None

    def test_non_string_expression(self):
        """Test that a non-string expression is rejected."""
        with pytest.raises(PathSyntaxError):
            PathExpression(None)

    def test_coerce_keeps_instance(self):
        """Test that coercing a parsed expression returns it unchanged."""
        expr = PathExpression("$.a")
        assert PathExpression.coerce(expr) is expr
        assert PathExpression.coerce("$.a") == expr


class TestSelect:
    """Test node selection."""

    def test_project_member_of_every_element(self):
        """Test the dominant use case: one member from every array element."""
        titles = select(TODOS, "$[*].title")
        assert titles == ["delectus aut autem", "quis ut nam facilis et officia qui"]

    def test_nested_member_access(self):
        """Test member access through nested objects."""
        data = {"data": {"items": [{"id": 1}, {"id": 2}, {"name": "no id"}]}}
        assert select(data, "$.data.items[*].id") == [1, 2]

    def test_index_and_slice(self):
        """Test array indexing and slicing."""
        data = {"items": ["a", "b", "c", "d"]}
        assert select(data, "$.items[0]") == ["a"]
        assert select(data, "$.items[1:3]") == ["b", "c"]

    def test_recursive_descent(self):
        """Test selection of a key at any depth."""
        data = {"id": 1, "child": {"id": 2, "child": {"id": 3}}}
        assert sorted(select(data, "$..id")) == [1, 2, 3]

    def test_bracket_wildcard_on_object(self):
        """Test that [*] on an object selects its member values."""
        assert select({"a": 1, "b": 2}, "$[*]") == [1, 2]
        assert select({"data": {"x": "p", "y": "q"}}, "$.data[*]") == ["p", "q"]

    def test_bracket_wildcard_matches_dot_wildcard(self):
        """Test that $[*] and $.* select the same nodes from an object."""
        data = {"a": {"x": 1, "y": 2}, "b": {"x": 3}}
        assert select(data, "$[*]") == select(data, "$.*")
        assert flatten(select(data, "$[*].x")) == ["1", "3"]

    def test_bracket_wildcard_on_array(self):
        """Test that [*] still selects every array element."""
        assert select([{"a": 1}, [2]], "$[*]") == [{"a": 1}, [2]]

    def test_no_match_is_empty(self):
        """Test that a query matching nothing is not an error."""
        assert select(TODOS, "$[*].missing") == []
        assert select({}, "$.a.b.c") == []

    def test_select_whole_node(self):
        """Test that non-scalar nodes are returned as-is."""
        data = {"user": {"name": "Ada", "tags": ["x"]}}
        assert select(data, "$.user") == [{"name": "Ada", "tags": ["x"]}]

    def test_root_not_mutated(self):
        """Test that selection leaves the document untouched."""
        data = copy.deepcopy(TODOS)
        select(data, "$[*].title")
        select(data, "$..id")
        assert data == TODOS

    def test_evaluation_failure(self):
        """Test that evaluation failures are wrapped."""
        expr = PathExpression("$.evaluation_failure")
        with patch.object(expr._parsed, "find", side_effect=TypeError("unsupported")):
            with pytest.raises(PathEvaluationError) as exc_info:
                select({}, expr)
        assert exc_info.value.expression == "$.evaluation_failure"
        assert "unsupported" in exc_info.value.reason


class TestFlatten:
    """Test the flattening policy."""

    def setup_method(self):
        self.flattener = ValueFlattener()

    def test_strings_unquoted(self):
        """Test that strings flatten to themselves."""
        assert self.flattener.flatten(["b", "a"]) == ["a", "b"]

    def test_scalars(self):
        """Test textual rendering of null, booleans and numbers."""
        result = self.flattener.flatten([None, True, False, 42, 1.5, -3])
        assert result == sorted(["null", "true", "false", "42", "1.5", "-3"])

    def test_integral_float(self):
        """Test that integral floats render like integers."""
        assert self.flattener.flatten([1.0, 2]) == ["1", "2"]

    def test_large_and_small_floats(self):
        """Test that very large and very small floats keep exponent form."""
        assert self.flattener.flatten([1e21]) == ["1e+21"]
        assert self.flattener.flatten([1e20]) == ["100000000000000000000"]
        assert self.flattener.flatten([1e-05]) == ["1e-05"]

    def test_opaque_member_numbers_normalized(self):
        """Test that integral floats inside opaque members render like integers."""
        assert self.flattener.flatten([{"v": [1.0, 2.5]}]) == ["[1,2.5]"]
        assert self.flattener.flatten([{"o": {"n": 3.0, "big": 1e21}}]) == ['{"big":1e+21,"n":3}']

    def test_nested_array(self):
        """Test that nested arrays flatten to their leaves."""
        assert self.flattener.flatten([[1, 2], [3]]) == ["1", "2", "3"]

    def test_deeply_nested_array(self):
        """Test unbounded recursion through arrays."""
        assert self.flattener.flatten([[[["deep"]], "shallow"]]) == ["deep", "shallow"]

    def test_flatten_recursion_law(self):
        """Test that wrapping in an extra array layer changes nothing."""
        nodes = [1, [2, "x"], {"k": "v"}, None]
        assert self.flattener.flatten([nodes]) == self.flattener.flatten(nodes)
        assert self.flattener.flatten([[nodes]]) == self.flattener.flatten(nodes)

    def test_object_member_values(self):
        """Test that objects flatten to their member values, keys dropped."""
        result = self.flattener.flatten([{"s": "text", "n": 2, "z": None, "b": True}])
        assert result == ["2", "null", "text", "true"]

    def test_object_one_level_nested_object(self):
        """Test that a nested object member is rendered as one opaque string."""
        assert self.flattener.flatten([{"a": {"b": 1}}]) == ['{"b":1}']

    def test_object_one_level_nested_array(self):
        """Test that an array member of an object is not recursed into."""
        assert self.flattener.flatten([{"a": [1, 2]}]) == ["[1,2]"]

    def test_array_of_objects(self):
        """Test arrays recurse into objects, which stop after one level."""
        result = self.flattener.flatten([[{"id": 1, "tags": ["x"]}, {"id": 2}]])
        assert result == ["1", "2", '["x"]']

    def test_member_order_independent(self):
        """Test that object member order does not affect the output."""
        first = self.flattener.flatten([{"a": "x", "b": "y", "c": {"p": 1, "q": 2}}])
        second = self.flattener.flatten([{"c": {"q": 2, "p": 1}, "b": "y", "a": "x"}])
        assert first == second

    def test_lexicographic_sort(self):
        """Test that output is sorted as text, not numerically."""
        assert self.flattener.flatten([9, 10, 100]) == ["10", "100", "9"]

    def test_duplicates_kept(self):
        """Test that flattening keeps duplicate leaves."""
        assert self.flattener.flatten(["a", "a"]) == ["a", "a"]

    def test_empty(self):
        """Test that no nodes flatten to nothing."""
        assert self.flattener.flatten([]) == []
        assert self.flattener.flatten([[]]) == []
        assert self.flattener.flatten([{}]) == []

    def test_module_function(self):
        """Test the convenience function."""
        assert flatten([["b"], "a"]) == ["a", "b"]


class TestSetDiff:
    """Test set partitioning."""

    def setup_method(self):
        self.differ = SetDiffer()

    def test_identical(self):
        """Test identical collections are fully matched."""
        outcome = self.differ.diff(["A", "B"], ["B", "A"])
        assert outcome.matched == ("A", "B")
        assert outcome.only_in_left == ()
        assert outcome.only_in_right == ()
        assert outcome.is_equivalent is True

    def test_mismatch(self):
        """Test values present on one side only."""
        outcome = self.differ.diff(["A", "B"], ["B", "C"])
        assert outcome.matched == ("B",)
        assert outcome.only_in_left == ("A",)
        assert outcome.only_in_right == ("C",)
        assert outcome.is_equivalent is False

    def test_duplicates_collapse(self):
        """Test that sets, not multisets, are compared."""
        outcome = self.differ.diff(["A", "A", "B"], ["A", "B", "B"])
        assert outcome.matched == ("A", "B")
        assert outcome.is_equivalent is True

    def test_sorted_output(self):
        """Test that every part is sorted regardless of input order."""
        outcome = self.differ.diff(["z", "m", "a", "k"], ["k", "y", "b", "z"])
        assert outcome.matched == ("k", "z")
        assert outcome.only_in_left == ("a", "m")
        assert outcome.only_in_right == ("b", "y")

    def test_partition_law(self):
        """Test the parts are disjoint and cover every distinct value."""
        left = ["1", "2", "2", "3", "x"]
        right = ["3", "4", "x", "x", "5"]
        outcome = self.differ.diff(left, right)

        matched = set(outcome.matched)
        only_left = set(outcome.only_in_left)
        only_right = set(outcome.only_in_right)

        assert not matched & only_left
        assert not matched & only_right
        assert not only_left & only_right
        assert matched | only_left == set(left)
        assert matched | only_right == set(right)

    def test_empty(self):
        """Test two empty collections are vacuously equivalent."""
        outcome = self.differ.diff([], [])
        assert outcome.matched == ()
        assert outcome.is_equivalent is True


class TestComparisonEngine:
    """Test the end-to-end comparison."""

    def setup_method(self):
        self.engine = ComparisonEngine()

    def test_equivalent(self):
        """Test same titles in a different order are equivalent."""
        left = [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}]
        right = [{"title": "B"}, {"title": "A"}]

        result = self.engine.compare(left, "$[*].title", right, "$[*].title")
        assert result.matched == ("A", "B")
        assert result.only_in_left == ()
        assert result.only_in_right == ()
        assert result.is_equivalent is True

    def test_mismatch(self):
        """Test one-sided titles are reported per side."""
        left = [{"title": "A"}, {"title": "B"}]
        right = [{"title": "B"}, {"title": "C"}]

        result = self.engine.compare(left, "$[*].title", right, "$[*].title")
        assert result.matched == ("B",)
        assert result.only_in_left == ("A",)
        assert result.only_in_right == ("C",)
        assert result.is_equivalent is False

    def test_empty_selection_is_equivalent(self):
        """Test that nothing selected on both sides is vacuously equal."""
        result = self.engine.compare(TODOS, "$[*].missing", TODOS, "$.nothing")
        assert result.matched == ()
        assert result.is_equivalent is True

    def test_one_side_empty(self):
        """Test that an empty side makes every value one-sided."""
        result = self.engine.compare(TODOS, "$[*].id", [], "$[*].id")
        assert result.only_in_left == ("1", "2")
        assert result.is_equivalent is False

    def test_different_paths_per_side(self):
        """Test each side uses its own path."""
        left = [{"title": "A"}]
        right = {"data": [{"name": "A"}]}

        result = self.engine.compare(left, "$[*].title", right, "$.data[*].name")
        assert result.is_equivalent is True

    def test_numbers_compare_as_text(self):
        """Test that 1 and 1.0 from different documents match."""
        result = self.engine.compare({"v": [1, 2]}, "$.v", {"v": [2.0, 1.0]}, "$.v")
        assert result.is_equivalent is True

    def test_nested_numbers_compare_as_text(self):
        """Test that 1 and 1.0 inside opaque object members match."""
        result = self.engine.compare(
            {"o": {"v": [1, 2]}}, "$.o", {"o": {"v": [1.0, 2.0]}}, "$.o"
        )
        assert result.matched == ("[1,2]",)
        assert result.is_equivalent is True

    def test_bracket_wildcard_over_object(self):
        """Test $[*] and $.* give the same comparison on an object document."""
        data = {"a": {"x": 1, "y": 2}, "b": {"x": 3}}
        result = self.engine.compare(data, "$[*]", data, "$.*")
        assert result.matched == ("1", "2", "3")
        assert result.is_equivalent is True

    def test_sources_and_paths_recorded(self):
        """Test identity fields are attached to the result."""
        result = self.engine.compare(
            TODOS,
            PathExpression("$[*].title"),
            TODOS,
            "$[*].title",
            left_source="https://staging/todos",
            right_source="https://prod/todos",
        )
        assert result.left_source == "https://staging/todos"
        assert result.right_source == "https://prod/todos"
        assert result.left_path == "$[*].title"
        assert result.right_path == "$[*].title"

    def test_default_sources(self):
        """Test default side labels."""
        result = self.engine.compare([], "$", [], "$")
        assert result.left_source == "left"
        assert result.right_source == "right"

    def test_syntax_error_attributed_to_side(self):
        """Test a malformed path reports the side it came from."""
        with pytest.raises(PathSyntaxError) as exc_info:
            self.engine.compare(TODOS, "$[*].title", TODOS, "$[*")
        assert exc_info.value.side == "right"
        assert exc_info.value.expression == "$[*"

    def test_evaluation_error_attributed_to_side(self):
        """Test an evaluation failure reports its side and stops."""
        left = PathExpression("$.left_side")
        right = PathExpression("$.right_side")
        with patch.object(right._parsed, "find", side_effect=KeyError("boom")):
            with pytest.raises(PathEvaluationError) as exc_info:
                self.engine.compare({}, left, {}, right)
        assert exc_info.value.side == "right"

        with patch.object(left._parsed, "find", side_effect=ValueError("boom")):
            with pytest.raises(PathEvaluationError) as exc_info:
                self.engine.compare({}, left, {}, right)
        assert exc_info.value.side == "left"

    def test_deterministic(self):
        """Test identical inputs with reordered members give identical results."""
        left_a = [{"a": "x", "b": "y"}, {"a": "z", "b": "w"}]
        left_b = [{"b": "w", "a": "z"}, {"b": "y", "a": "x"}]
        right = [{"a": "x"}, {"a": "q"}]

        first = self.engine.compare(left_a, "$[*]", right, "$[*]")
        second = self.engine.compare(left_b, "$[*]", right, "$[*]")
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_object_nodes(self):
        """Test selecting whole objects compares their member values."""
        left = {"user": {"name": "Ada", "tags": ["admin", "ops"]}}
        right = {"user": {"name": "Ada", "tags": ["ops", "admin"]}}

        result = self.engine.compare(left, "$.user", right, "$.user")
        assert result.matched == ("Ada",)
        assert result.only_in_left == ('["admin","ops"]',)
        assert result.only_in_right == ('["ops","admin"]',)

    def test_module_function(self):
        """Test the convenience function."""
        result = compare(TODOS, "$[*].title", TODOS, "$[*].title")
        assert isinstance(result, ComparisonResult)
        assert result.is_equivalent is True


class TestComparisonResult:
    """Test result serialization."""

    def test_to_dict(self):
        """Test the JSON-ready representation."""
        result = compare(
            [{"t": "A"}, {"t": "B"}], "$[*].t",
            [{"t": "B"}, {"t": "C"}], "$[*].t",
            left_source="one", right_source="two",
        )
        assert result.to_dict() == {
            "is_equivalent": False,
            "left": {"source": "one", "jsonpath": "$[*].t"},
            "right": {"source": "two", "jsonpath": "$[*].t"},
            "summary": {"matched": 1, "only_in_left": 1, "only_in_right": 1},
            "matched": ["B"],
            "only_in_left": ["A"],
            "only_in_right": ["C"],
        }

    def test_immutable(self):
        """Test the result cannot be modified."""
        result = compare([], "$", [], "$")
        with pytest.raises(AttributeError):
            result.is_equivalent = False
