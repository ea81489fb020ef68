import copy

import pytest

from assertpack.diff import non_matching_mappings, non_matching_sequences


def test_sequence_residues_report_only_unmatched_elements() -> None:
    expected_residue, input_residue = non_matching_sequences([1, 2, 3, 4, 5], [5, 4, 1, 4, 2])

    assert expected_residue == [3]
    assert input_residue == [4]


@pytest.mark.parametrize(
    ("left", "right"),
    [
        ([1, 2, 3, 4, 5], [5, 1, 3, 4, 2]),
        (["abc", "def", "abc"], ["abc", "abc", "def"]),
        ([[1], {"a": 1}, [1]], [{"a": 1}, [1], [1]]),
        ([], []),
        (None, []),
        (None, None),
    ],
)
def test_sequence_permutations_have_empty_residues(left: list | None, right: list | None) -> None:
    assert non_matching_sequences(left, right) == ([], [])
    assert non_matching_sequences(right, left) == ([], [])


def test_sequence_duplicates_are_matched_by_multiplicity() -> None:
    expected_residue, input_residue = non_matching_sequences(
        ["abc", "def", "ghi", "jkl", "abc"],
        ["abc", "def", "ghi", "jkl"],
    )

    assert expected_residue == ["abc"]
    assert input_residue == []


def test_sequence_matching_is_type_strict() -> None:
    expected_residue, input_residue = non_matching_sequences([1, True], [True, 1.0])

    assert expected_residue == [1]
    assert type(expected_residue[0]) is int
    assert input_residue == [1.0]
    assert type(input_residue[0]) is float


def test_sequence_diff_does_not_mutate_inputs() -> None:
    left = [{"a": [1, 2]}, [3], 4]
    right = [4, [3], {"a": [1, 3]}]
    left_before = copy.deepcopy(left)
    right_before = copy.deepcopy(right)

    non_matching_sequences(left, right)

    assert left == left_before
    assert right == right_before


def test_sequence_diff_accepts_tuples() -> None:
    assert non_matching_sequences((1, 2), (2, 3)) == ([1], [3])


def test_mapping_residues_cover_missing_and_differing_keys() -> None:
    expected_residue, input_residue = non_matching_mappings(
        {"a": 1, "b": 2, "c": 3},
        {"a": 1, "b": 20, "d": 4},
    )

    assert expected_residue == {"b": 2, "c": 3}
    assert input_residue == {"b": 20, "d": 4}


def test_mapping_equal_keys_are_omitted_from_both_residues() -> None:
    expected_residue, input_residue = non_matching_mappings(
        {"same": [1, {"x": 2}], "other": "a"},
        {"same": [1, {"x": 2}], "other": "b"},
    )

    assert "same" not in expected_residue
    assert "same" not in input_residue
    assert expected_residue == {"other": "a"}
    assert input_residue == {"other": "b"}


def test_mapping_values_are_compared_type_strictly() -> None:
    expected_residue, input_residue = non_matching_mappings({"flag": True}, {"flag": 1})

    assert expected_residue["flag"] is True
    assert type(input_residue["flag"]) is int


def test_mapping_none_and_empty_are_equivalent() -> None:
    assert non_matching_mappings(None, {}) == ({}, {})
    assert non_matching_mappings({}, None) == ({}, {})
    assert non_matching_mappings(None, {"a": 1}) == ({}, {"a": 1})


def test_mapping_keys_are_matched_type_strictly() -> None:
    expected_residue, input_residue = non_matching_mappings({1: "a"}, {True: "a"})

    assert expected_residue == {1: "a"}
    assert input_residue == {True: "a"}
    assert [type(key) for key in expected_residue] == [int]
    assert [type(key) for key in input_residue] == [bool]

    assert non_matching_mappings({1.0: "a", "x": 1}, {1: "a", "x": 1}) == ({1.0: "a"}, {1: "a"})


def test_mapping_value_none_is_not_confused_with_missing_key() -> None:
    assert non_matching_mappings({"a": None}, {"a": None}) == ({}, {})
    assert non_matching_mappings({"a": None}, {}) == ({"a": None}, {})
