"""Tests for merging manager lists."""

import pytest

from seller_api.app.services.managers import merge_manager_ids


class TestMergeManagerIds:
    @pytest.mark.parametrize(
        ("existing", "additional"),
        [
            ([1, 2], [2, 3]),
            ([3, 2, 1], [1]),
            ([], [5, 4]),
            ([7, 7, 8], [8, 9, 9]),
        ],
    )
    def test_is_set_union(self, existing, additional) -> None:
        merged = merge_manager_ids(existing, additional)
        assert set(merged) == set(existing) | set(additional)
        assert len(merged) == len(set(merged))

    def test_commutative(self) -> None:
        assert set(merge_manager_ids([1, 2], [3])) == set(merge_manager_ids([3], [1, 2]))

    def test_idempotent(self) -> None:
        ids = [4, 1, 9]
        assert set(merge_manager_ids(ids, ids)) == set(ids)

    def test_empty_additional_keeps_existing(self) -> None:
        assert set(merge_manager_ids([2, 3], [])) == {2, 3}

    def test_both_empty(self) -> None:
        assert merge_manager_ids([], []) == []

    def test_accepts_sets(self) -> None:
        assert set(merge_manager_ids({1, 2}, {2, 3})) == {1, 2, 3}
