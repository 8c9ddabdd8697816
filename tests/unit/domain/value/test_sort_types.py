"""Unit tests for question sort parsing."""

import pytest

from icebreaker.domain.value import QuestionSortField, SortOrder


class TestQuestionSortField:
    """Tests for QuestionSortField.parse."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("title", QuestionSortField.TITLE),
            ("createdAt", QuestionSortField.CREATED_AT),
            ("likeCount", QuestionSortField.LIKE_COUNT),
            ("like_count", QuestionSortField.LIKE_COUNT),
            ("LIKECOUNT", QuestionSortField.LIKE_COUNT),
            ("viewcount", QuestionSortField.VIEW_COUNT),
        ],
    )
    def test_parses_any_casing(self, value, expected):
        assert QuestionSortField.parse(value) == expected

    @pytest.mark.parametrize("value", [None, "", "popularity"])
    def test_unknown_falls_back_to_created_at(self, value):
        assert QuestionSortField.parse(value) == QuestionSortField.CREATED_AT


class TestSortOrder:
    """Tests for SortOrder.parse."""

    @pytest.mark.parametrize("value", ["asc", "ASC", " Asc "])
    def test_parses_ascending(self, value):
        assert SortOrder.parse(value) == SortOrder.ASC

    @pytest.mark.parametrize("value", [None, "", "desc", "sideways"])
    def test_defaults_to_descending(self, value):
        assert SortOrder.parse(value) == SortOrder.DESC
