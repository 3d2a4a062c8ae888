"""
Unit tests for the Board entity.

Run with: pytest tests/test_board_entity.py -v
"""

from datetime import datetime, timezone

import pytest

from board_backend.domain.entities.board import Board
from board_backend.domain.entities.member import Member
from board_backend.domain.exceptions import DomainValidationError
from board_backend.domain.value_objects.board_status import BoardStatus
from board_backend.domain.value_objects.category import Category
from board_backend.domain.value_objects.member_id import MemberId


def _board(member, **overrides) -> Board:
    fields = dict(
        member=member,
        title="Weekend trip",
        content="Went to the coast.",
        category=Category.REVIEW,
        image_url="/static/uploads/defaultImage.png",
    )
    fields.update(overrides)
    return Board.create(**fields)


class TestCreate:
    def test_create_binds_member_and_starts_active(self, alice):
        board = _board(alice)

        assert board.member == alice
        assert board.id is None
        assert board.status is BoardStatus.ACTIVE
        assert board.deleted_at is None
        assert not board.is_deleted

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_rejected(self, alice, title):
        with pytest.raises(DomainValidationError):
            _board(alice, title=title)

    def test_missing_member_rejected(self):
        with pytest.raises(DomainValidationError):
            _board(None)

    def test_category_must_be_enum(self, alice):
        with pytest.raises(DomainValidationError):
            _board(alice, category="REVIEW_PLUS")

    def test_empty_image_url_rejected(self, alice):
        with pytest.raises(DomainValidationError):
            _board(alice, image_url="")


class TestUpdate:
    def test_update_replaces_every_field_and_keeps_identity(self, alice, bob):
        board = _board(alice)

        result = board.update(
            member=bob,
            title="Rainy day",
            content="",
            category=Category.TIP,
            image_url="https://images.example.com/new.png",
        )

        assert result is board
        assert board.member == bob
        assert board.title == "Rainy day"
        assert board.content == ""
        assert board.category is Category.TIP
        assert board.image_url == "https://images.example.com/new.png"

    def test_invalid_update_leaves_board_untouched(self, alice, bob):
        board = _board(alice)

        with pytest.raises(DomainValidationError):
            board.update(bob, " ", "x", Category.FREE, "/img.png")

        assert board.member == alice
        assert board.title == "Weekend trip"


class TestRecordDeletion:
    def test_record_deletion_sets_status_and_timestamp(self, alice):
        board = _board(alice)
        at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

        board.record_deletion(at)

        assert board.is_deleted
        assert board.status is BoardStatus.DELETED
        assert board.deleted_at == at

    def test_record_deletion_requires_time(self, alice):
        with pytest.raises(DomainValidationError):
            _board(alice).record_deletion(None)


def test_members_compare_by_id():
    assert Member(id=MemberId(7), nickname="a") == Member(id=MemberId(7), nickname="b")
    assert Member(id=MemberId(7)) != Member(id=MemberId(8))
    assert len({Member(id=MemberId(7)), Member(id=MemberId(7), nickname="x")}) == 1
