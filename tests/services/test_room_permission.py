"""Tests for the room permission evaluator."""

import datetime

import pytest

from roomgate.models import GuestReservationRoom, Reservation
from roomgate.repositories import GrantRepository, ReservationRepository
from roomgate.services.errors import BadInputError, ForbiddenError, NotCheckedInError
from roomgate.services.room_permission import RoomPermissionService
from tests.conftest import TODAY


@pytest.fixture()
def permissions(db_session) -> RoomPermissionService:
    return RoomPermissionService(ReservationRepository(db_session), GrantRepository(db_session))


@pytest.fixture()
def shared_room_two(db_session, reservation, friend) -> GuestReservationRoom:
    grant = GuestReservationRoom(email=friend.email, reservation_id=reservation.id, room_id=2)
    db_session.add(grant)
    db_session.flush()
    return grant


class TestOwner:
    def test_owner_may_enter_every_reserved_room(self, permissions, owner, reservation) -> None:
        rooms = permissions.find_rooms_that_can_enter(owner.id, owner.email, TODAY)
        assert rooms == [1, 2, 3]

    def test_owner_permission_per_room(self, permissions, owner, reservation) -> None:
        assert permissions.has_permission_to_enter_room(owner.id, owner.email, TODAY, 2) is True
        assert permissions.has_permission_to_enter_room(owner.id, owner.email, TODAY, 99) is False

    def test_is_reservation_owner(self, permissions, owner, friend, reservation) -> None:
        assert permissions.is_reservation_owner(owner.id, reservation.id) is True
        assert permissions.is_reservation_owner(friend.id, reservation.id) is False

    def test_unknown_reservation(self, permissions, owner) -> None:
        with pytest.raises(BadInputError):
            permissions.is_reservation_owner(owner.id, "missing")


class TestGrantee:
    def test_grantee_may_enter_only_shared_room(
        self, permissions, friend, shared_room_two
    ) -> None:
        assert permissions.find_rooms_that_can_enter(friend.id, friend.email, TODAY) == [2]
        assert permissions.has_permission_to_enter_room(friend.id, friend.email, TODAY, 2) is True
        assert permissions.has_permission_to_enter_room(friend.id, friend.email, TODAY, 3) is False

    def test_first_grant_wins(self, db_session, permissions, friend, shared_room_two) -> None:
        db_session.add(
            GuestReservationRoom(email=friend.email, reservation_id=shared_room_two.reservation_id, room_id=3)
        )
        db_session.flush()
        assert permissions.room_shared(friend.email, shared_room_two.reservation_id) == 2

    def test_no_grant_is_forbidden(self, permissions, friend, reservation) -> None:
        with pytest.raises(ForbiddenError):
            permissions.room_shared(friend.email, reservation.id)


class TestReservationLookup:
    def test_no_reservation_means_not_checked_in(self, permissions, stranger) -> None:
        with pytest.raises(NotCheckedInError) as exc_info:
            permissions.find_reservation_in(stranger.id, stranger.email, TODAY)
        assert exc_info.value.detail == "Not checked in."

    def test_outside_stay_window(self, permissions, owner, reservation) -> None:
        with pytest.raises(NotCheckedInError):
            permissions.find_rooms_that_can_enter(owner.id, owner.email, TODAY + datetime.timedelta(days=5))

    def test_check_out_day_is_inclusive(self, permissions, owner, reservation) -> None:
        found = permissions.find_reservation_in(owner.id, owner.email, reservation.check_out)
        assert found.id == reservation.id

    def test_earliest_check_in_wins(self, db_session, permissions, owner, rooms, reservation) -> None:
        later = Reservation(
            id="r0",
            guest_id=owner.id,
            check_in=TODAY,
            check_out=TODAY + datetime.timedelta(days=1),
            rooms=[rooms[3]],
        )
        db_session.add(later)
        db_session.flush()
        assert permissions.find_reservation_in(owner.id, owner.email, TODAY).id == reservation.id

    def test_same_check_in_ties_break_on_id(self, db_session, permissions, owner, rooms, reservation) -> None:
        twin = Reservation(
            id="r0",
            guest_id=owner.id,
            check_in=reservation.check_in,
            check_out=reservation.check_out,
            rooms=[rooms[3]],
        )
        db_session.add(twin)
        db_session.flush()
        assert permissions.find_reservation_in(owner.id, owner.email, TODAY).id == "r0"


class TestShareRoom:
    def test_owner_shares_room(self, permissions, owner, friend, reservation) -> None:
        grant = permissions.share_room(owner.id, friend.email, reservation.id, 3)
        assert grant.id is not None
        assert permissions.find_rooms_that_can_enter(friend.id, friend.email, TODAY) == [3]

    def test_non_owner_cannot_share(self, permissions, friend, reservation) -> None:
        with pytest.raises(ForbiddenError) as exc_info:
            permissions.share_room(friend.id, "someone@roomgate.io", reservation.id, 1)
        assert exc_info.value.detail == "Can not share room. You did not make this reservation."

    def test_room_must_belong_to_reservation(self, permissions, owner, friend, reservation) -> None:
        with pytest.raises(BadInputError):
            permissions.share_room(owner.id, friend.email, reservation.id, 4)

    def test_duplicate_grants_are_allowed(self, permissions, owner, friend, reservation) -> None:
        first = permissions.share_room(owner.id, friend.email, reservation.id, 1)
        second = permissions.share_room(owner.id, friend.email, reservation.id, 1)
        assert first.id != second.id
