"""Tests for user service."""

from uuid import uuid4

import pytest

from calorie_tracker.domain.errors import InvalidData, NotFound
from calorie_tracker.domain.users import Goal
from calorie_tracker.services.users import UserService
from tests.conftest import InMemoryUserRepository


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": "Ivan",
        "email": "ivan@example.com",
        "age": 30,
        "weight_kg": 80.5,
        "height_cm": 180,
        "goal": "WEIGHT_LOSS",
    }
    payload.update(overrides)
    return payload


def test_create_user_computes_target() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    user = service.create_user(_payload())

    assert user.daily_calorie_target == 2213
    assert user.goal is Goal.WEIGHT_LOSS
    assert repository.users[user.id] == user


def test_create_user_rejects_duplicate_email() -> None:
    service = UserService(InMemoryUserRepository())
    service.create_user(_payload())

    with pytest.raises(InvalidData):
        service.create_user(_payload(name="Other"))


def test_update_user_recomputes_target() -> None:
    service = UserService(InMemoryUserRepository())
    user = service.create_user(_payload())

    updated = service.update_user(user.id, _payload(goal=Goal.MAINTENANCE))

    assert updated.id == user.id
    assert updated.daily_calorie_target == 2766


def test_update_user_keeps_own_email() -> None:
    service = UserService(InMemoryUserRepository())
    user = service.create_user(_payload())

    updated = service.update_user(user.id, _payload(weight_kg=75.0))

    assert updated.weight_kg == 75.0


def test_update_user_rejects_email_taken_by_another_user() -> None:
    service = UserService(InMemoryUserRepository())
    service.create_user(_payload(email="taken@example.com"))
    user = service.create_user(_payload())

    with pytest.raises(InvalidData):
        service.update_user(user.id, _payload(email="taken@example.com"))


def test_update_missing_user_raises_not_found() -> None:
    service = UserService(InMemoryUserRepository())

    with pytest.raises(NotFound):
        service.update_user(uuid4(), _payload())


def test_delete_user() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    user = service.create_user(_payload())

    service.delete_user(user.id)

    assert repository.users == {}
    with pytest.raises(NotFound):
        service.delete_user(user.id)
