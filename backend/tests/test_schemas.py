import pytest
from pydantic import ValidationError

from friendbook.schemas.friend import FriendCreate, FriendRead, FriendUpdate


def test_create_accepts_camel_case_and_snake_case() -> None:
    camel = FriendCreate.model_validate({"name": "Ada", "email": "ada@example.com", "phoneNumber": "123"})
    snake = FriendCreate(name="Ada", email="ada@example.com", phone_number="123")
    assert camel == snake
    assert camel.model_dump(by_alias=True)["phoneNumber"] == "123"


def test_create_requires_name_and_valid_email() -> None:
    with pytest.raises(ValidationError):
        FriendCreate(name="", email="ada@example.com")
    with pytest.raises(ValidationError):
        FriendCreate(name="Ada", email="ada-at-example.com")


def test_update_requires_at_least_one_field() -> None:
    with pytest.raises(ValidationError, match="At least one field must be provided"):
        FriendUpdate()
    with pytest.raises(ValidationError, match="At least one field must be provided"):
        FriendUpdate.model_validate({"nickname": "ignored"})


def test_update_changes_keep_explicit_nulls_only_when_supplied() -> None:
    update = FriendUpdate.model_validate({"title": None, "instagramUsername": "@ada.ig"})
    assert update.changes() == {"title": None, "instagram_username": "@ada.ig"}


def test_update_rejects_null_name_or_email() -> None:
    with pytest.raises(ValidationError):
        FriendUpdate.model_validate({"name": None})
    with pytest.raises(ValidationError):
        FriendUpdate.model_validate({"email": None})


def test_read_serializes_with_camel_case_keys() -> None:
    friend = FriendRead(id=1, name="Ada", email="ada@example.com", x_username="@ada")
    assert friend.model_dump(by_alias=True) == {
        "id": 1,
        "name": "Ada",
        "title": None,
        "phoneNumber": None,
        "email": "ada@example.com",
        "xUsername": "@ada",
        "instagramUsername": None,
    }
