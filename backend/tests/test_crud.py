from sqlalchemy.orm import Session

from friendbook.crud import friend as crud


def test_create_and_get(db: Session) -> None:
    created = crud.create_friend(db, {"name": "Ada", "email": "ada@example.com", "phone_number": "123"})
    assert created.id is not None

    fetched = crud.get_friend(db, created.id)
    assert fetched is not None
    assert fetched.phone_number == "123"
    assert crud.get_friend(db, created.id + 1) is None


def test_update_reports_missing_rows(db: Session) -> None:
    assert crud.update_friend(db, 42, {"name": "Nobody"}) is None


def test_update_merges_changes(db: Session) -> None:
    created = crud.create_friend(db, {"name": "Ada", "email": "ada@example.com", "title": "Engineer"})

    updated = crud.update_friend(db, created.id, {"x_username": "@ada"})
    assert updated is not None
    assert updated.title == "Engineer"
    assert updated.x_username == "@ada"


def test_delete_reports_missing_rows(db: Session) -> None:
    created = crud.create_friend(db, {"name": "Ada", "email": "ada@example.com"})

    assert crud.delete_friend(db, created.id) is True
    assert crud.delete_friend(db, created.id) is False
    assert crud.list_friends(db) == []


def test_columns_match_entity_names(db: Session) -> None:
    from friendbook.models import Friend

    assert [column.name for column in Friend.__table__.columns] == [
        "id",
        "name",
        "title",
        "phoneNumber",
        "email",
        "xUsername",
        "instagramUsername",
    ]
    assert Friend.__table__.columns["email"].unique
