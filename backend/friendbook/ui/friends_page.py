import logging

from pydantic import BaseModel, Field, ValidationError, field_validator

from friendbook.client import ApiError, FriendsClient
from friendbook.schemas.friend import EmailAddress, FriendCreate, FriendRead


logger = logging.getLogger(__name__)


def search_text(friend: FriendRead) -> str:
    parts = [
        friend.name,
        friend.title or "",
        friend.email,
        friend.x_username or "",
        friend.instagram_username or "",
    ]
    return " ".join(parts).lower()


def filter_friends(friends: list[FriendRead], query: str) -> list[FriendRead]:
    needle = query.strip().lower()
    if not needle:
        return list(friends)
    return [friend for friend in friends if needle in search_text(friend)]


def initials(name: str) -> str:
    return "".join(part[0] for part in name.split(" ") if part)[:2]


class FriendsPage:
    def __init__(self, client: FriendsClient) -> None:
        self.client = client
        self.query = ""
        self.friends: list[FriendRead] | None = None
        self.loading = True
        self.error: str | None = None
        self._cancelled = False

    def load(self) -> None:
        try:
            friends = self.client.list_friends()
            if not self._cancelled:
                self.friends = friends
        except ApiError as exc:
            if not self._cancelled:
                self.error = f"Request failed: {exc.status_code}"
        except Exception as exc:
            logger.debug("Loading friends failed: %s", exc)
            if not self._cancelled:
                self.error = str(exc) or "Unknown error"
        finally:
            if not self._cancelled:
                self.loading = False

    def close(self) -> None:
        self._cancelled = True

    def filtered(self) -> list[FriendRead]:
        if not self.friends:
            return []
        return filter_friends(self.friends, self.query)

    def add_created(self, friend: FriendRead) -> None:
        self.friends = [friend, *self.friends] if self.friends else [friend]


class FormError(Exception):
    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("; ".join(f"{name}: {message}" for name, message in errors.items()))
        self.errors = errors


_FORM_MESSAGES = {
    "name": "Name is required",
    "email": "Enter a valid email",
}


class AddFriendForm(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailAddress
    title: str = ""
    phone_number: str = ""
    x_username: str = ""
    instagram_username: str = ""

    @field_validator("title", "phone_number", "x_username", "instagram_username", mode="before")
    @classmethod
    def none_to_blank(cls, value: str | None) -> str:
        return value if value is not None else ""

    @classmethod
    def parse(cls, **values: str | None) -> "AddFriendForm":
        try:
            return cls(**values)
        except ValidationError as exc:
            errors: dict[str, str] = {}
            for error in exc.errors():
                name = str(error["loc"][0]) if error["loc"] else "form"
                errors.setdefault(name, _FORM_MESSAGES.get(name, error["msg"]))
            raise FormError(errors) from exc

    def to_payload(self) -> FriendCreate:
        def to_null(value: str) -> str | None:
            return value if value.strip() != "" else None

        return FriendCreate(
            name=self.name,
            email=self.email,
            title=to_null(self.title),
            phone_number=to_null(self.phone_number),
            x_username=to_null(self.x_username),
            instagram_username=to_null(self.instagram_username),
        )

    def submit(self, client: FriendsClient) -> FriendRead:
        return client.create_friend(self.to_payload())
