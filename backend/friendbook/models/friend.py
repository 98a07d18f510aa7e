from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from friendbook.db.base import Base


class Friend(Base):
    __tablename__ = "friends"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone_number: Mapped[str | None] = mapped_column("phoneNumber", Text, nullable=True)
    email: Mapped[str] = mapped_column(Text, unique=True, index=True)
    x_username: Mapped[str | None] = mapped_column("xUsername", Text, nullable=True)
    instagram_username: Mapped[str | None] = mapped_column("instagramUsername", Text, nullable=True)

    def __repr__(self) -> str:
        return f"Friend(id={self.id!r}, email={self.email!r})"
