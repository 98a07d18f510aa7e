from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


def check_email(value: str) -> str:
    # Format check only; the stored address keeps the caller's spelling.
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


EmailAddress = Annotated[str, AfterValidator(check_email)]


class FriendSchema(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class FriendRead(FriendSchema):
    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Ada Lovelace"])
    title: str | None = Field(None, examples=["Engineer"])
    phone_number: str | None = Field(None, examples=["+1 555-1234"])
    email: str = Field(..., examples=["ada@example.com"])
    x_username: str | None = Field(None, examples=["@ada"])
    instagram_username: str | None = Field(None, examples=["@ada.ig"])

    class Config:
        from_attributes = True


class FriendCreate(FriendSchema):
    name: str = Field(..., min_length=1)
    title: str | None = None
    phone_number: str | None = None
    email: EmailAddress
    x_username: str | None = None
    instagram_username: str | None = None


class FriendUpdate(FriendSchema):
    name: str | None = Field(None, min_length=1)
    title: str | None = None
    phone_number: str | None = None
    email: EmailAddress | None = None
    x_username: str | None = None
    instagram_username: str | None = None

    @model_validator(mode="after")
    def check_fields(self) -> "FriendUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        for required in ("name", "email"):
            if required in self.model_fields_set and getattr(self, required) is None:
                raise ValueError(f"{required} must not be null")
        return self

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


class NotFoundMessage(BaseModel):
    message: str = Field(..., examples=["Friend not found"])


class ValidationErrorEnvelope(BaseModel):
    code: int = Field(400, examples=[400])
    errorCode: str = Field("VALIDATION_ERROR", examples=["VALIDATION_ERROR"])
    message: str = Field("Validation Error", examples=["Validation Error"])
    errors: list[dict[str, object]] = Field(default_factory=list)


class InternalErrorEnvelope(BaseModel):
    code: int = Field(500, examples=[500])
    errorCode: str = Field("INTERNAL_SERVER_ERROR", examples=["INTERNAL_SERVER_ERROR"])
    message: str = Field("Internal Server Error", examples=["Internal Server Error"])
