import abc
import json
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticSerializationError

from crpt.errors import EncodingError, ValidationError
from crpt.schemas.enums import DocumentType

INN_LENGTH = 10


class CrptObject(Protocol):
    def validate(self) -> None: ...

    def serialize(self) -> str: ...


class CrptDocument(CrptObject, Protocol):
    @property
    def doc_type(self) -> DocumentType: ...


class CrptModel(BaseModel):
    """Shared base for every object sent to the API.

    Instances are frozen. Fields are typed but left optional so that a value
    can be assembled piecemeal; business rules live in ``validate()`` and are
    enforced by ``serialize()`` before anything reaches the wire.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @abc.abstractmethod
    def validate(self) -> None:  # type: ignore[override]
        """Raise ``ValidationError`` for the first violated constraint."""

    def to_payload(self) -> dict[str, Any]:
        """Validate and return the JSON-ready dict with wire field names."""
        self.validate()
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            raise EncodingError(f"Failed to encode {type(self).__name__}: {e}") from e

    def serialize(self) -> str:
        payload = self.to_payload()
        try:
            return json.dumps(payload, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Failed to encode {type(self).__name__}: {e}") from e


def check(condition: bool, reason: str) -> None:
    if not condition:
        raise ValidationError(reason)


def check_exact_length(name: str, value: str | None, length: int = INN_LENGTH) -> None:
    check(value is not None, f"{name} is null")
    check(len(value) == length, f"{name} must be {length} characters long")


def check_not_empty(name: str, value: str | None) -> None:
    if value is not None:
        check(value != "", f"{name} is empty")
