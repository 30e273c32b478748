"""
Goods introduction document (``LP_INTRODUCE_GOODS``).

Registers the fact of production or import of marked goods. Wire names follow
the API: explicitly named fields (``doc_id``, ``doc_status``, ``importRequest``,
``reg_date``, ``reg_number``, ``doc_type``) keep their names, everything else is
snake_case. Null fields are dropped and an empty ``products`` list is omitted.
"""

from datetime import date, datetime
from typing import Any

from pydantic import Field, computed_field, field_serializer

from crpt.schemas.base import (
    CrptModel,
    check,
    check_exact_length,
    check_not_empty,
)
from crpt.schemas.enums import (
    CertificateDocument,
    DocumentStatus,
    DocumentType,
    ProductionType,
)

MAX_DOC_ID_LENGTH = 255


class Product(CrptModel):
    """A single product line of a goods introduction document."""

    certificate_document: CertificateDocument | None = None
    certificate_document_date: date | None = None
    certificate_document_number: str | None = None
    owner_inn: str | None = None
    producer_inn: str | None = None
    production_date: date | None = None
    tnved_code: str | None = None
    uit_code: str | None = None
    uitu_code: str | None = None

    def validate(self) -> None:
        certificate_group = (
            self.certificate_document,
            self.certificate_document_date,
            self.certificate_document_number,
        )
        if any(part is not None for part in certificate_group):
            check(self.certificate_document is not None, "certificate_document is null")
            check(self.certificate_document_date is not None, "certificate_document_date is null")
            check(
                self.certificate_document_number is not None,
                "certificate_document_number is null",
            )
        check_exact_length("owner_inn", self.owner_inn)
        check_exact_length("producer_inn", self.producer_inn)
        check(self.production_date is not None, "production_date is null")
        check_exact_length("tnved_code", self.tnved_code)
        check_not_empty("uit_code", self.uit_code)
        check_not_empty("uitu_code", self.uitu_code)


class GoodsIntroduceDocument(CrptModel):
    """Document introducing goods into circulation (domestic production)."""

    id: str | None = Field(None, serialization_alias="doc_id")
    status: DocumentStatus | None = Field(None, serialization_alias="doc_status")
    import_request: bool | None = Field(None, serialization_alias="importRequest")
    owner_inn: str | None = None
    participant_inn: str | None = None
    producer_inn: str | None = None
    production_date: date | None = None
    production_type: ProductionType | None = None
    products: tuple[Product, ...] | None = None
    registration_date: datetime | None = Field(None, serialization_alias="reg_date")
    registration_number: str | None = Field(None, serialization_alias="reg_number")

    @computed_field
    @property
    def doc_type(self) -> DocumentType:
        return DocumentType.LP_INTRODUCE_GOODS

    @field_serializer("registration_date")
    def _serialize_registration_date(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        return value.replace(microsecond=0, tzinfo=None).isoformat()

    def validate(self) -> None:
        """Check every field constraint, raising on the first violation.

        Products are checked in order, after the document-level fields that
        precede them on the wire.
        """
        check(self.id is not None, "id is null")
        check(
            bool(self.id.strip()) and len(self.id) <= MAX_DOC_ID_LENGTH,
            "id is empty or is too long",
        )
        check(self.status is not None, "status is null")
        check_exact_length("owner_inn", self.owner_inn)
        check_exact_length("participant_inn", self.participant_inn)
        check_exact_length("producer_inn", self.producer_inn)
        check(self.production_date is not None, "production_date is null")
        check(self.production_type is not None, "production_type is null")
        check(self.products is not None, "products is null")
        for product in self.products:
            product.validate()
        check(self.registration_date is not None, "registration_date is null")
        if self.registration_number is not None:
            check(bool(self.registration_number.strip()), "registration_number is empty")

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        if not payload.get("products"):
            payload.pop("products", None)
        return payload
