import base64
from typing import Literal

from pydantic import BaseModel

from crpt.schemas.base import CrptDocument
from crpt.schemas.enums import DocumentType, ProductGroup


def b64encode_text(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class SubmissionEnvelope(BaseModel):
    """Request body for documents/create. Built per call, never stored."""

    document_format: Literal["MANUAL"] = "MANUAL"
    product_document: str
    product_group: ProductGroup
    signature: str
    type: DocumentType = DocumentType.LP_INTRODUCE_GOODS

    @classmethod
    def build(
        cls, product_group: ProductGroup, document: CrptDocument, signature: str
    ) -> "SubmissionEnvelope":
        """Serialize ``document`` (validating it) and encode it with the signature.

        The signature is treated as opaque text; it is encoded, not verified.
        """
        return cls(
            product_document=b64encode_text(document.serialize()),
            product_group=product_group,
            signature=b64encode_text(signature),
            type=document.doc_type,
        )

    def to_body(self) -> dict:
        return self.model_dump(mode="json")
