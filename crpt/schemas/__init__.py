from crpt.schemas.enums import (
    CertificateDocument,
    DocumentStatus,
    DocumentType,
    ProductGroup,
    ProductionType,
)
from crpt.schemas.envelope import SubmissionEnvelope
from crpt.schemas.goods_introduce import GoodsIntroduceDocument, Product

__all__ = [
    "CertificateDocument",
    "DocumentStatus",
    "DocumentType",
    "GoodsIntroduceDocument",
    "Product",
    "ProductGroup",
    "ProductionType",
    "SubmissionEnvelope",
]
