from crpt.errors import (
    ApiError,
    CrptError,
    EncodingError,
    ProtocolError,
    TransportError,
    ValidationError,
)
from crpt.logging_config import configure_logging
from crpt.schemas import (
    CertificateDocument,
    DocumentStatus,
    DocumentType,
    GoodsIntroduceDocument,
    Product,
    ProductGroup,
    ProductionType,
)
from crpt.services.crpt_service import CrptApi

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "CertificateDocument",
    "CrptApi",
    "CrptError",
    "DocumentStatus",
    "DocumentType",
    "EncodingError",
    "GoodsIntroduceDocument",
    "Product",
    "ProductGroup",
    "ProductionType",
    "ProtocolError",
    "TransportError",
    "ValidationError",
    "configure_logging",
]
