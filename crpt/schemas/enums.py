import enum


class ProductGroup(str, enum.Enum):
    """Product group tag used by the API to route a submission."""

    CLOTHES = "clothes"  # clothing, bed, table, toilet and kitchen linen
    SHOES = "shoes"
    TOBACCO = "tobacco"
    PERFUMERY = "perfumery"
    TIRES = "tires"  # new pneumatic rubber tires
    ELECTRONICS = "electronics"  # cameras, flashes and flash lamps
    PHARMA = "pharma"
    MILK = "milk"
    BICYCLE = "bicycle"
    WHEELCHAIRS = "wheelchairs"

    @property
    def code(self) -> int:
        return PRODUCT_GROUP_CODES[self]


PRODUCT_GROUP_CODES: dict[ProductGroup, int] = {
    ProductGroup.CLOTHES: 1,
    ProductGroup.SHOES: 2,
    ProductGroup.TOBACCO: 3,
    ProductGroup.PERFUMERY: 4,
    ProductGroup.TIRES: 5,
    ProductGroup.ELECTRONICS: 6,
    ProductGroup.PHARMA: 7,
    ProductGroup.MILK: 8,
    ProductGroup.BICYCLE: 9,
    ProductGroup.WHEELCHAIRS: 10,
}


class DocumentStatus(str, enum.Enum):
    CHECKED_OK = "CHECKED_OK"
    CHECKED_NOT_OK = "CHECKED_NOT_OK"
    PROCESSING_ERROR = "PROCESSING_ERROR"
    IN_PROGRESS = "IN_PROGRESS"


class DocumentType(str, enum.Enum):
    """Document kinds accepted by the documents/create endpoint."""

    LP_INTRODUCE_GOODS = "LP_INTRODUCE_GOODS"


class ProductionType(str, enum.Enum):
    OWN_PRODUCTION = "OWN_PRODUCTION"
    CONTRACT_PRODUCTION = "CONTRACT_PRODUCTION"


class CertificateDocument(str, enum.Enum):
    """Kind of mandatory certification document attached to a product."""

    CONFORMITY_CERTIFICATE = "CONFORMITY_CERTIFICATE"
    CONFORMITY_DECLARATION = "CONFORMITY_DECLARATION"
