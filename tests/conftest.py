import httpx
import pytest

from crpt.schemas.goods_introduce import GoodsIntroduceDocument, Product
from crpt.services.crpt_service import CrptApi

from tests.factories import (
    TEST_API_URL,
    TEST_TOKEN,
    make_document,
    make_product,
    make_test_settings,
)


@pytest.fixture
def sample_product() -> Product:
    return make_product()


@pytest.fixture
def sample_document() -> GoodsIntroduceDocument:
    return make_document()


@pytest.fixture
async def make_client():
    """Factory for clients wired to an in-process mock endpoint."""
    created: list[tuple[CrptApi, httpx.AsyncClient]] = []

    def _make(handler, *, capacity: int = 5, period: float = 1.0, **settings_overrides) -> CrptApi:
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url=TEST_API_URL
        )
        api = CrptApi(
            TEST_TOKEN,
            period,
            capacity,
            settings=make_test_settings(**settings_overrides),
            http_client=http_client,
        )
        created.append((api, http_client))
        return api

    yield _make

    for api, http_client in created:
        await api.aclose()
        await http_client.aclose()
