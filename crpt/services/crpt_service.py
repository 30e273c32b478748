"""
CRPT marking-system API client.

Submits goods introduction documents to ``documents/create`` while keeping the
request rate under a fixed quota per period.

Flow per call:
  1. Take a permit from the rate limiter (may wait for the next refill)
  2. Validate and serialize the document
  3. Wrap it with the signature in the submission envelope
  4. POST the envelope and return the identifier assigned by the API
"""

import json
import logging
from datetime import timedelta

import httpx

from crpt.config import Settings, get_settings
from crpt.errors import ApiError, ProtocolError, TransportError
from crpt.schemas.base import CrptDocument
from crpt.schemas.envelope import SubmissionEnvelope
from crpt.schemas.enums import ProductGroup
from crpt.services.lifecycle import RefillScheduler
from crpt.services.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger("crpt.client")


class CrptApi:
    """Rate-limited client for the CRPT API.

    Must be created inside a running event loop: construction starts the
    background refill task. Call ``shutdown()`` (or ``aclose()``, or use the
    client as an async context manager) when done.
    """

    def __init__(
        self,
        token: str,
        period: float | timedelta,
        capacity: int,
        *,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or get_settings()
        self._token = token
        self.limiter = FixedWindowRateLimiter(capacity, period)
        self.scheduler = RefillScheduler(
            self.limiter, shutdown_timeout=self.settings.shutdown_timeout
        )
        self.scheduler.start()
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            base_url=self.settings.api_url,
            timeout=self.settings.request_timeout,
        )
        logger.info(
            "CRPT client ready (env=%s, api_url=%s)",
            self.settings.environment,
            self.settings.api_url,
        )

    async def __aenter__(self) -> "CrptApi":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._token}",
        }

    async def submit(
        self,
        product_group: ProductGroup,
        document: CrptDocument,
        signature: str,
    ) -> str:
        """Introduce goods into circulation.

        Args:
            product_group: Product group the document belongs to.
            document: Document to submit; validated before anything is sent.
            signature: Detached signature of the document, sent base64-encoded.

        Returns:
            Identifier the API assigned to the document.

        Raises:
            ValidationError: The document failed validation (no request sent).
            EncodingError: The document could not be serialized (no request sent).
            TransportError: The request could not be completed.
            ApiError: The API answered with a non-200 status.
            ProtocolError: The 200 response had no ``value`` field.
        """
        await self.limiter.acquire()

        envelope = SubmissionEnvelope.build(product_group, document, signature)

        logger.debug(
            "Submitting %s document (product_group=%s)",
            document.doc_type.value,
            product_group.value,
        )
        try:
            response = await self.http_client.post(
                self.settings.create_document_path,
                params={"pg": product_group.value},
                headers=self._headers(),
                content=json.dumps(envelope.to_body()),
                timeout=self.settings.request_timeout,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to send request: {e}") from e

        if response.status_code != 200:
            raise ApiError(response.status_code, response.text)

        document_id = _parse_document_id(response.text)
        logger.info("Document accepted (product_group=%s, id=%s)", product_group.value, document_id)
        return document_id

    async def shutdown(self) -> None:
        """Stop the refill schedule. Idempotent; waits at most ``shutdown_timeout``."""
        await self.scheduler.shutdown()

    async def aclose(self) -> None:
        await self.shutdown()
        if self._owns_http_client:
            await self.http_client.aclose()


def _parse_document_id(body: str) -> str:
    """Extract the document identifier from a successful response body."""
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"Response was not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ProtocolError("Response JSON is not an object")
    if "value" not in data:
        raise ProtocolError("Field 'value' not found in JSON response")

    value = data["value"]
    if isinstance(value, (dict, list)):
        raise ProtocolError("Field 'value' is not a scalar")
    return value if isinstance(value, str) else json.dumps(value)
