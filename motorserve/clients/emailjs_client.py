"""
EmailJS client - delivers booking details through the EmailJS REST API.

The send endpoint takes the service id, template id, public key and a
flat bag of template parameters. There is no response payload of
interest: a 2xx status means the email was accepted.

Docs:
- https://www.emailjs.com/docs/rest-api/send/
"""

import asyncio
from typing import Optional, Protocol

import httpx

from motorserve.config import EmailConfig
from motorserve.logging_context import get_submission_logger
from motorserve.schemas.email_schema import EmailSendRequest

logger = get_submission_logger(__name__)


class DispatchError(Exception):
    """Raised when the provider call fails or is rejected."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class EmailDispatcher(Protocol):
    """Anything that can deliver a booking parameter bag."""

    async def send(
        self,
        service_id: str,
        template_id: str,
        template_params: dict[str, str],
        public_key: str,
    ) -> None:
        ...


class EmailJSClient:
    """
    Async client for the EmailJS send endpoint.

    A single attempt is made per call; retries are left to the user.
    """

    def __init__(self, config: EmailConfig, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the EmailJS client.

        Args:
            config: Endpoint and timeout settings
            client: Pre-built HTTP client (e.g. one using a mock transport)
        """
        self.api_url = config.api_url
        self.timeout = config.timeout_sec
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "EmailJSClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def send(
        self,
        service_id: str,
        template_id: str,
        template_params: dict[str, str],
        public_key: str,
    ) -> None:
        """
        Send one templated email.

        Args:
            service_id: EmailJS service identifier
            template_id: EmailJS template identifier
            template_params: Values substituted into the template
            public_key: EmailJS public key (sent as ``user_id``)

        Raises:
            DispatchError: On network failure or a non-2xx response
        """
        client = await self._get_client()

        payload = EmailSendRequest(
            service_id=service_id,
            template_id=template_id,
            user_id=public_key,
            template_params=template_params,
        )

        try:
            response = await client.post(self.api_url, json=payload.model_dump())
        except httpx.HTTPError as e:
            raise DispatchError(f"EmailJS request failed: {e}") from e

        if not response.is_success:
            raise DispatchError(
                f"EmailJS rejected the request with status {response.status_code}",
                status_code=response.status_code,
                response_text=response.text,
            )

        logger.info("EmailJS accepted booking")


class OfflineEmailClient:
    """
    Dispatcher that records sends instead of calling the provider.

    Used by the console form's offline mode so the full flow can be
    exercised without credentials or network access.
    """

    def __init__(self, delay_sec: float = 0.0) -> None:
        self.delay_sec = delay_sec
        self.sent: list[EmailSendRequest] = []

    async def send(
        self,
        service_id: str,
        template_id: str,
        template_params: dict[str, str],
        public_key: str,
    ) -> None:
        request = EmailSendRequest(
            service_id=service_id,
            template_id=template_id,
            user_id=public_key,
            template_params=template_params,
        )
        await asyncio.sleep(self.delay_sec)
        self.sent.append(request)
        logger.info(
            "Offline send recorded for %s (template %s)",
            template_params.get("customer_name", ""), template_id,
        )
