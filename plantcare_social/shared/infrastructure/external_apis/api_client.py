# 📄 File: plantcare_social/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# A careful HTTP helper for talking to outside services (the AI assistant, the email
# sender). It waits only so long for an answer and turns any trouble into a polite error.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP client on aiohttp with a bounded ClientTimeout, default auth
# headers, response status mapping and request stats. No retries: every failure is
# surfaced once as UpstreamServiceError or APITimeoutError.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client

# 🔄 Connected Modules / Calls From:
# Used by: GroqClient (AI chat and recommendations), SendGridClient (mailer)

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout

from ...core.exceptions import APITimeoutError, UpstreamServiceError

logger = logging.getLogger(__name__)


class APIClient:
    """
    Generic async HTTP client for external API integrations.

    Features:
    - Bounded wait per request
    - Bearer authentication
    - Status code mapping to application errors
    - Request logging and basic stats
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        api_name: str,
        timeout: int = 30,
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.api_name = api_name
        self.timeout = timeout
        self.session: Optional[ClientSession] = None

        self.stats = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'last_request_time': None,
        }

    async def initialize(self):
        """Initialize the client session."""
        if self.session is not None and not self.session.closed:
            return
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers=self._get_default_headers(),
        )
        logger.info(f"API client initialized for {self.api_name}")

    async def close(self):
        """Close the underlying HTTP session."""
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        headers = {
            'User-Agent': f'PlantCareSocial/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        }
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers

    def _build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Make a single HTTP request and return the decoded JSON body."""
        if self.session is None or self.session.closed:
            await self.initialize()

        url = self._build_url(endpoint)
        start_time = time.time()
        self.stats['total_requests'] += 1
        self.stats['last_request_time'] = datetime.now(timezone.utc).isoformat()

        try:
            async with self.session.request(method, url, json=data, headers=headers) as response:
                await self._handle_response_status(response)
                if response.content_type == 'application/json':
                    response_data = await response.json()
                else:
                    response_data = {'raw_response': await response.text()}
        except asyncio.TimeoutError:
            self.stats['failed_requests'] += 1
            logger.error(f"{self.api_name} API request timed out: {method} {url}")
            raise APITimeoutError(self.api_name, self.timeout)
        except aiohttp.ClientError as e:
            self.stats['failed_requests'] += 1
            logger.error(f"{self.api_name} API request failed: {method} {url} - {e}")
            raise UpstreamServiceError(service=self.api_name)
        except UpstreamServiceError:
            self.stats['failed_requests'] += 1
            raise

        self.stats['successful_requests'] += 1
        logger.info(
            f"{self.api_name} API request successful: "
            f"{method} {url} - {time.time() - start_time:.2f}s"
        )
        return response_data

    async def _handle_response_status(self, response: aiohttp.ClientResponse):
        """Handle HTTP response status codes."""
        if 200 <= response.status < 300:
            return
        response_text = await response.text()
        logger.error(
            f"{self.api_name} API returned {response.status}: {response_text[:500]}"
        )
        raise UpstreamServiceError(service=self.api_name, upstream_status=response.status)

    async def get(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return await self._make_request('GET', endpoint, headers=headers)

    async def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        return await self._make_request('POST', endpoint, data=data, headers=headers)
