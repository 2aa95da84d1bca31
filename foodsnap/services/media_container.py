"""
Graph API media container client

Three calls: create a container from an image URL, read its status_code,
publish it once FINISHED. Polling lives in the edit orchestrator.
"""
import asyncio
import logging
from typing import Optional, Protocol

import aiohttp

from foodsnap.config import settings
from foodsnap.exceptions import ConfigurationError, ProviderError

logger = logging.getLogger(__name__)


class ContainerProvider(Protocol):
    async def create_container(self, image_url: str, caption: str) -> str:
        ...

    async def get_status(self, container_id: str) -> Optional[str]:
        ...

    async def publish(self, container_id: str) -> str:
        ...


class GraphContainerClient:
    """Container publishing against the Graph API"""

    def __init__(
        self,
        user_id: Optional[str] = None,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.user_id = user_id or settings.GRAPH_USER_ID
        self.access_token = access_token or settings.GRAPH_ACCESS_TOKEN
        if not self.user_id or not self.access_token:
            raise ConfigurationError("Graph API user id and access token are required for publishing")
        self.base_url = (base_url or settings.GRAPH_API_BASE).rstrip("/")
        self.session = session

    async def _request(self, method: str, url: str, **kwargs) -> dict:
        try:
            if self.session is not None:
                return await self._send(self.session, method, url, **kwargs)

            async with aiohttp.ClientSession() as session:
                return await self._send(session, method, url, **kwargs)
        except asyncio.TimeoutError as e:
            logger.error(f"Graph API request timed out: {method} {url}")
            raise ProviderError("Graph API request timed out") from e
        except (aiohttp.ClientError, ValueError) as e:
            logger.error(f"Graph API transport error on {url}: {e}", exc_info=True)
            raise ProviderError(f"Graph API request failed: {e}") from e

    async def _send(self, session, method: str, url: str, **kwargs) -> dict:
        async with session.request(
            method, url, timeout=aiohttp.ClientTimeout(total=30), **kwargs
        ) as response:
            data = await response.json(content_type=None)

        error = data.get("error") if isinstance(data, dict) else None
        if error:
            message = error.get("message", "Unknown Graph API error") if isinstance(error, dict) else str(error)
            logger.error(f"Graph API error on {url}: {message}")
            raise ProviderError(message, status=response.status)
        return data

    async def create_container(self, image_url: str, caption: str) -> str:
        data = await self._request(
            "POST",
            f"{self.base_url}/{self.user_id}/media",
            data={"image_url": image_url, "caption": caption, "access_token": self.access_token},
        )
        container_id = data.get("id")
        if not container_id:
            raise ProviderError("Graph API returned no container id")
        logger.info(f"Created media container {container_id}")
        return str(container_id)

    async def get_status(self, container_id: str) -> Optional[str]:
        data = await self._request(
            "GET",
            f"{self.base_url}/{container_id}",
            params={"fields": "status_code", "access_token": self.access_token},
        )
        return data.get("status_code")

    async def publish(self, container_id: str) -> str:
        data = await self._request(
            "POST",
            f"{self.base_url}/{self.user_id}/media_publish",
            data={"creation_id": container_id, "access_token": self.access_token},
        )
        media_id = data.get("id")
        if not media_id:
            raise ProviderError("Graph API returned no media id")
        logger.info(f"Published container {container_id} as media {media_id}")
        return str(media_id)
