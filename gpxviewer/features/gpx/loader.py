"""
GPX Loader

Fetch-then-parse entry points. A load either yields a complete
document or fails once: there are no retries and no partial parses.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from gpxviewer.config import Settings, settings as default_settings
from .document import GpxDocument
from .errors import GpxFetchError
from .render import RenderModel, RenderSurface, TrackRenderAdapter

logger = logging.getLogger(__name__)


class GpxLoader:
    """
    Loads GPX documents from URLs, bytes or files.

    Usage:
        loader = GpxLoader()
        document = await loader.load_url("https://example.com/ride.gpx")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings or default_settings
        self.transport = transport

    async def fetch(self, url: str) -> bytes:
        """
        Download the raw document.

        Raises:
            GpxFetchError: On any transport error or non-2xx status
        """
        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.settings.fetch_timeout_seconds,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as e:
            logger.error(f"GPX fetch failed for {url}: HTTP {e.response.status_code}")
            raise GpxFetchError(
                f"Failed to fetch {url}: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"GPX fetch failed for {url}: {e}")
            raise GpxFetchError(f"Failed to fetch {url}: {e}") from e

    async def load_url(self, url: str) -> GpxDocument:
        content = await self.fetch(url)
        return self.load_bytes(content)

    def load_bytes(self, content: Union[bytes, str]) -> GpxDocument:
        """Parse an in-memory document (raises MalformedDocumentError)."""
        return GpxDocument.parse(content, settings=self.settings)

    def load_file(self, path: Union[str, Path]) -> GpxDocument:
        return self.load_bytes(Path(path).read_bytes())

    async def render_url(
        self,
        url: str,
        surface: Optional[RenderSurface] = None
    ) -> RenderModel:
        """Fetch, parse and render a document in one step."""
        document = await self.load_url(url)
        return TrackRenderAdapter(settings=self.settings).render(document, surface)
