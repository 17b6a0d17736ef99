"""Dictionary lookup using the Jisho word search API."""
import logging
from typing import Optional

import httpx

from config import Config
from errors import LookupServiceError
from models import LookupResult


logger = logging.getLogger(__name__)

SEARCH_PATH = "/api/v1/search/words"


class JishoClient:
    """Async client for jisho.org word searches."""

    def __init__(self, config: Config, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.base_url = config.jisho_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=config.request_timeout)

    async def search(self, term: str) -> Optional[LookupResult]:
        """
        Look up a word or phrase.

        Args:
            term: Japanese or English query

        Returns:
            Result built from the best match, or None if nothing matched

        Raises:
            LookupServiceError: On network errors, HTTP errors, or a reply that is
                not JSON or does not have the search result shape
        """
        try:
            response = await self.client.get(
                f"{self.base_url}{SEARCH_PATH}",
                params={"keyword": term},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise LookupServiceError(
                f"Dictionary service returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise LookupServiceError(f"Could not reach dictionary service: {e}") from e
        except ValueError as e:
            raise LookupServiceError("Dictionary service sent an invalid reply") from e

        if not isinstance(data, dict):
            raise LookupServiceError("Dictionary service sent an invalid reply")

        entries = data.get("data")
        if not entries:
            logger.info(f"No dictionary entries for query of {len(term)} chars")
            return None
        if not isinstance(entries, list) or not isinstance(entries[0], dict):
            raise LookupServiceError("Dictionary service sent an invalid reply")

        try:
            return LookupResult.from_jisho(term, entries[0])
        except (AttributeError, TypeError, KeyError) as e:
            raise LookupServiceError("Dictionary service sent an invalid reply") from e

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
