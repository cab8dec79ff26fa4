"""
DataForSEO backlinks client.

Fetches live backlinks for a target and hands the provider's JSON back untouched.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from errors import BacklinksError

logger = logging.getLogger(__name__)


class BacklinksClient:
    def __init__(
        self,
        login: str,
        password: str,
        api_url: str = "https://api.dataforseo.com/v3/backlinks/backlinks/live",
        limit: int = 100,
        timeout: int = 60,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url
        self.limit = limit
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (login, password)

    def build_task(self, target: str) -> Dict[str, Any]:
        return {
            "target": target,
            "limit": self.limit,
            "internal_list_limit": 10,
            "backlinks_status_type": "live",
            "include_subdomains": True,
            "exclude_internal_backlinks": True,
            "include_indirect_links": True,
            "mode": "one_per_domain",
        }

    def fetch(self, target: str) -> Dict[str, Any]:
        """
        Request live backlinks for target.

        Raises:
            BacklinksError: network failure, non-2xx status or non-JSON body
        """
        logger.info(f"🔗 Fetching backlinks for {target}")
        try:
            response = self.session.post(
                self.api_url, json=[self.build_task(target)], timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise BacklinksError(f"Backlinks request failed: {str(e)}") from e
        except ValueError as e:
            raise BacklinksError("Backlinks provider returned invalid JSON") from e

    async def fetch_async(self, target: str) -> Dict[str, Any]:
        return await asyncio.to_thread(self.fetch, target)
