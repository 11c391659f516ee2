import logging
from typing import Any, Dict, Optional

import httpx

from src.commonUtils.exceptions import MailchimpError

logger = logging.getLogger(__name__)


class MailchimpClient:
    """Minimal async client for the Mailchimp Marketing API (v3)."""

    def __init__(self, http_client: httpx.AsyncClient, api_key: str, server_prefix: str):
        self.http_client = http_client
        self.api_key = api_key
        self.base_url = f"https://{server_prefix}.api.mailchimp.com/3.0"

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            # Mailchimp accepts any username with the API key as the password
            response = await self.http_client.request(
                method, url, json=json, auth=("anystring", self.api_key)
            )
        except httpx.HTTPError as e:
            logger.error(f"Mailchimp request {method} {path} failed: {e}")
            raise MailchimpError(str(e) or e.__class__.__name__) from e

        if response.is_success:
            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                logger.error(f"Mailchimp returned a non-JSON body for {method} {path}")
                raise MailchimpError(
                    f"Mailchimp returned an invalid response body: {e}", status=response.status_code
                ) from e

        raise self._error_from_response(response)

    @staticmethod
    def _error_from_response(response: httpx.Response) -> MailchimpError:
        """Build a MailchimpError from an API problem-detail response."""
        title = None
        detail = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            title = body.get("title")
            detail = body.get("detail")

        message = detail or title or f"Mailchimp API responded with status {response.status_code}"
        return MailchimpError(message, status=response.status_code, title=title)

    async def ping(self) -> Dict[str, Any]:
        return await self._request("GET", "/ping")

    async def get_list_member(self, list_id: str, member_hash: str) -> Dict[str, Any]:
        return await self._request("GET", f"/lists/{list_id}/members/{member_hash}")

    async def add_list_member(self, list_id: str, member: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", f"/lists/{list_id}/members", json=member)

    async def update_list_member(self, list_id: str, member_hash: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/lists/{list_id}/members/{member_hash}", json=changes)
