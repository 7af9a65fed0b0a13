import json
import os

import aiohttp

from .types import HTTP

JSON_HEADERS = {
    "Content-Type": "application/json"
}


class HttpError(Exception):
    def __init__(self, method: str, url: str, status: int, body: str = ""):
        super().__init__(f"{method} {url} failed with status {status}: {body}")
        self.method = method
        self.url = url
        self.status = status
        self.body = body


class HttpClient:
    """JSON client bound to one base url.

    The underlying aiohttp session is created on first use so that the client
    can be constructed outside of a running event loop.
    """

    def __init__(self, config: HTTP):
        self.config = config
        self.base_url = config.url.rstrip('/')
        self.headers = dict(JSON_HEADERS)
        self.auth = None
        if config.api_user is not None and config.api_passwd is not None:
            self.auth = aiohttp.BasicAuth(config.api_user, config.api_passwd)
        self.request_args = {}
        if config.verify_ssl is False:
            self.request_args["ssl"] = False
        if config.proxy is not None:
            self.request_args["proxy"] = config.proxy
        self.session: aiohttp.ClientSession|None = None

    def _client(self) -> aiohttp.ClientSession:
        if self.session is None:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout)
            )
        return self.session

    async def close(self):
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def request(self, method: str, endpoint: str, data: dict|None = None) -> dict:
        url = f"{self.base_url}{endpoint}"
        async with self._client().request(method, url,
                                          json=data,
                                          headers=self.headers,
                                          auth=self.auth,
                                          **self.request_args) as response:
            if response.status < 200 or response.status >= 300:
                raise HttpError(method, url, response.status, await response.text())
            if response.content_length == 0:
                return {}
            payload = await response.json(content_type=None)

            if os.getenv('BIGIP_API_DEBUG') is not None:
                print(f"# --- {method} {endpoint} ---------------------------------")
                print(json.dumps(payload, indent=4))

            return payload if payload is not None else {}

    async def json_get(self, endpoint: str) -> dict:
        return await self.request("GET", endpoint)

    async def json_post(self, endpoint: str, data: dict) -> dict:
        return await self.request("POST", endpoint, data)

    async def json_patch(self, endpoint: str, data: dict) -> dict:
        return await self.request("PATCH", endpoint, data)
