import logging
from typing import List, Protocol, runtime_checkable

from bigip_provider.base.http import HTTP, HttpClient, HttpError

from .templats import GET_SELF_IPS, LOGIN, TOKEN
from .types import BigIPAuthError, BigIPNode, SelfIP, SelfIPList

logger = logging.getLogger(__name__)


@runtime_checkable
class AuthenticatedSession(Protocol):
    """Handle returned by a session backend."""

    async def self_ips(self) -> List[SelfIP]:
        ...

    async def close(self) -> None:
        ...


class SessionBackend(Protocol):
    """Builds authenticated sessions for a connection configuration."""

    def new_session(self, config: BigIPNode) -> AuthenticatedSession:
        ...

    async def new_token_session(self, config: BigIPNode) -> AuthenticatedSession:
        ...


class BigIPSession:
    """iControl REST session against a single BIG-IP device.

    Use `new_session` for basic auth and `new_token_session` for token login
    through a login provider. The caller owns the session and closes it.
    """

    def __init__(self, config: BigIPNode, basic_auth: bool = True):
        self.config = config
        self.auth_token: str|None = None
        self.base_url = config.base_url
        options = config.config_options
        self.http = HttpClient(HTTP(
            url=self.base_url,
            api_user=config.username if basic_auth else None,
            api_passwd=config.password if basic_auth else None,
            verify_ssl=options.verify_ssl,
            proxy=options.proxy,
            timeout=options.api_timeout,
        ))

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    @classmethod
    def new_session(cls, config: BigIPNode) -> "BigIPSession":
        # credentials are only checked by the device on the first request
        return cls(config)

    @classmethod
    async def new_token_session(cls, config: BigIPNode) -> "BigIPSession":
        session = cls(config, basic_auth=False)
        try:
            await session._login()
        except BaseException:
            await session.close()
            raise
        return session

    async def _login(self):
        """Login through the configured provider and keep the auth token"""
        payload = {
            "username": self.config.username,
            "password": self.config.password,
            "loginProviderName": self.config.login_reference,
        }
        try:
            data = await self.http.json_post(LOGIN, payload)
        except HttpError as e:
            raise BigIPAuthError(f"Login failed with status {e.status}") from e

        token = data.get("token", {}).get("token")
        if not token:
            raise BigIPAuthError("Failed to obtain authentication token")
        self.auth_token = token
        self.http.headers["X-F5-Auth-Token"] = token
        logger.debug("obtained token for %s at %s", self.config.username, self.base_url)

        timeout = self.config.config_options.token_timeout
        if timeout is not None:
            await self.http.json_patch(TOKEN.format(token=token), {"timeout": timeout})

    async def self_ips(self) -> List[SelfIP]:
        data = await self.http.json_get(GET_SELF_IPS)
        return SelfIPList(**data).items

    async def close(self) -> None:
        await self.http.close()
