import logging
from typing import List

from bigip_provider.base.provider import Provider

from .session import AuthenticatedSession, BigIPSession, SessionBackend
from .types import BigIPConfigError, BigIPNode, SelfIP


class BigIPConnector(Provider):
    """Builds a validated client for one provider configuration."""

    def __init__(self, config: BigIPNode,
                 backend: SessionBackend = BigIPSession,
                 logger: logging.Logger|None = None):
        super().__init__(__name__, logger)
        self.config = config
        self.backend = backend
        self.self_ips: List[SelfIP] = []

    async def client(self) -> AuthenticatedSession:
        config = self.config
        if config.address == "" or config.username == "" or config.password == "":
            raise BigIPConfigError("BigIP provider requires address, username and password")

        self.logger.info("Initializing BigIP connection")
        if config.login_reference:
            try:
                session = await self.backend.new_token_session(config)
            except Exception as e:
                self.logger.error("Error creating New Token Session %s", e)
                raise
        else:
            session = self.backend.new_session(config)

        try:
            self.self_ips = await self._validate_connection(session)
        except BaseException:
            await session.close()
            raise
        return session

    async def _validate_connection(self, session: AuthenticatedSession) -> List[SelfIP]:
        try:
            self_ips = await session.self_ips()
        except Exception as e:
            self.logger.error("Connection to BigIP device could not have been validated: %s", e)
            raise

        if not self_ips:
            self.logger.warning("Could not validate connection to BigIP")
        return self_ips
