from typing import List

from pydantic import ValidationError

from bigip_provider.base.main import Main
from bigip_provider.base.provider import Provider, ProviderException
from bigip_provider.bigip import BigIPConnector, BigIPSession, SelfIP, SessionBackend

from .types import ProviderConfig


class BigIPProvider(Main, Provider):
    """Configures the provider: loads the connection settings and checks the device."""

    def __init__(self, backend: SessionBackend = BigIPSession):
        Main.__init__(self)
        Provider.__init__(self, __name__)
        self.backend = backend

    def load_config(self) -> ProviderConfig:
        try:
            return ProviderConfig(**self.read_config())
        except ValidationError as e:
            error = self.pydantic_error(e)
            self.logger.error("Configuration Error: %s", error)
            raise ProviderException(error) from e

    async def configure(self, config: ProviderConfig) -> List[SelfIP]:
        connector = BigIPConnector(config.bigip, backend=self.backend, logger=self.logger)
        session = await connector.client()
        await session.close()
        self_ips = connector.self_ips

        for self_ip in self_ips:
            self.logger.info("self ip %s %s vlan=%s", self_ip.full_path or self_ip.name, self_ip.address, self_ip.vlan)
        return self_ips

    async def handler(self):
        await self.configure(self.load_config())
