from pydantic import BaseModel

from bigip_provider.bigip import BigIPNode


class ProviderConfig(BaseModel):
    config_dir: str
    bigip: BigIPNode
