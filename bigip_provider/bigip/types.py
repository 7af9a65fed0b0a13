from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bigip_provider.validators import get_device_uri


class BigIPException(Exception):
    pass


class BigIPConfigError(BigIPException):
    pass


class BigIPAuthError(BigIPException):
    pass


class ConfigOptions(BaseModel):
    model_config = ConfigDict(frozen=True)
    api_timeout: int = 60
    token_timeout: int|None = 1200
    verify_ssl: bool = True
    proxy: str|None = None


class BigIPNode(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    address: str = ""
    port: str = ""
    username: str = ""
    password: str = Field(default="", repr=False)
    login_reference: str|None = Field(default=None, alias="loginProviderName")
    config_options: ConfigOptions = ConfigOptions()

    @field_validator("port", mode="before")
    @classmethod
    def _port_to_str(cls, value):
        # yaml reads a bare port as int
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def base_url(self) -> str:
        uri = get_device_uri(self.address)
        if uri is None:
            url = f"https://{self.address.rstrip('/')}"
            port = self.port
        else:
            url = f"{uri.scheme}://{uri.host}"
            port = uri.port or self.port
        if port != "":
            url = f"{url}:{port}"
        return url


class SelfIP(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    name: str
    partition: str = "Common"
    full_path: str = Field(default="", alias="fullPath")
    address: str = ""
    vlan: str = ""
    traffic_group: str = Field(default="", alias="trafficGroup")


class SelfIPList(BaseModel):
    items: List[SelfIP] = []
