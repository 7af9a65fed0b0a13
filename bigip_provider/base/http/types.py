from pydantic import BaseModel, ConfigDict


class HTTP(BaseModel):
    model_config = ConfigDict(strict=True)
    url: str
    api_user: str|None = None
    api_passwd: str|None = None
    verify_ssl: bool = True
    proxy: str|None = None
    timeout: int = 60
