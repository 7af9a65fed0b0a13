from .configure import BigIPProvider
from .types import ProviderConfig
