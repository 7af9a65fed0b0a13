from .provider import Provider, ProviderException
