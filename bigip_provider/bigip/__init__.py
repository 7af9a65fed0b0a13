from .connector import BigIPConnector
from .session import AuthenticatedSession, BigIPSession, SessionBackend
from .types import (
    BigIPAuthError,
    BigIPConfigError,
    BigIPException,
    BigIPNode,
    ConfigOptions,
    SelfIP,
)
