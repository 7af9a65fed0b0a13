from .client import HttpClient, HttpError
from .types import HTTP
