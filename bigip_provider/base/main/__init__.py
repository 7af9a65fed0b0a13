from .main import LOG_FORMAT, Main
