import logging

from pydantic import ValidationError


class ProviderException(Exception):
    pass

class Provider:
    def __init__(self, name: str, logger: logging.Logger|None = None):
        self.logger = logger if logger is not None else logging.getLogger(name)

    def pydantic_error(self, e: ValidationError) -> dict:
        reasons = []
        for error in e.errors():
            reasons.append({
                'loc': error['loc'],
                'msg': error['msg'],
                'type': error['type']
            })
        return {'reasons': reasons, 'input': e.errors()[0]['input']}
