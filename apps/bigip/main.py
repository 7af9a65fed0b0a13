#!/usr/bin/env python3.12
from bigip_provider.provider import BigIPProvider


if __name__ == '__main__':
    BigIPProvider().run()
