"""
Copyright (c) 2020, the Zelnet developers
See LICENSE for details
"""


class ZelnetError(Exception):
    pass
