"""
Copyright (c) 2020, the Zelnet developers
See LICENSE for details
"""

import pytest

from zelnet import networks


@pytest.fixture
def registry():
    """An isolated registry with the built-in networks."""
    return networks.Registry.withDefaults()


@pytest.fixture
def netSpec():
    def _netSpec(**kwargs):
        spec = dict(
            name="customnet",
            alias="customalias",
            pubkeyhash=0x10,
            privatekey=0x90,
            scripthash=0x11,
            xpubkey=0x0A0B0C0D,
            xprivkey=0x0A0B0C0E,
            zaddr=0x1200,
            zkey=0x1300,
            networkMagic=0xE7E6E5E4,
            port=20001,
            dnsSeeds=["seed.custom.example"],
        )
        spec.update(kwargs)
        return spec

    return _netSpec


@pytest.fixture
def regtestOff():
    """Make sure the process-wide testnet is back in testnet mode afterwards."""
    yield
    networks.disableRegtest()
