"""
Copyright (c) 2020, the Zelnet developers
See LICENSE for details
"""

from . import livenet, regtest, testnet


def netSpec(netParams):
    """
    Build the specification mapping accepted by Registry.add from a parameter
    module.

    Args:
        netParams (module): A network parameter module, e.g. nets.livenet.

    Returns:
        dict: The network specification.
    """
    return dict(
        name=netParams.Name,
        alias=netParams.Alias,
        pubkeyhash=netParams.PubKeyHashAddrID,
        privatekey=netParams.PrivateKeyID,
        scripthash=netParams.ScriptHashAddrID,
        xpubkey=netParams.HDPublicKeyID,
        xprivkey=netParams.HDPrivateKeyID,
        zaddr=netParams.ZAddrID,
        zkey=netParams.ZKeyID,
        networkMagic=netParams.NetworkMagic,
        port=netParams.DefaultPort,
        dnsSeeds=netParams.DNSSeeds,
    )


def addressSpec(netParams):
    """
    Like netSpec, but without the peer-to-peer parameters. Used for the
    testnet descriptor, whose peer-to-peer parameters depend on its mode.
    """
    spec = netSpec(netParams)
    for k in ("networkMagic", "port", "dnsSeeds"):
        del spec[k]
    return spec
