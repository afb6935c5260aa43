"""
Copyright (c) 2020, the Zelnet developers
See LICENSE for details

testnet holds the test network parameters. The peer-to-peer parameters at the
bottom are the testnet-mode bundle; the regtest module holds the values used
while regtest is enabled.
"""

Name = "testnet"
Alias = "regtest"

# Address encoding magics
PubKeyHashAddrID = 0x1D25  # starts with tm
ScriptHashAddrID = 0x1CBA  # starts with t2
PrivateKeyID = 0xEF

# BIP32 hierarchical deterministic extended key magics
HDPublicKeyID = 0x043587CF  # starts with tpub
HDPrivateKeyID = 0x04358394  # starts with tprv

# Shielded payment address and spending key prefixes
ZAddrID = 0x16B6  # starts with zt
ZKeyID = 0xAC08  # starts with ST

# Peer-to-peer parameters
NetworkMagic = 0xFA1AF9BF
DefaultPort = 18233
DNSSeeds = ["dnsseedtestnet.zelcash.online"]
