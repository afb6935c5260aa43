"""
Copyright (c) 2020, the Zelnet developers
See LICENSE for details

livenet holds the main network parameters.
"""

Name = "livenet"
Alias = "mainnet"

# Address encoding magics
PubKeyHashAddrID = 0x1CB8  # starts with t1
ScriptHashAddrID = 0x1CBD  # starts with t3
PrivateKeyID = 0x80

# BIP32 hierarchical deterministic extended key magics
HDPublicKeyID = 0x0488B21E  # starts with xpub
HDPrivateKeyID = 0x0488ADE4  # starts with xprv

# Shielded payment address and spending key prefixes
ZAddrID = 0x169A  # starts with zc
ZKeyID = 0xAB36  # starts with SK

# Peer-to-peer parameters
NetworkMagic = 0x24E92764
DefaultPort = 8233
DNSSeeds = ["bzcseed.raptorpool.org"]
