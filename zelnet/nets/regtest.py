"""
Copyright (c) 2020, the Zelnet developers
See LICENSE for details

regtest holds the peer-to-peer parameters of the testnet descriptor while
regtest mode is enabled. Address prefixes are shared with testnet.
"""

Name = "regtest"

NetworkMagic = 0xAAE83F5F
DefaultPort = 18444
DNSSeeds = []
