"""
Copyright (c) 2020, the Zelnet developers
See LICENSE for details

A registry of network parameters. A network is an immutable set of version
prefixes and magic numbers for one of the livenet (a.k.a. mainnet) and testnet
networks. Networks can be looked up by any raw value they hold.

The testnet network can be switched to regtest mode at runtime, which changes
its port, network magic and DNS seeds without creating a new object.
"""

from zelnet import ZelnetError
from zelnet.util import helpers
from zelnet.util.encode import ByteArray

from . import nets


log = helpers.getLogger("NETWORKS")

# Fields set for every network.
ADDRESS_FIELDS = (
    "name",
    "alias",
    "pubkeyhash",
    "privatekey",
    "scripthash",
    "xpubkey",
    "xprivkey",
    "zaddr",
    "zkey",
)

# Optional peer-to-peer fields. These are the fields that depend on the mode
# of a SwitchedNetwork.
PEER_FIELDS = ("networkMagic", "port", "dnsSeeds")

FIELDS = ADDRESS_FIELDS + PEER_FIELDS

TESTNET_MODE = "testnet"
REGTEST_MODE = "regtest"

MAGIC_LENGTH = 4


def encodeMagic(magic):
    """
    Encode the network magic as a 4-byte big-endian ByteArray.

    Args:
        magic (int or bytes-like or ByteArray): The network magic.

    Returns:
        ByteArray: The encoded magic. Integers are truncated to their low 4
            bytes. Values that cannot be encoded are returned as is.
    """
    if isinstance(magic, ByteArray) and len(magic) == MAGIC_LENGTH:
        return magic
    if isinstance(magic, int) and not isinstance(magic, bool):
        return ByteArray(magic & 0xFFFFFFFF, length=MAGIC_LENGTH)
    try:
        return ByteArray(magic, length=MAGIC_LENGTH)
    except (ZelnetError, TypeError, ValueError):
        # Not encodable. Keep the raw value.
        return magic


def indexKey(v):
    """
    The reverse index key for a field value, or None if the value is not
    indexed. Network magics are indexed by their raw integer value. Sequences
    and booleans are never indexed.
    """
    if isinstance(v, ByteArray):
        return v.int()
    if isinstance(v, bool) or not isinstance(v, (str, int, float)):
        return None
    return v


class Frozen:
    """
    Frozen attributes are assigned once in the constructor with _freeze and
    cannot be reassigned or deleted afterwards.
    """

    def _freeze(self, k, v):
        object.__setattr__(self, k, v)

    def __setattr__(self, k, v):
        raise ZelnetError(f"cannot set {k}: {type(self).__name__} is immutable")

    def __delattr__(self, k):
        raise ZelnetError(f"cannot delete {k}: {type(self).__name__} is immutable")


class Network(Frozen):
    """
    Network is the set of parameters for a single network. Fields that were
    not provided to the constructor read as None.
    """

    def __init__(self, data):
        """
        Args:
            data (dict): The network specification. Keys are the field names
                name, alias, pubkeyhash, privatekey, scripthash, xpubkey,
                xprivkey, zaddr, zkey and, optionally, networkMagic (int),
                port (int) and dnsSeeds (list(str)).
        """
        for k in ADDRESS_FIELDS:
            self._freeze(k, data.get(k))
        if data.get("networkMagic"):
            self._freeze("networkMagic", encodeMagic(data["networkMagic"]))
        if data.get("port"):
            self._freeze("port", data["port"])
        if data.get("dnsSeeds"):
            self._freeze("dnsSeeds", tuple(data["dnsSeeds"]))

    def __getattr__(self, k):
        # Only reached for fields that were never set.
        if k in FIELDS:
            return None
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {k!r}")

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"{type(self).__name__}({self.name})"

    def fields(self):
        """
        The fields that hold a value, in declaration order.

        Returns:
            list(tuple(str, object)): (field name, value) pairs.
        """
        return [(k, getattr(self, k)) for k in FIELDS if getattr(self, k) is not None]


class ModeParams(Frozen):
    """
    ModeParams is the bundle of peer-to-peer parameters a SwitchedNetwork uses
    in one of its modes.
    """

    def __init__(self, port, networkMagic, dnsSeeds):
        """
        Args:
            port (int): The default peer port.
            networkMagic (int or ByteArray): The network magic.
            dnsSeeds (list(str)): The DNS seed hosts.
        """
        self._freeze("port", port)
        self._freeze("networkMagic", encodeMagic(networkMagic))
        self._freeze("dnsSeeds", tuple(dnsSeeds))

    @staticmethod
    def fromNet(netParams):
        """
        Build the bundle from a network parameter module.

        Args:
            netParams (module): e.g. nets.testnet.

        Returns:
            ModeParams: The bundle.
        """
        return ModeParams(
            netParams.DefaultPort, netParams.NetworkMagic, netParams.DNSSeeds
        )


class SwitchedNetwork(Network):
    """
    SwitchedNetwork is a Network whose peer-to-peer parameters are resolved
    from one of two ModeParams bundles, depending on its mode. The mode is the
    only part of a SwitchedNetwork that can change after construction.
    """

    def __init__(self, data, modes, mode=TESTNET_MODE):
        """
        Args:
            data (dict): The network specification. Any peer-to-peer fields
                are ignored in favor of the bundles.
            modes (dict): Maps TESTNET_MODE and REGTEST_MODE to ModeParams.
            mode (str): The initial mode.
        """
        super().__init__({k: v for k, v in data.items() if k not in PEER_FIELDS})
        self._freeze("modes", dict(modes))
        self.setMode(mode)

    def __setattr__(self, k, v):
        if k == "regtestEnabled":
            object.__setattr__(self, k, v)
            return
        super().__setattr__(k, v)

    def setMode(self, mode):
        """
        Switch the mode.

        Args:
            mode (str): TESTNET_MODE or REGTEST_MODE.
        """
        if mode not in self.modes:
            raise ZelnetError(f"unknown network mode {mode}")
        object.__setattr__(self, "mode", mode)

    def resolve(self, k):
        """
        The value of the peer-to-peer field k in the current mode.

        Args:
            k (str): One of networkMagic, port or dnsSeeds.
        """
        return getattr(self.modes[self.mode], k)

    @property
    def regtestEnabled(self):
        return self.mode == REGTEST_MODE

    @regtestEnabled.setter
    def regtestEnabled(self, enabled):
        self.setMode(REGTEST_MODE if enabled else TESTNET_MODE)

    @property
    def networkMagic(self):
        return self.resolve("networkMagic")

    @property
    def port(self):
        return self.resolve("port")

    @property
    def dnsSeeds(self):
        return self.resolve("dnsSeeds")


class Registry:
    """
    Registry is an ordered collection of networks with a reverse index from
    raw field values to networks.

    The reverse index is keyed by value alone, so two fields that share a
    value collide and the network added last wins. Lookups restricted to
    specific field names scan the networks in the order they were added
    instead, so the first match wins. The two can disagree.

    The Registry does no locking. Mutate it from a single thread, typically
    only at startup.
    """

    def __init__(self):
        self.networkList = []
        self.networkMaps = {}
        self.livenet = None
        self.testnet = None

    @staticmethod
    def withDefaults():
        """
        Create a registry with the built-in livenet and testnet networks.

        Returns:
            Registry: The new registry.
        """
        registry = Registry()
        registry.livenet = registry.add(nets.netSpec(nets.livenet))
        registry.testnet = registry.addSwitched(
            nets.addressSpec(nets.testnet),
            {
                TESTNET_MODE: ModeParams.fromNet(nets.testnet),
                REGTEST_MODE: ModeParams.fromNet(nets.regtest),
            },
        )
        return registry

    @property
    def mainnet(self):
        return self.livenet

    @property
    def defaultNetwork(self):
        return self.livenet

    def __len__(self):
        return len(self.networkList)

    def __iter__(self):
        return iter(list(self.networkList))

    def networks(self):
        """
        The registered networks, in the order they were added.

        Returns:
            list(Network): The networks.
        """
        return list(self.networkList)

    def index(self, value, network):
        key = indexKey(value)
        if key is not None:
            self.networkMaps[key] = network

    def register(self, network):
        """
        Append the network and index all of its field values.
        """
        for _, v in network.fields():
            self.index(v, network)
        self.networkList.append(network)
        log.debug(f"added network {network}")
        return network

    def add(self, data):
        """
        Add a custom network.

        Args:
            data (dict): The network specification. See Network.

        Returns:
            Network: The new network.
        """
        return self.register(Network(data))

    def addSwitched(self, data, modes):
        """
        Add a network with mode-dependent peer-to-peer parameters. The port and
        network magic of every mode are indexed, so the network can be found
        by them regardless of its current mode.

        Args:
            data (dict): The network specification. See SwitchedNetwork.
            modes (dict): Maps TESTNET_MODE and REGTEST_MODE to ModeParams.

        Returns:
            SwitchedNetwork: The new network.
        """
        network = self.register(SwitchedNetwork(data, modes))
        for params in network.modes.values():
            self.index(params.port, network)
            self.index(params.networkMagic, network)
        return network

    def remove(self, network):
        """
        Remove a network and every reverse index entry that points to it.
        Removing a network that is not registered does nothing.

        Args:
            network (Network): The network to remove.
        """
        for i, n in enumerate(self.networkList):
            if n is network:
                del self.networkList[i]
                break
        self.networkMaps = {
            k: n for k, n in self.networkMaps.items() if n is not network
        }
        log.debug(f"removed network {network}")

    def get(self, arg, keys=None):
        """
        Retrieve the network associated with a raw value.

        Args:
            arg (Network or str or int or ByteArray): A registered network,
                which is returned as is, or a value held by a network.
            keys (str or list(str)): optional. If provided, only these fields
                are checked, and the first network added with a matching value
                in any of them is returned.

        Returns:
            Network: The network, or None if there is no match.
        """
        if any(n is arg for n in self.networkList):
            return arg
        if isinstance(arg, bool):
            return None
        if keys is not None:
            if isinstance(keys, str):
                keys = [keys]
            for network in self.networkList:
                for k in keys:
                    v = getattr(network, k, None)
                    if v is not None and v == arg:
                        return network
            return None
        if isinstance(arg, ByteArray):
            arg = arg.int()
        try:
            return self.networkMaps.get(arg)
        except TypeError:
            # unhashable
            return None

    def parse(self, name):
        """
        Get the network by name or alias.

        Args:
            name (str): The network name or alias.

        Returns:
            Network: The network.
        """
        network = self.get(name, ("name", "alias"))
        if network is None:
            raise ZelnetError(f"unrecognized network name {name}")
        return network

    def setRegtest(self, enabled):
        if self.testnet is None:
            raise ZelnetError("no testnet network registered")
        self.testnet.regtestEnabled = enabled
        log.info(f"regtest {'enabled' if enabled else 'disabled'} for {self.testnet}")

    def enableRegtest(self):
        """
        Enable regtest mode for testnet.
        """
        self.setRegtest(True)

    def disableRegtest(self):
        """
        Disable regtest mode for testnet.
        """
        self.setRegtest(False)


registry = Registry.withDefaults()

add = registry.add
remove = registry.remove
get = registry.get
parse = registry.parse
enableRegtest = registry.enableRegtest
disableRegtest = registry.disableRegtest

livenet = registry.livenet
mainnet = registry.mainnet
testnet = registry.testnet
defaultNetwork = registry.defaultNetwork
