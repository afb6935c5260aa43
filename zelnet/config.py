"""
Copyright (c) 2020, the Zelnet developers
See LICENSE for details

Configuration settings for zelnet. The configuration file is JSON formatted.
"""

import argparse
import os

from appdirs import AppDirs

from zelnet import networks
from zelnet.util import helpers


# Set the data directory in a OS-appropriate location.
_ad = AppDirs("Zelnet", False)
DATA_DIR = _ad.user_data_dir

# The master configuration file name.
CONFIG_NAME = "zelnet.conf"
CONFIG_PATH = os.path.join(DATA_DIR, CONFIG_NAME)

log = helpers.getLogger("CONFIG")


class ZelConfig:
    """
    ZelConfig chooses the network parameters from the command line and the
    configuration file.
    """

    def __init__(self, netName=None, args=None, path=None, registry=None):
        """
        Args:
            netName (str): optional. A network name or alias. Takes precedence
                over the command line and the configuration file.
            args (list(str)): optional. The command-line arguments. Defaults to
                sys.argv.
            path (str): optional. The configuration file path. Defaults to
                CONFIG_PATH.
            registry (networks.Registry): optional. The registry to pick
                networks from. Defaults to the process-wide registry.
        """
        self.path = path if path else CONFIG_PATH
        self.file = helpers.fetchSettingsFile(self.path)
        self.registry = registry if registry is not None else networks.registry
        parser = argparse.ArgumentParser()
        netGroup = parser.add_mutually_exclusive_group()
        netGroup.add_argument("--testnet", action="store_true", help="use testnet")
        netGroup.add_argument(
            "--regtest", action="store_true", help="use testnet in regtest mode"
        )
        parsed, unknown = parser.parse_known_args(args)
        if unknown:
            log.warning(f"ignoring unknown arguments: {unknown!r}")

        regtest = parsed.regtest or bool(self.get("regtest"))
        if netName:
            self.netParams = self.registry.parse(netName)
        elif parsed.testnet or regtest:
            self.netParams = self.registry.testnet
        elif self.get("network"):
            self.netParams = self.registry.parse(self.get("network"))
        else:
            self.netParams = self.registry.defaultNetwork
        if regtest and self.netParams is self.registry.testnet:
            self.registry.enableRegtest()
        log.info(f"using network {self.netParams}")

    def set(self, k, v):
        """
        Set the configuration option. The configuration is not saved, so `save`
        should be called separately.

        Args:
            k (str): The setting key.
            v (JSON-encodable): The value.
        """
        self.file[k] = v

    def get(self, *keys):
        """
        Retrieve the setting at the provided key path. Multiple keys can be
        provided, with each successive key being retrieved from the previous
        key's value.

        Args:
            *keys (str): Recursive key list.

        Returns:
            mixed: The configuration value.
        """
        d = self.file
        rVal = None
        for k in keys:
            if not isinstance(d, dict) or k not in d:
                return None
            rVal = d[k]
            d = rVal
        return rVal

    def save(self):
        """
        Save the file.
        """
        helpers.saveJSON(self.path, self.file, indent=4, sort_keys=True)


zelConfig = None


def load(netName=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to the modular `load`
    function will return the same instance.

    Returns:
        ZelConfig: The current configuration.
    """
    global zelConfig
    if not zelConfig:
        zelConfig = ZelConfig(netName)
    return zelConfig
