import logging
import os
import sys
from collections import UserDict
from pathlib import Path

import hiyapyco

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "INGEST_CONFIG_PATH"
"""Environment variable naming one more config file, merged over the discovered ones"""


class IngestConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")


class HierarchicalConfig(UserDict):
    """
    HierarchicalConfig is a UserDict that loads configuration from a tiered set of config files.

    ``Ingest.common.yaml`` is looked up next to the entrypoint that imports this module, then in each parent directory
    up to ``limit`` levels (stopping at the project root). Files nearer the entrypoint win. The discovered files are
    merged with HiYaPyCo, so Jinja2 syntax is available in values.

    A file named by the ``INGEST_CONFIG_PATH`` environment variable is merged last.

    Example usage:
        from infra_ingest.lib.config import ingest_env

        ingest_env.get("myconfig", "somedefault")
        ingest_env.require("myotherconfig")

    """

    def __init__(self, limit=5, filename="Ingest.common.yaml"):
        """
        Create a HierarchicalConfig UserDict

        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        """
        super().__init__()
        self.filename = filename

        configs = list(reversed(self._discover_configs(limit)))
        if override := os.getenv(CONFIG_PATH_ENV):
            configs.append(Path(override))
        logger.debug("Found configs in %s", configs)

        if configs:
            self.data = dict(hiyapyco.load([str(path) for path in configs], method=hiyapyco.METHOD_MERGE))
        else:
            logger.warning("No %s found, continuing with empty configuration", self.filename)

    def require(self, key: str) -> any:
        """
        Require a key from the configuration and return it. If not found, throw an `IngestConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if v := self.get(key):
            return v
        else:
            raise IngestConfigException(key)

    def _discover_configs(self, limit) -> list[Path]:
        """
        Find the path of the __main__ module that imported this module, and walk upwards to find other files

        :param limit: Max parent directories to walk
        :return:
        """
        config_paths = []

        main_module = sys.modules["__main__"]
        if not hasattr(main_module, "__file__"):
            logger.debug("__main__ has no __file__, skipping config discovery")
            return config_paths

        entrypoint = Path(main_module.__file__).absolute()
        logger.debug("Entrypoint: %s", entrypoint)

        for path in list(entrypoint.parents)[:limit]:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.exists():
                logger.debug("Detected config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # a config may live at the project root, but not above it
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths


# loaded once on import so every module shares the merged result
ingest_env = HierarchicalConfig()
