from abc import ABC, abstractmethod
from typing import Type, get_type_hints

from pulumi import ComponentResource, ResourceOptions, log

from infra_ingest.lib.base.types import ConfigType, ExportsType
from infra_ingest.lib.utils import outputs_from_exports


class BaseModule(ComponentResource, ABC):
    """
    The base class for an ingest module.

    A module is a ``ComponentResource`` parenting every resource it declares. Subclasses implement ``build``, and the
    type hint of its ``config`` parameter tells the loader which dataclass to map the stack configuration into.
    """

    @property
    @abstractmethod
    def provider(self):
        """Name of the provider"""

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(
            f"pkg:ingest:{self.provider}:{self.__class__.__name__.lower()}",
            name,
            None,
            opts,
        )

        self._config = config

    @classmethod
    def get_config_type(cls) -> Type[ConfigType]:
        try:
            return get_type_hints(cls.build)["config"]
        except KeyError:
            raise TypeError(f"module `{cls.__name__}.build` does not have a type hint for the `config` param")

    def run(self) -> ExportsType:
        """Execute the module

        :return: An exports object
        """
        log.debug(f"building module `{self.__class__.__name__}`", resource=self)

        exports = self.build(self._config)

        self.register_outputs(outputs_from_exports(exports))

        return exports

    @abstractmethod
    def build(self, config: ConfigType) -> ExportsType:
        """Create cloud resources

        :return: An exports object
        """
