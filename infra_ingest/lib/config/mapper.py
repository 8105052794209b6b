import json
from enum import Enum
from typing import Type, Any

from dacite import from_dict, Config
from pulumi import log, runtime

from infra_ingest.lib.base import ConfigType


def _parse_args_value(value: Any) -> Any:
    """Parse and return json values if valid json, else return original value

    :param value: A potential json string
    :return: Parsed json object or raw arg
    """
    try:
        return json.loads(value)
    except (json.decoder.JSONDecodeError, TypeError):
        return value


def get_raw_stack_config(stack: str) -> dict:
    """Pull stack config from Pulumi internals, clean it and return in dict form

    Keys look like ``data-ingestion:warehouse`` in the Pulumi config, and come back without the stack prefix.

    This method may break when upgrading the ``pulumi`` python dependency.

    :param stack: Name of the stack
    :return: dict
    """
    stack_prefix = stack + ":"

    config = {
        k.removeprefix(stack_prefix): _parse_args_value(v)
        for k, v in runtime.config.CONFIG.items()
        if k.startswith(stack_prefix)
    }

    log.debug(f"config keys for stack `{stack}` are {sorted(config)}")

    return config


def config_from_dict(data: dict, config_cls: Type[ConfigType]) -> ConfigType:
    """Map a raw config dict to a module's config dataclass

    Uses `dacite <https://github.com/konradhalas/dacite>`_. Enum fields are cast from their values, and unknown keys
    are an error rather than being silently dropped.

    :param data: Raw config
    :param config_cls: The dataclass for the config
    :return: The config expressed in the module's config dataclass
    """
    return from_dict(
        data_class=config_cls,
        data=data,
        config=Config(
            cast=[Enum],
            strict=True,
        ),
    )


def get_stack_config(stack: str, config_cls: Type[ConfigType]) -> ConfigType:
    """Get a stack config in dataclass form

    :param stack: Name of the stack
    :param config_cls: The dataclass for the config
    :return: The stack config expressed in the module's config dataclass
    """
    config = config_from_dict(get_raw_stack_config(stack), config_cls)

    # config may carry the warehouse admin password, so only the type is logged
    log.debug(f"mapped config for stack `{stack}` to `{config_cls.__name__}`")

    return config
