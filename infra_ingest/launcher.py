import logging
import os

# Configuration is loaded when `infra_ingest.lib.config` is first imported, so the log level has to be set first.
if os.getenv("INGEST_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    logging.debug("ingest logging enabled")

from pulumi import get_stack, log, export  # noqa: E402

from infra_ingest.lib.config import get_provider_override  # noqa: E402
from infra_ingest.lib.utils import serialize_exports  # noqa: E402
from infra_ingest.module_manager import module_manager  # noqa: E402


def run_stack(provider: str, stack_name: str) -> None:
    """Invoke a module with its stack configuration

    :param provider: A provider
    :param stack_name: The stack name
    :return: None
    """
    provider = get_provider_override() or provider

    module = module_manager.get_module(provider, stack_name)

    log.debug(f"running module `{stack_name}`")

    exports = module.run(stack_name)

    export(stack_name, serialize_exports(exports))


def run_active_stack(provider: str) -> None:
    """Invoke the module named after the active stack

    :param provider: A provider
    :return: None
    """
    stack = get_stack()

    log.debug(f"active stack is `{stack}`")

    run_stack(provider, stack)
