from typing import Optional

from pulumi import Config, get_stack, get_project

from infra_ingest.lib.utils import run_once
from .ingest_env import ingest_env

aws_config = Config("aws")
ingest_config = Config("ingest")

tag_namespace = ingest_env.get("tag_namespace", "ingest")
"""Resources created using the tagging library use this to prefix the standard tags.
   This differs from the Pulumi config namespace, as this is used for the actual resources, not the Pulumi config.
"""

tag_prefix = f"{tag_namespace}{ingest_env.get('tag_separator', ':')}"


def get_team() -> str:
    return ingest_env.require("team")


def get_provider_and_region():
    """
    Retrieve the provider and region for this program
    :return: (provider, region)
    """
    aws_region = aws_config.get("region")

    if aws_region:
        return "aws", aws_region
    else:
        raise Exception("Unknown provider! Set `aws:region` in the stack configuration")


def get_purpose():
    return ingest_env.require("purpose")


def get_phase():
    return ingest_env.require("phase")


@run_once
def get_sysenv():
    """
    Returns the SysEnv name for this program
    SysEnvs are named `{namespace}-{provider}-{region}-{purpose}-{phase}`.

    An example SysEnv name is `ingest-aws-us-east-1-analytics-dev`

    Can be overridden by setting `sysenv` in your Ingest.common.yaml

    :return: SysEnv name
    """
    config_sysenv = ingest_env.get("sysenv")
    if config_sysenv:
        return config_sysenv

    namespace = ingest_env.require("namespace")
    provider, region = get_provider_and_region()

    return f"{namespace}-{provider}-{region}-{get_purpose()}-{get_phase()}"


def get_provider_override() -> Optional[str]:
    """
    Retrieve the provider override for the current module (`ingest:provider: myprovider`)

    :return: str
    """
    return ingest_config.get("provider")
