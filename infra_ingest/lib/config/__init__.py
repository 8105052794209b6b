from .core import (
    get_sysenv,
    get_purpose,
    get_phase,
    get_provider_and_region,
    get_team,
    get_stack,
    get_project,
    tag_namespace,
    tag_prefix,
    get_provider_override,
)
from .ingest_env import ingest_env, IngestConfigException
from .mapper import get_stack_config, config_from_dict
