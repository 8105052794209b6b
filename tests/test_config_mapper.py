import dacite
import pytest

from infra_ingest.lib.config import IngestConfigException, config_from_dict, ingest_env
from infra_ingest.lib.iam import PrincipalType, StatementEffect
from infra_ingest.modules.aws.data_ingestion.config import DataIngestionArgs

RAW_CONFIG = {
    "role": {
        "name": "ingest-warehouse",
        "policies": [
            {
                "name": "exports",
                "statements": [
                    {
                        "Effect": "Allow",
                        "Action": ["s3:PutObject"],
                        "Resource": ["arn:{partition}:s3:::{aws_account_id}-exports/*"],
                    },
                    {
                        "Effect": "Deny",
                        "Principal": [{"type": "*"}],
                        "Action": ["s3:DeleteObject"],
                        "Resource": ["arn:{partition}:s3:::{aws_account_id}-exports/*"],
                        "Condition": {"Bool": {"aws:SecureTransport": "false"}},
                    },
                ],
            }
        ],
    },
    "warehouse": {
        "namespace_name": "ingest",
        "workgroup_name": "ingest",
        "db_name": "ingest",
        "admin_username": "ingest_admin",
        "subnet_ids": ["subnet-1", "subnet-2"],
        "security_group_ids": ["sg-1"],
    },
    "key": {"alias": "ingest-data"},
    "data_bucket": {"name": "data"},
    "log_bucket": {"name": "logs", "versioning": False},
}


def test_config_from_dict_maps_defaults():
    config = config_from_dict(RAW_CONFIG, DataIngestionArgs)

    assert config.warehouse.max_query_execution_time == 14400
    assert config.warehouse.admin_password is None
    assert config.key.deletion_window_in_days == 7
    assert config.data_bucket.versioning is True
    assert config.log_bucket.versioning is False
    assert config.role.managed_policy_arns == []


def test_config_from_dict_maps_role_policies():
    config = config_from_dict(RAW_CONFIG, DataIngestionArgs)
    allow, deny = config.role.policies[0].statements

    assert allow.Effect is StatementEffect.ALLOW
    assert allow.Principal == ()
    assert deny.Effect is StatementEffect.DENY
    assert deny.Principal[0].type is PrincipalType.ANY
    assert deny.Condition == {"Bool": {"aws:SecureTransport": "false"}}


def test_config_from_dict_is_strict():
    raw = dict(RAW_CONFIG, unexpected={"key": "value"})

    with pytest.raises(dacite.UnexpectedDataError):
        config_from_dict(raw, DataIngestionArgs)


def test_config_from_dict_requires_fields():
    raw = {k: v for k, v in RAW_CONFIG.items() if k != "warehouse"}

    with pytest.raises(dacite.MissingValueError):
        config_from_dict(raw, DataIngestionArgs)


def test_ingest_env_loads_override_file():
    assert ingest_env.require("team") == "data-platform"
    assert ingest_env.get("missing", "default") == "default"

    with pytest.raises(IngestConfigException, match="missing"):
        ingest_env.require("missing")
