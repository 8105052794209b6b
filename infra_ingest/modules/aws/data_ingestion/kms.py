from pulumi import ResourceOptions
from pulumi_aws import iam, kms

from infra_ingest.lib.iam import generate_kms_key_policy, policy_json
from infra_ingest.lib.tags import get_tags
from .config import KeyArgs


def _alias_name(alias: str) -> str:
    return alias if alias.startswith("alias/") else f"alias/{alias}"


def create_data_key(cls, args: KeyArgs, role: iam.Role) -> tuple[kms.Key, kms.Alias]:
    """
    Create the key encrypting the data and log buckets.

    The key policy keeps the account root in control of the key and lets ``role`` use it. It is rendered once the
    role ARN is known; an invalid ARN fails the run rather than leaving a key without a usable policy.

    :param cls: Calling module
    :param args: Key configuration
    :param role: Warehouse role allowed to use the key
    :return: kms.Key, kms.Alias
    """
    key = kms.Key(
        "data",
        description=f"Encrypts ingested data and logs ({_alias_name(args.alias)})",
        is_enabled=True,
        enable_key_rotation=args.enable_key_rotation,
        deletion_window_in_days=args.deletion_window_in_days,
        policy=role.arn.apply(
            lambda role_arn: policy_json(generate_kms_key_policy, role_arn, cls.aws_account_id, cls.partition)
        ),
        tags=get_tags("kms", "key", "data"),
        opts=ResourceOptions(parent=cls, depends_on=[role]),
    )

    alias = kms.Alias(
        "data",
        name=_alias_name(args.alias),
        target_key_id=key.key_id,
        opts=ResourceOptions(parent=key),
    )

    return key, alias
