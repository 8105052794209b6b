import json

from pulumi import Output, ResourceOptions, log
from pulumi_aws import iam, kms, s3

from infra_ingest.lib.config import get_sysenv
from infra_ingest.lib.iam import (
    PolicyDocument,
    create_policy,
    generate_bucket_read_statement,
    generate_key_usage_statement,
    render_policy_document,
)
from infra_ingest.lib.iam.principals import REDSHIFT_SERVICE
from infra_ingest.lib.tags import get_tags
from .config import RoleArgs


def create_warehouse_role(cls, args: RoleArgs) -> iam.Role:
    """
    Create the role the warehouse assumes to load data, with any configured managed and inline policies.

    Access to the data bucket and key is granted separately by ``create_warehouse_access_policy``, once both exist.

    :param cls: Calling module
    :param args: Role configuration
    :return: iam.Role
    """
    role = iam.Role(
        args.name,
        name=args.name,
        description=f"Warehouse execution role for {get_sysenv()}",
        assume_role_policy=json.dumps(
            {
                "Version": "2012-10-17",
                "Statement": [
                    {
                        "Effect": "Allow",
                        "Principal": {"Service": [REDSHIFT_SERVICE]},
                        "Action": ["sts:AssumeRole"],
                    }
                ],
            }
        ),
        tags=get_tags("iam", "role", "warehouse"),
        opts=ResourceOptions(parent=cls),
    )

    for policy_arn in args.managed_policy_arns:
        log.debug(f"attaching managed policy [{policy_arn}] to role [{args.name}]")
        iam.RolePolicyAttachment(
            f"{args.name}-{policy_arn.rsplit('/', 1)[-1]}",
            role=role.name,
            policy_arn=policy_arn,
            opts=ResourceOptions(parent=role),
        )

    for policy in args.policies:
        create_policy(cls, policy, role)

    return role


def _render_warehouse_access_policy(bucket_arn: str, key_arn: str) -> str:
    document = PolicyDocument(
        Statement=[
            generate_bucket_read_statement(bucket_arn),
            generate_key_usage_statement(key_arn),
        ],
    )
    return json.dumps(render_policy_document(document))


def create_warehouse_access_policy(role: iam.Role, bucket: s3.Bucket, key: kms.Key) -> iam.RolePolicy:
    """
    Create the inline policy letting the warehouse role read the data bucket and use the data key

    :param role: Warehouse role
    :param bucket: Data bucket
    :param key: Data key
    :return: iam.RolePolicy
    """
    return iam.RolePolicy(
        "warehouse-access",
        role=role.id,
        policy=Output.all(bucket.arn, key.arn).apply(lambda arns: _render_warehouse_access_policy(*arns)),
        opts=ResourceOptions(parent=role),
    )
