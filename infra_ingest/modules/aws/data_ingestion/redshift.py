from pulumi import Output, ResourceOptions
from pulumi_aws import iam, kms, redshiftserverless
from pulumi_random import RandomPassword

from infra_ingest.lib.tags import get_tags
from .config import WarehouseArgs

# Redshift refuses `/`, `@`, `"`, `'`, `\` and spaces in passwords
_PASSWORD_SPECIALS = "!#$%&*()-_=+[]{}<>?"


def _admin_password(cls, args: WarehouseArgs) -> Output[str]:
    if args.admin_password:
        return Output.secret(args.admin_password)

    return RandomPassword(
        "warehouse-admin-password",
        length=32,
        special=True,
        override_special=_PASSWORD_SPECIALS,
        min_upper=1,
        min_lower=1,
        min_numeric=1,
        opts=ResourceOptions(parent=cls),
    ).result


def create_namespace(cls, args: WarehouseArgs, role: iam.Role, key: kms.Key) -> redshiftserverless.Namespace:
    """
    Create the warehouse namespace, using ``role`` as its default IAM role and encrypting it with ``key``

    :param cls: Calling module
    :param args: Warehouse configuration
    :param role: Warehouse execution role
    :param key: Data key encrypting the namespace
    :return: redshiftserverless.Namespace
    """
    return redshiftserverless.Namespace(
        args.namespace_name,
        namespace_name=args.namespace_name,
        db_name=args.db_name,
        admin_username=args.admin_username,
        admin_user_password=_admin_password(cls, args),
        default_iam_role_arn=role.arn,
        iam_roles=[role.arn],
        kms_key_id=key.arn,
        tags=get_tags("redshift", "namespace"),
        opts=ResourceOptions(parent=cls, depends_on=[key]),
    )


def create_workgroup(
    cls, args: WarehouseArgs, namespace: redshiftserverless.Namespace
) -> redshiftserverless.Workgroup:
    """
    Create the warehouse workgroup. It can only exist once the namespace does.

    :param cls: Calling module
    :param args: Warehouse configuration
    :param namespace: Namespace the workgroup serves
    :return: redshiftserverless.Workgroup
    """
    return redshiftserverless.Workgroup(
        args.workgroup_name,
        workgroup_name=args.workgroup_name,
        namespace_name=namespace.namespace_name,
        base_capacity=args.base_capacity,
        publicly_accessible=args.publicly_accessible,
        config_parameters=[
            redshiftserverless.WorkgroupConfigParameterArgs(
                parameter_key="max_query_execution_time",
                parameter_value=str(args.max_query_execution_time),
            )
        ],
        security_group_ids=args.security_group_ids,
        subnet_ids=args.subnet_ids,
        tags=get_tags("redshift", "workgroup"),
        opts=ResourceOptions(parent=cls, depends_on=[namespace]),
    )
