from dataclasses import dataclass, field
from typing import Optional

from pulumi import Output

from infra_ingest.lib.iam import RolePolicy


@dataclass
class RoleArgs:
    name: str
    """Name of the warehouse execution role"""

    managed_policy_arns: Optional[list[str]] = field(default_factory=list)
    """Managed policies to attach on top of the generated least-privilege inline policy"""

    policies: Optional[list[RolePolicy]] = field(default_factory=list)
    """Custom inline policies for this role. Resources support ``{partition}``, ``{region}``, ``{aws_account_id}``."""


@dataclass
class WarehouseArgs:
    namespace_name: str
    """Redshift Serverless namespace name"""

    workgroup_name: str
    """Redshift Serverless workgroup name"""

    db_name: str
    """Database created in the namespace"""

    admin_username: str
    """Warehouse administrator user name"""

    subnet_ids: list[str]
    """Subnets the workgroup is placed in"""

    security_group_ids: list[str]
    """Security groups attached to the workgroup"""

    admin_password: Optional[str] = None
    """Administrator password. A random password is generated when unset."""

    max_query_execution_time: int = 14400
    """Seconds a query may run before it is cancelled"""

    base_capacity: Optional[int] = None
    """Base RPU capacity of the workgroup. AWS picks the default when unset."""

    publicly_accessible: bool = False
    """Whether the workgroup endpoint is reachable from outside the VPC"""


@dataclass
class KeyArgs:
    alias: str
    """Alias of the data key, with or without the ``alias/`` prefix"""

    deletion_window_in_days: int = 7
    """Days between scheduling deletion of the key and the key being deleted"""

    enable_key_rotation: bool = True
    """Rotate the key material yearly"""


@dataclass
class BucketArgs:
    name: str
    """Friendly bucket name. The real name is prefixed with purpose, phase and a sysenv hash."""

    versioning: bool = True
    """Whether this bucket should be versioned or not"""

    force_destroy: bool = True
    """Delete all objects when the bucket is destroyed"""

    block_public_access: bool = True
    """Block public ACLs and policies on the bucket"""


@dataclass
class DataIngestionArgs:
    role: RoleArgs
    """Warehouse execution role"""

    warehouse: WarehouseArgs
    """Redshift Serverless namespace and workgroup"""

    key: KeyArgs
    """KMS key encrypting both buckets"""

    data_bucket: BucketArgs
    """Bucket holding data to ingest"""

    log_bucket: BucketArgs
    """Bucket receiving delivered logs"""


@dataclass
class DataIngestionExports:
    role_arn: Output[str]
    """ARN of the warehouse execution role"""

    namespace_name: Output[str]
    """Redshift Serverless namespace name"""

    workgroup_name: Output[str]
    """Redshift Serverless workgroup name"""

    key_arn: Output[str]
    """ARN of the data key"""

    key_alias: Output[str]
    """Alias of the data key"""

    key_policy: Output[str]
    """Rendered key policy"""

    data_bucket: Output[str]
    """Data bucket name"""

    data_bucket_arn: Output[str]
    """Data bucket ARN"""

    data_bucket_policy: Output[str]
    """Rendered data bucket policy"""

    log_bucket: Output[str]
    """Log bucket name"""

    log_bucket_arn: Output[str]
    """Log bucket ARN"""

    log_bucket_policy: Output[str]
    """Rendered log bucket policy"""
