from infra_ingest.lib.aws.base import AWSModule
from infra_ingest.lib.iam import generate_data_bucket_policy, generate_log_bucket_policy
from .config import DataIngestionArgs, DataIngestionExports
from .iam import create_warehouse_access_policy, create_warehouse_role
from .kms import create_data_key
from .redshift import create_namespace, create_workgroup
from .s3 import create_encrypted_bucket


class DataIngestion(AWSModule):
    def build(self, config: DataIngestionArgs) -> DataIngestionExports:
        role = create_warehouse_role(self, config.role)

        key, alias = create_data_key(self, config.key, role)

        namespace = create_namespace(self, config.warehouse, role, key)
        workgroup = create_workgroup(self, config.warehouse, namespace)

        data_bucket, data_bucket_policy = create_encrypted_bucket(
            self, config.data_bucket, key, generate_data_bucket_policy
        )
        log_bucket, log_bucket_policy = create_encrypted_bucket(
            self, config.log_bucket, key, generate_log_bucket_policy
        )

        create_warehouse_access_policy(role, data_bucket, key)

        return DataIngestionExports(
            role_arn=role.arn,
            namespace_name=namespace.namespace_name,
            workgroup_name=workgroup.workgroup_name,
            key_arn=key.arn,
            key_alias=alias.name,
            key_policy=key.policy,
            data_bucket=data_bucket.bucket,
            data_bucket_arn=data_bucket.arn,
            data_bucket_policy=data_bucket_policy.policy,
            log_bucket=log_bucket.bucket,
            log_bucket_arn=log_bucket.arn,
            log_bucket_policy=log_bucket_policy.policy,
        )
