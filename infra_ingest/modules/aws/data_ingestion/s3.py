from typing import Callable

from pulumi import ResourceOptions
from pulumi_aws import kms, s3

from infra_ingest.lib.iam import PolicyDocument, policy_json
from infra_ingest.lib.s3 import generate_bucket_name
from infra_ingest.lib.tags import get_tags
from .config import BucketArgs


def create_encrypted_bucket(
    cls,
    args: BucketArgs,
    key: kms.Key,
    policy_generator: Callable[[str, str], PolicyDocument],
) -> tuple[s3.Bucket, s3.BucketPolicy]:
    """
    Create a bucket encrypted with ``key``, and attach the resource policy ``policy_generator`` builds for it.

    The generator is called with the bucket ARN and the account ID once the bucket exists.

    :param cls: Calling module
    :param args: Bucket configuration
    :param key: KMS key used for default encryption
    :param policy_generator: Function building the bucket policy
    :return: s3.Bucket, s3.BucketPolicy
    """
    bucket_name = generate_bucket_name(args.name)

    bucket = s3.Bucket(
        bucket_name,
        bucket=bucket_name,
        versioning=s3.BucketVersioningArgs(enabled=args.versioning),
        server_side_encryption_configuration=s3.BucketServerSideEncryptionConfigurationArgs(
            rule=s3.BucketServerSideEncryptionConfigurationRuleArgs(
                apply_server_side_encryption_by_default=s3.BucketServerSideEncryptionConfigurationRuleApplyServerSideEncryptionByDefaultArgs(
                    sse_algorithm="aws:kms",
                    kms_master_key_id=key.arn,
                ),
                bucket_key_enabled=True,
            ),
        ),
        force_destroy=args.force_destroy,
        tags=get_tags("s3", "bucket", args.name),
        opts=ResourceOptions(parent=cls, depends_on=[key]),
    )

    policy_dependencies = []
    if args.block_public_access:
        policy_dependencies.append(
            s3.BucketPublicAccessBlock(
                bucket_name,
                bucket=bucket.id,
                block_public_acls=True,
                block_public_policy=True,
                ignore_public_acls=True,
                restrict_public_buckets=True,
                opts=ResourceOptions(parent=bucket),
            )
        )

    bucket_policy = s3.BucketPolicy(
        f"{bucket_name}-policy",
        bucket=bucket.id,
        policy=bucket.arn.apply(
            lambda arn: policy_json(policy_generator, arn, cls.aws_account_id, policy_id=f"{bucket_name}-Policy")
        ),
        opts=ResourceOptions(parent=bucket, depends_on=policy_dependencies),
    )

    return bucket, bucket_policy
