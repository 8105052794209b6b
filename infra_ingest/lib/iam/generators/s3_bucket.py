from typing import Optional

from ..actions import (
    S3_ACL_CHECK_ACTIONS,
    S3_ALL_ACTIONS,
    S3_FUNCTION_READ_ACTIONS,
    S3_LOG_EXPORT_ACTIONS,
    S3_PUT_OBJECT_ACTIONS,
    S3_WAREHOUSE_READ_ACTIONS,
)
from ..arn import require_account_id, require_bucket_arn
from ..principals import (
    ANYONE,
    CLOUDWATCH_LOGS_SERVICE,
    LAMBDA_SERVICE,
    LOG_DELIVERY_SERVICE,
    service_principal,
)
from ..types import Statement, StatementEffect

BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"
"""Canned ACL that leaves written objects manageable by the bucket owner"""


def _bucket_and_objects(bucket_arn: str) -> list[str]:
    return [bucket_arn, f"{bucket_arn}/*"]


def _source_account_condition(account_id: Optional[str]) -> dict:
    """
    Scope a service principal to requests made on behalf of ``account_id``, so another account can't point the same
    service at our bucket.
    """
    if account_id is None:
        return {}

    return {"StringEquals": {"aws:SourceAccount": require_account_id(account_id)}}


def generate_lambda_access_statement(bucket_arn: str, account_id: Optional[str] = None) -> Statement:
    """
    Generate a bucket policy statement that allows functions to read from a bucket.

    Grants access to:
        s3:GetObject
        s3:ListBucket

    Scoped to:
        - ``bucket_arn``
        - ``bucket_arn/*``

    :param bucket_arn: ARN of the bucket to read from
    :param account_id: Optionally restrict to functions running in this account
    :return: Statement
    """
    require_bucket_arn(bucket_arn)

    return Statement(
        Sid="AllowLambdaRead",
        Effect=StatementEffect.ALLOW,
        Principal=[service_principal(LAMBDA_SERVICE)],
        Action=list(S3_FUNCTION_READ_ACTIONS),
        Resource=_bucket_and_objects(bucket_arn),
        Condition=_source_account_condition(account_id),
    )


def generate_cloudwatch_logs_access_statement(bucket_arn: str, account_id: str) -> Statement:
    """
    Generate a bucket policy statement that allows CloudWatch Logs to export log groups into a bucket.

    Grants access to:
        s3:GetBucketAcl
        s3:PutObject

    The export must originate from ``account_id``.

    :param bucket_arn: ARN of the bucket receiving exports
    :param account_id: Account the log groups live in
    :return: Statement
    """
    require_bucket_arn(bucket_arn)

    return Statement(
        Sid="AllowCloudWatchLogsExport",
        Effect=StatementEffect.ALLOW,
        Principal=[service_principal(CLOUDWATCH_LOGS_SERVICE)],
        Action=list(S3_LOG_EXPORT_ACTIONS),
        Resource=_bucket_and_objects(bucket_arn),
        Condition=_source_account_condition(require_account_id(account_id)),
    )


def generate_non_secure_transport_deny_statement(bucket_arn: str) -> Statement:
    """
    Generate a bucket policy statement that denies every request made without TLS, whoever makes it.

    :param bucket_arn: ARN of the bucket to protect
    :return: Statement
    """
    require_bucket_arn(bucket_arn)

    return Statement(
        Sid="DenyInsecureTransport",
        Effect=StatementEffect.DENY,
        Principal=[ANYONE],
        Action=list(S3_ALL_ACTIONS),
        Resource=_bucket_and_objects(bucket_arn),
        Condition={"Bool": {"aws:SecureTransport": "false"}},
    )


def generate_log_delivery_acl_check_statement(log_bucket_arn: str, account_id: Optional[str] = None) -> Statement:
    """
    Generate a bucket policy statement that lets the log delivery service check the bucket ACL before writing.

    Scoped to the bucket itself, not its objects.

    :param log_bucket_arn: ARN of the log bucket
    :param account_id: Optionally restrict to deliveries for this account
    :return: Statement
    """
    require_bucket_arn(log_bucket_arn)

    return Statement(
        Sid="AllowLogDeliveryAclCheck",
        Effect=StatementEffect.ALLOW,
        Principal=[service_principal(LOG_DELIVERY_SERVICE)],
        Action=list(S3_ACL_CHECK_ACTIONS),
        Resource=[log_bucket_arn],
        Condition=_source_account_condition(account_id),
    )


def generate_log_delivery_put_object_statement(log_bucket_arn: str, account_id: Optional[str] = None) -> Statement:
    """
    Generate a bucket policy statement that lets the log delivery service write log objects.

    Writes must set the ``bucket-owner-full-control`` ACL, otherwise the delivered objects would belong to the
    delivery service and we could neither read nor delete them.

    :param log_bucket_arn: ARN of the log bucket
    :param account_id: Optionally restrict to deliveries for this account
    :return: Statement
    """
    require_bucket_arn(log_bucket_arn)

    condition = {"StringEquals": {"s3:x-amz-acl": BUCKET_OWNER_FULL_CONTROL}}
    if account_id is not None:
        condition["StringEquals"]["aws:SourceAccount"] = require_account_id(account_id)

    return Statement(
        Sid="AllowLogDeliveryWrite",
        Effect=StatementEffect.ALLOW,
        Principal=[service_principal(LOG_DELIVERY_SERVICE)],
        Action=list(S3_PUT_OBJECT_ACTIONS),
        Resource=[f"{log_bucket_arn}/*"],
        Condition=condition,
    )


def generate_bucket_read_statement(bucket_arn: str) -> Statement:
    """
    Generate an identity policy statement (no principal) that lets a role read a bucket.

    Used on the warehouse role to load data without handing it full S3 access.

    :param bucket_arn: ARN of the bucket to read from
    :return: Statement
    """
    require_bucket_arn(bucket_arn)

    return Statement(
        Sid="ReadDataBucket",
        Effect=StatementEffect.ALLOW,
        Action=list(S3_WAREHOUSE_READ_ACTIONS),
        Resource=_bucket_and_objects(bucket_arn),
    )
