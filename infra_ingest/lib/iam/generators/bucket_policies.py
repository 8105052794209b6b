from .s3_bucket import (
    generate_cloudwatch_logs_access_statement,
    generate_lambda_access_statement,
    generate_log_delivery_acl_check_statement,
    generate_log_delivery_put_object_statement,
    generate_non_secure_transport_deny_statement,
)
from ..types import PolicyDocument


def generate_data_bucket_policy(bucket_arn: str, account_id: str) -> PolicyDocument:
    """
    Generate the resource policy of the data bucket

    :param bucket_arn: ARN of the data bucket
    :param account_id: Account owning the bucket
    :return: PolicyDocument
    """
    return PolicyDocument(
        Statement=[
            generate_lambda_access_statement(bucket_arn, account_id),
            generate_cloudwatch_logs_access_statement(bucket_arn, account_id),
            generate_non_secure_transport_deny_statement(bucket_arn),
        ],
    )


def generate_log_bucket_policy(log_bucket_arn: str, account_id: str) -> PolicyDocument:
    """
    Generate the resource policy of the log bucket

    :param log_bucket_arn: ARN of the log bucket
    :param account_id: Account owning the bucket
    :return: PolicyDocument
    """
    return PolicyDocument(
        Statement=[
            generate_log_delivery_acl_check_statement(log_bucket_arn, account_id),
            generate_log_delivery_put_object_statement(log_bucket_arn, account_id),
            generate_non_secure_transport_deny_statement(log_bucket_arn),
        ],
    )
