from .bucket_policies import generate_data_bucket_policy, generate_log_bucket_policy
from .kms import generate_key_usage_statement, generate_kms_key_policy, require_root_statement
from .s3_bucket import (
    generate_bucket_read_statement,
    generate_cloudwatch_logs_access_statement,
    generate_lambda_access_statement,
    generate_log_delivery_acl_check_statement,
    generate_log_delivery_put_object_statement,
    generate_non_secure_transport_deny_statement,
)
