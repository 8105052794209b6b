from .arn import (
    InvalidInputException,
    account_root_arn,
    require_arn,
    require_bucket_arn,
    require_partition,
    require_role_arn,
)
from .create_policy import create_policy, policy_json, render_policy_document, render_statement
from .generators.bucket_policies import generate_data_bucket_policy, generate_log_bucket_policy
from .generators.kms import generate_key_usage_statement, generate_kms_key_policy, require_root_statement
from .generators.s3_bucket import (
    generate_bucket_read_statement,
    generate_cloudwatch_logs_access_statement,
    generate_lambda_access_statement,
    generate_log_delivery_acl_check_statement,
    generate_log_delivery_put_object_statement,
    generate_non_secure_transport_deny_statement,
)
from .resource_interpolator import interpolate_resource
from .types import PolicyDocument, PolicyPrincipal, PrincipalType, RolePolicy, Statement, StatementEffect
