# https://docs.aws.amazon.com/service-authorization/latest/reference/list_awskeymanagementservice.html
KMS_KEY_ADMINISTRATION_ACTIONS = ["kms:*"]
"""Everything, granted to the account root so the key can't be locked out"""

KMS_KEY_USAGE_ACTIONS = [
    "kms:Encrypt",
    "kms:Decrypt",
    "kms:ReEncrypt*",
    "kms:GenerateDataKey*",
    "kms:DescribeKey",
]
"""Cryptographic use of a key, without the ability to change or delete it"""

KEY_POLICY_SELF = "*"
"""Inside a key policy, ``*`` refers to the key the policy is attached to and nothing else"""

# https://docs.aws.amazon.com/service-authorization/latest/reference/list_amazons3.html
S3_ALL_ACTIONS = ["s3:*"]

S3_FUNCTION_READ_ACTIONS = [
    "s3:GetObject",
    "s3:ListBucket",
]

S3_WAREHOUSE_READ_ACTIONS = [
    "s3:GetObject",
    "s3:GetBucketLocation",
    "s3:ListBucket",
]

S3_LOG_EXPORT_ACTIONS = [
    "s3:GetBucketAcl",
    "s3:PutObject",
]

S3_ACL_CHECK_ACTIONS = ["s3:GetBucketAcl"]

S3_PUT_OBJECT_ACTIONS = ["s3:PutObject"]
