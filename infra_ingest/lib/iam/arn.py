import re
from typing import Optional

_ARN_PATTERN = re.compile(
    r"^arn:(?P<partition>[a-z0-9-]+):(?P<service>[a-z0-9-]+):(?P<region>[a-z0-9-]*):(?P<account>[0-9]*):(?P<resource>.+)$"
)

_BUCKET_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$")


class InvalidInputException(ValueError):
    """Raised when a policy builder is handed a value it can't safely scope a statement to"""


def require_arn(arn: str, service: Optional[str] = None, resource_prefix: Optional[str] = None) -> str:
    """
    Validate the shape of an ARN before it is used as a statement resource or principal.

    The ARN is not constructed or resolved here, only checked. An empty resource scope is either a silent no-op or
    an unintended wildcard depending on how the provider reads it, so both are refused outright.

    :param arn: ARN to validate
    :param service: Required service segment (``s3``, ``iam``, ``kms``,...)
    :param resource_prefix: Required prefix of the resource segment (``role/``, ``key/``,...)
    :return: The unchanged ARN
    """
    if not isinstance(arn, str):
        raise InvalidInputException(f"expected an ARN string, got `{type(arn).__name__}`")

    if not arn.strip():
        raise InvalidInputException("ARN must not be empty")

    if "*" in arn:
        raise InvalidInputException(f"ARN `{arn}` must not contain a wildcard")

    match = _ARN_PATTERN.match(arn)
    if not match:
        raise InvalidInputException(f"`{arn}` is not a well-formed ARN")

    if service and match["service"] != service:
        raise InvalidInputException(f"ARN `{arn}` is for service `{match['service']}`, expected `{service}`")

    if resource_prefix and not match["resource"].startswith(resource_prefix):
        raise InvalidInputException(f"ARN `{arn}` does not reference a `{resource_prefix}` resource")

    return arn


def require_bucket_arn(arn: str) -> str:
    """
    Validate an S3 bucket ARN. Object ARNs (``bucket/key``) are refused, the builders derive those themselves.

    Bucket names are global, so a bucket ARN never carries a region or an account.

    :param arn: Bucket ARN, like ``arn:aws:s3:::my-bucket``
    :return: The unchanged ARN
    """
    match = _ARN_PATTERN.match(require_arn(arn, service="s3"))

    if match["region"] or match["account"]:
        raise InvalidInputException(f"ARN `{arn}` has a region or account, S3 bucket ARNs have neither")

    if not _BUCKET_NAME_PATTERN.match(match["resource"]):
        raise InvalidInputException(f"ARN `{arn}` does not reference a single S3 bucket")

    return arn


def require_partition(arn: str, partition: str) -> str:
    """
    Check that an ARN belongs to ``partition``

    :param arn: ARN to check
    :param partition: Expected partition (``aws``, ``aws-cn``, ``aws-us-gov``)
    :return: The unchanged ARN
    """
    if _ARN_PATTERN.match(require_arn(arn))["partition"] != partition:
        raise InvalidInputException(f"ARN `{arn}` is not in partition `{partition}`")

    return arn


def require_role_arn(arn: str) -> str:
    return require_arn(arn, service="iam", resource_prefix="role/")


def require_key_arn(arn: str) -> str:
    return require_arn(arn, service="kms", resource_prefix="key/")


def require_account_id(account_id: str) -> str:
    if not isinstance(account_id, str) or not account_id.isdigit():
        raise InvalidInputException(f"`{account_id}` is not an AWS account ID")

    return account_id


def account_root_arn(account_id: str, partition: str = "aws") -> str:
    """
    Build the root principal ARN of an account

    Example:
        ``account_root_arn("123456789012")`` becomes ``arn:aws:iam::123456789012:root``

    :param account_id: AWS account ID
    :param partition: AWS partition (``aws``, ``aws-cn``, ``aws-us-gov``)
    :return: Account root ARN
    """
    if not partition:
        raise InvalidInputException("partition must not be empty")

    return f"arn:{partition}:iam::{require_account_id(account_id)}:root"
