import hashlib

from ..config import get_sysenv, get_purpose, get_phase


def generate_bucket_name(name: str) -> str:
    """
    Derive a globally unique bucket name from a friendly name.

    Example:
        ``data`` in sysenv ``ingest-aws-us-east-1-analytics-dev`` becomes ``analytics-dev-1f3c9-data``

    :param name: Friendly bucket name
    :return: Bucket name, prefixed with purpose, phase and a short sysenv hash
    """
    sysenv_hash = hashlib.md5(get_sysenv().encode("utf-8")).hexdigest()
    bucket_name = f"{get_purpose()}-{get_phase()}-{sysenv_hash[-5:]}-{name}"

    if len(bucket_name) > 63:
        raise ValueError(f"bucket name `{bucket_name}` is longer than 63 characters, choose a shorter name than `{name}`")

    return bucket_name
