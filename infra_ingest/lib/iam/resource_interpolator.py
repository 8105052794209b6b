from pulumi import log


def interpolate_resource(cls, resource: str) -> str:
    """
    Interpolate resource identifiers from config to allow access to the full set of parameters provided by AWS

    Example:
        "arn:{partition}:s3:::{aws_account_id}-exports/*"
        becomes
        "arn:aws:s3:::1234567890-exports/*"

    Only attributes set on the calling class are available, which for an ``AWSModule`` means ``partition``,
    ``region`` and ``aws_account_id``.

    :param cls: Calling class to interpolate from
    :param resource: Resource string to interpolate
    :return: Interpolated resource string
    """
    interpolated = resource.format(**cls.__dict__)
    log.debug(f"interpolating resource: [{resource}] to [{interpolated}]")
    return interpolated
