from .arn import account_root_arn, require_role_arn
from .types import PolicyPrincipal, PrincipalType

LAMBDA_SERVICE = "lambda.amazonaws.com"
"""Function-execution service principal, reads objects out of the data bucket"""

CLOUDWATCH_LOGS_SERVICE = "logs.amazonaws.com"
"""CloudWatch Logs service principal, exports log groups into the data bucket"""

LOG_DELIVERY_SERVICE = "delivery.logs.amazonaws.com"
"""Vended log delivery service principal, writes access logs into the log bucket"""

REDSHIFT_SERVICE = "redshift.amazonaws.com"
"""Warehouse service principal, assumes the execution role"""

ANYONE = PolicyPrincipal(PrincipalType.ANY)


def service_principal(service: str) -> PolicyPrincipal:
    return PolicyPrincipal(PrincipalType.SERVICE, [service])


def role_principal(role_arn: str) -> PolicyPrincipal:
    return PolicyPrincipal(PrincipalType.AWS, [require_role_arn(role_arn)])


def account_root_principal(account_id: str, partition: str = "aws") -> PolicyPrincipal:
    return PolicyPrincipal(PrincipalType.AWS, [account_root_arn(account_id, partition)])
