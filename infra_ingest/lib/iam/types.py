from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Union

from .arn import InvalidInputException


class StatementEffect(Enum):
    ALLOW = "Allow"
    """Grant the listed actions"""

    DENY = "Deny"
    """Refuse the listed actions, regardless of any Allow"""


class PrincipalType(Enum):
    AWS = "AWS"
    """Account, role or user ARNs"""

    SERVICE = "Service"
    """AWS service principals, such as ``logs.amazonaws.com``"""

    ANY = "*"
    """Everyone"""


@dataclass(frozen=True)
class PolicyPrincipal:
    type: PrincipalType
    """The kind of identity this principal describes"""

    identifiers: Sequence[str] = field(default_factory=tuple)
    """ARNs or service names. Ignored for ``PrincipalType.ANY``."""

    def __post_init__(self):
        if not isinstance(self.type, PrincipalType):
            object.__setattr__(self, "type", PrincipalType(self.type))
        object.__setattr__(self, "identifiers", tuple(self.identifiers))

        if self.type is not PrincipalType.ANY and not (self.identifiers and all(self.identifiers)):
            raise InvalidInputException(f"principal of type `{self.type.value}` needs non-empty identifiers")


ConditionValue = Union[str, Sequence[str]]


def _freeze_condition(condition: Mapping[str, Mapping[str, ConditionValue]]) -> Mapping:
    return MappingProxyType(
        {
            operator: MappingProxyType(
                {key: value if isinstance(value, str) else tuple(value) for key, value in values.items()}
            )
            for operator, values in condition.items()
        }
    )


@dataclass(frozen=True)
class Statement:
    """
    A single policy statement.

    Sequence fields are stored as tuples and ``Condition`` as read-only mappings, so a statement can't be widened
    once its invariants have been checked.
    """

    Effect: StatementEffect
    """AWS statement effect, ("Allow", "Deny")"""

    Action: Sequence[str]
    """AWS action, ("s3:GetObject", "kms:Decrypt",...)"""

    Resource: Sequence[str]
    """
    AWS resources to apply this statement to.
    String interpolated to allow access to things like ``partition`` and ``aws_account_id``.

    See ``resource_interpolator.py`` for supported interpolations.
    """

    Principal: Sequence[PolicyPrincipal] = field(default_factory=tuple)
    """Who the statement applies to. Left empty for identity policies attached to a role."""

    Condition: Mapping[str, Mapping[str, ConditionValue]] = field(default_factory=dict)
    """Condition operator -> condition key -> value, e.g. ``{"Bool": {"aws:SecureTransport": "false"}}``"""

    Sid: Optional[str] = None
    """Optional statement identifier"""

    def __post_init__(self):
        try:
            effect = StatementEffect(self.Effect)
        except ValueError:
            raise InvalidInputException(f"statement effect must be Allow or Deny, got `{self.Effect}`")
        object.__setattr__(self, "Effect", effect)

        for name in ("Action", "Resource", "Principal"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "Condition", _freeze_condition(self.Condition))

        if effect is StatementEffect.ALLOW and not (self.Action and self.Resource):
            raise InvalidInputException("Allow statements need at least one action and one resource")

        if not all(self.Action) or not all(self.Resource):
            raise InvalidInputException("statement actions and resources must not be empty strings")

    def __hash__(self):
        condition = tuple((operator, tuple(values.items())) for operator, values in self.Condition.items())
        return hash((self.Effect, self.Action, self.Resource, self.Principal, condition, self.Sid))


@dataclass(frozen=True)
class PolicyDocument:
    Statement: Sequence[Statement]
    """Statements, in the order they are rendered"""

    Version: str = "2012-10-17"
    """Policy language version"""

    Id: Optional[str] = None
    """Optional policy identifier"""

    def __post_init__(self):
        object.__setattr__(self, "Statement", tuple(self.Statement))


@dataclass
class RolePolicy:
    name: str
    """Name of the IAM policy statement"""

    statements: list[Statement]
    """List of statements for this policy"""
