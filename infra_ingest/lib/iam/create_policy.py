import json
from typing import Callable, Optional, Sequence

from pulumi import ResourceOptions
from pulumi_aws import iam

from .resource_interpolator import interpolate_resource
from .types import PolicyDocument, PolicyPrincipal, PrincipalType, RolePolicy, Statement


def create_policy(cls, policy: RolePolicy, role: iam.Role) -> iam.RolePolicy:
    """
    Create an inline policy for a given RolePolicy and Role
    :param cls: Calling class to interpolate from
    :param policy:
    :param role:
    :return: iam.RolePolicy
    """
    document = PolicyDocument(Statement=[_interpolate_statement(cls, statement) for statement in policy.statements])

    return iam.RolePolicy(
        policy.name,
        policy=json.dumps(render_policy_document(document)),
        role=role.id,
        opts=ResourceOptions(parent=role),
    )


def _interpolate_statement(cls, statement: Statement) -> Statement:
    return Statement(
        Sid=statement.Sid,
        Effect=statement.Effect,
        Principal=statement.Principal,
        Action=statement.Action,
        Resource=[interpolate_resource(cls, resource) for resource in statement.Resource],
        Condition=statement.Condition,
    )


def _render_principals(principals: Sequence[PolicyPrincipal]):
    if any(principal.type is PrincipalType.ANY for principal in principals):
        return "*"

    rendered = {}
    for principal in principals:
        rendered.setdefault(principal.type.value, []).extend(principal.identifiers)

    return rendered


def render_statement(statement: Statement) -> dict:
    """
    Render a statement in the AWS policy JSON shape.

    ``Sid``, ``Principal`` and ``Condition`` are only emitted when set.

    :param statement: Statement to render
    :return: dict
    """
    rendered = {}

    if statement.Sid:
        rendered["Sid"] = statement.Sid

    rendered["Effect"] = statement.Effect.value

    if statement.Principal:
        rendered["Principal"] = _render_principals(statement.Principal)

    rendered["Action"] = list(statement.Action)
    rendered["Resource"] = list(statement.Resource)

    if statement.Condition:
        rendered["Condition"] = {
            operator: {key: value if isinstance(value, str) else list(value) for key, value in values.items()}
            for operator, values in statement.Condition.items()
        }

    return rendered


def render_policy_document(document: PolicyDocument) -> dict:
    """
    Render a policy document in the AWS policy JSON shape, keeping statement order.

    :param document: PolicyDocument to render
    :return: dict
    """
    rendered = {"Version": document.Version}

    if document.Id:
        rendered["Id"] = document.Id

    rendered["Statement"] = [render_statement(statement) for statement in document.Statement]

    return rendered


def policy_json(generator: Callable[..., PolicyDocument], *args, policy_id: Optional[str] = None) -> str:
    """
    Call a policy document generator and serialize its result.

    Intended for use inside ``Output.apply``/``Output.all(...).apply`` once the ARNs a policy is scoped to resolve.

    Example::

        policy=Output.all(bucket.arn, self.aws_account_id).apply(
            lambda args: policy_json(generate_data_bucket_policy, *args)
        )

    :param generator: Function returning a PolicyDocument
    :param args: Positional arguments for ``generator``
    :param policy_id: Optional ``Id`` to set on the document
    :return: JSON string
    """
    document = generator(*args)

    if policy_id:
        document = PolicyDocument(Statement=document.Statement, Version=document.Version, Id=policy_id)

    return json.dumps(render_policy_document(document))
