from ..actions import KEY_POLICY_SELF, KMS_KEY_ADMINISTRATION_ACTIONS, KMS_KEY_USAGE_ACTIONS
from ..arn import InvalidInputException, account_root_arn, require_key_arn, require_partition, require_role_arn
from ..principals import account_root_principal, role_principal
from ..types import PolicyDocument, PrincipalType, Statement, StatementEffect

ROOT_ADMINISTRATION_SID = "EnableRootAccountAdministration"
ROLE_USAGE_SID = "AllowWarehouseRoleKeyUsage"


def _generate_root_administration_statement(account_id: str, partition: str) -> Statement:
    return Statement(
        Sid=ROOT_ADMINISTRATION_SID,
        Effect=StatementEffect.ALLOW,
        Principal=[account_root_principal(account_id, partition)],
        Action=list(KMS_KEY_ADMINISTRATION_ACTIONS),
        Resource=[KEY_POLICY_SELF],
    )


def _generate_role_usage_statement(role_arn: str) -> Statement:
    return Statement(
        Sid=ROLE_USAGE_SID,
        Effect=StatementEffect.ALLOW,
        Principal=[role_principal(role_arn)],
        Action=list(KMS_KEY_USAGE_ACTIONS),
        Resource=[KEY_POLICY_SELF],
    )


def require_root_statement(document: PolicyDocument, account_id: str, partition: str = "aws") -> PolicyDocument:
    """
    Refuse a key policy that doesn't leave the account root in control of the key.

    Without it, deleting or changing the role would leave a key nobody can administer, and AWS support is the only
    way back.

    :param document: Key policy to check
    :param account_id: Account owning the key
    :param partition: AWS partition
    :return: The unchanged document
    """
    root = account_root_arn(account_id, partition)

    for statement in document.Statement:
        if (
            statement.Effect is StatementEffect.ALLOW
            and list(statement.Action) == KMS_KEY_ADMINISTRATION_ACTIONS
            and any(p.type is PrincipalType.AWS and root in p.identifiers for p in statement.Principal)
        ):
            return document

    raise InvalidInputException(f"key policy does not grant `{root}` administration of the key")


def generate_kms_key_policy(role_arn: str, account_id: str, partition: str = "aws") -> PolicyDocument:
    """
    Generate the key policy for the shared data key.

    The policy holds exactly two statements, in this order:
        - the account root may do anything with the key, so it stays manageable whatever happens to the role
        - ``role_arn`` may use the key (encrypt, decrypt, re-encrypt, generate data keys, describe)

    Both statements are scoped to the key the policy is attached to.

    Example::

        key = kms.Key(
            "data",
            policy=role.arn.apply(
                lambda arn: json.dumps(render_policy_document(generate_kms_key_policy(arn, self.aws_account_id)))
            ),
        )

    :param role_arn: ARN of the role allowed to use the key, in ``partition``
    :param account_id: Account owning the key
    :param partition: AWS partition
    :return: PolicyDocument
    """
    require_partition(require_role_arn(role_arn), partition)

    document = PolicyDocument(
        Statement=[
            _generate_root_administration_statement(account_id, partition),
            _generate_role_usage_statement(role_arn),
        ],
    )

    return require_root_statement(document, account_id, partition)


def generate_key_usage_statement(key_arn: str) -> Statement:
    """
    Generate an identity policy statement that lets a role use one specific key.

    :param key_arn: ARN of the key
    :return: Statement
    """
    require_key_arn(key_arn)

    return Statement(
        Sid="UseDataKey",
        Effect=StatementEffect.ALLOW,
        Action=list(KMS_KEY_USAGE_ACTIONS),
        Resource=[key_arn],
    )
