import inspect
import json

import pulumi
import pytest
from pulumi_aws import kms, s3

from infra_ingest.lib.config import config_from_dict
from infra_ingest.lib.iam import InvalidInputException
from infra_ingest.modules.aws.data_ingestion import DataIngestion
from infra_ingest.modules.aws.data_ingestion.config import DataIngestionArgs
from infra_ingest.modules.aws.data_ingestion.iam import _render_warehouse_access_policy
from infra_ingest.modules.aws.data_ingestion.kms import create_data_key
from infra_ingest.modules.aws.data_ingestion.s3 import create_encrypted_bucket

CONFIG = {
    "role": {"name": "ingest-warehouse"},
    "warehouse": {
        "namespace_name": "ingest",
        "workgroup_name": "ingest",
        "db_name": "ingest",
        "admin_username": "ingest_admin",
        "subnet_ids": ["subnet-1", "subnet-2"],
        "security_group_ids": ["sg-1"],
    },
    "key": {"alias": "ingest-data"},
    "data_bucket": {"name": "data"},
    "log_bucket": {"name": "logs"},
}


@pytest.fixture(scope="module")
def exports():
    module = DataIngestion("data-ingestion", config_from_dict(CONFIG, DataIngestionArgs))
    return module.run()


def _resources_of_type(mocks, typ):
    return [resource for resource in mocks.resources if resource.typ == typ]


@pulumi.runtime.test
def test_key_policy(exports, account_id):
    def check(args):
        key_policy, role_arn = args
        statements = json.loads(key_policy)["Statement"]

        assert len(statements) == 2
        assert statements[0]["Principal"] == {"AWS": [f"arn:aws:iam::{account_id}:root"]}
        assert statements[0]["Action"] == ["kms:*"]
        assert statements[1]["Principal"] == {"AWS": [role_arn]}
        assert "kms:Decrypt" in statements[1]["Action"]

    return pulumi.Output.all(exports.key_policy, exports.role_arn).apply(check)


@pulumi.runtime.test
def test_data_bucket_policy(exports, account_id):
    def check(args):
        policy, bucket_arn = args
        rendered = json.loads(policy)

        assert rendered["Id"].endswith("-data-Policy")
        assert [statement["Sid"] for statement in rendered["Statement"]] == [
            "AllowLambdaRead",
            "AllowCloudWatchLogsExport",
            "DenyInsecureTransport",
        ]
        deny = rendered["Statement"][2]
        assert deny["Resource"] == [bucket_arn, f"{bucket_arn}/*"]
        assert deny["Condition"] == {"Bool": {"aws:SecureTransport": "false"}}
        assert rendered["Statement"][1]["Condition"] == {"StringEquals": {"aws:SourceAccount": account_id}}

    return pulumi.Output.all(exports.data_bucket_policy, exports.data_bucket_arn).apply(check)


@pulumi.runtime.test
def test_log_bucket_policy(exports):
    def check(args):
        policy, bucket_arn = args
        statements = json.loads(policy)["Statement"]

        assert statements[0]["Resource"] == [bucket_arn]
        assert statements[1]["Resource"] == [f"{bucket_arn}/*"]
        assert statements[1]["Condition"]["StringEquals"]["s3:x-amz-acl"] == "bucket-owner-full-control"

    return pulumi.Output.all(exports.log_bucket_policy, exports.log_bucket_arn).apply(check)


@pulumi.runtime.test
def test_bucket_names(exports):
    def check(args):
        data_bucket, log_bucket = args

        assert data_bucket.startswith("analytics-test-")
        assert data_bucket.endswith("-data")
        assert log_bucket.endswith("-logs")

    return pulumi.Output.all(exports.data_bucket, exports.log_bucket).apply(check)


@pulumi.runtime.test
def test_key_alias_and_warehouse(exports):
    def check(args):
        alias, namespace_name, workgroup_name = args

        assert alias == "alias/ingest-data"
        assert namespace_name == "ingest"
        assert workgroup_name == "ingest"

    return pulumi.Output.all(exports.key_alias, exports.namespace_name, exports.workgroup_name).apply(check)


@pulumi.runtime.test
def test_buckets_are_encrypted_with_the_data_key(exports, mocks):
    def check(args):
        key_arn, _, _ = args
        buckets = _resources_of_type(mocks, "aws:s3/bucket:Bucket")

        assert len(buckets) == 2
        for bucket in buckets:
            default = bucket.inputs["serverSideEncryptionConfiguration"]["rule"]["applyServerSideEncryptionByDefault"]
            assert default == {"sseAlgorithm": "aws:kms", "kmsMasterKeyId": key_arn}

    return pulumi.Output.all(exports.key_arn, exports.data_bucket_arn, exports.log_bucket_arn).apply(check)


@pulumi.runtime.test
def test_namespace_is_encrypted_with_the_data_key(exports, mocks):
    def check(args):
        key_arn, role_arn, _ = args
        (namespace,) = _resources_of_type(mocks, "aws:redshiftserverless/namespace:Namespace")

        assert namespace.inputs["kmsKeyId"] == key_arn
        assert namespace.inputs["defaultIamRoleArn"] == role_arn

    return pulumi.Output.all(exports.key_arn, exports.role_arn, exports.namespace_name).apply(check)


def test_warehouse_access_policy():
    rendered = json.loads(
        _render_warehouse_access_policy(
            "arn:aws:s3:::analytics-test-abcde-data",
            "arn:aws:kms:us-east-1:123456789012:key/data-0000",
        )
    )

    read, use = rendered["Statement"]
    assert "Principal" not in read
    assert read["Resource"] == ["arn:aws:s3:::analytics-test-abcde-data", "arn:aws:s3:::analytics-test-abcde-data/*"]
    assert use["Resource"] == ["arn:aws:kms:us-east-1:123456789012:key/data-0000"]


def test_warehouse_access_policy_rejects_invalid_arns():
    with pytest.raises(InvalidInputException):
        _render_warehouse_access_policy("", "arn:aws:kms:us-east-1:123456789012:key/data-0000")


def test_resource_helpers_declare_their_return_types():
    assert inspect.signature(create_data_key).return_annotation == tuple[kms.Key, kms.Alias]
    assert inspect.signature(create_encrypted_bucket).return_annotation == tuple[s3.Bucket, s3.BucketPolicy]
