import json
import os
from pathlib import Path

# configuration is read on import, so this has to happen before anything from infra_ingest is imported
os.environ["INGEST_CONFIG_PATH"] = str(Path(__file__).parent / "Ingest.common.yaml")
os.environ["PULUMI_CONFIG"] = json.dumps({"aws:region": "us-east-1"})

import pulumi  # noqa: E402
import pytest  # noqa: E402

ACCOUNT_ID = "123456789012"


class IngestMocks(pulumi.runtime.Mocks):
    """Fills in the outputs AWS would compute, and records every resource declared"""

    def __init__(self):
        self.resources = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)

        if args.typ == "aws:iam/role:Role":
            outputs["arn"] = f"arn:aws:iam::{ACCOUNT_ID}:role/{args.inputs['name']}"
        elif args.typ == "aws:kms/key:Key":
            outputs["arn"] = f"arn:aws:kms:us-east-1:{ACCOUNT_ID}:key/{args.name}-0000"
            outputs["keyId"] = f"{args.name}-0000"
        elif args.typ == "aws:s3/bucket:Bucket":
            outputs["arn"] = f"arn:aws:s3:::{args.inputs['bucket']}"
        elif args.typ == "random:index/randomPassword:RandomPassword":
            outputs["result"] = "Gener4ted-password"

        return f"{args.name}_id", outputs

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:index/getCallerIdentity:getCallerIdentity":
            return {
                "accountId": ACCOUNT_ID,
                "arn": f"arn:aws:iam::{ACCOUNT_ID}:user/ci",
                "id": ACCOUNT_ID,
                "userId": "AIDACI",
            }
        elif args.token == "aws:index/getPartition:getPartition":
            return {
                "partition": "aws",
                "dnsSuffix": "amazonaws.com",
                "id": "aws",
                "reverseDnsPrefix": "com.amazonaws",
            }

        return {}


MOCKS = IngestMocks()
pulumi.runtime.set_mocks(MOCKS, project="ingest", stack="data-ingestion", preview=False)


@pytest.fixture
def mocks() -> IngestMocks:
    return MOCKS


@pytest.fixture
def account_id() -> str:
    return ACCOUNT_ID


@pytest.fixture
def bucket_arn() -> str:
    return "arn:aws:s3:::my-bucket"


@pytest.fixture
def log_bucket_arn() -> str:
    return "arn:aws:s3:::my-log-bucket"


@pytest.fixture
def role_arn() -> str:
    return "arn:aws:iam::123:role/demo"
