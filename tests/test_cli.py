import json

from click.testing import CliRunner

from infra_ingest.lib.cli.cli import cli


def test_key_policy():
    result = CliRunner().invoke(cli, ["key-policy", "--role-arn", "arn:aws:iam::123:role/demo", "--account-id", "123"])

    assert result.exit_code == 0
    rendered = json.loads(result.stdout)
    assert rendered["Statement"][0]["Principal"] == {"AWS": ["arn:aws:iam::123:root"]}
    assert rendered["Statement"][1]["Principal"] == {"AWS": ["arn:aws:iam::123:role/demo"]}


def test_data_bucket_policy():
    result = CliRunner().invoke(
        cli, ["data-bucket-policy", "--bucket-arn", "arn:aws:s3:::my-bucket", "--account-id", "123456789012"]
    )

    assert result.exit_code == 0
    rendered = json.loads(result.stdout)
    assert rendered["Statement"][-1]["Effect"] == "Deny"


def test_log_bucket_policy():
    result = CliRunner().invoke(
        cli, ["log-bucket-policy", "--bucket-arn", "arn:aws:s3:::my-log-bucket", "--account-id", "123456789012"]
    )

    assert result.exit_code == 0
    rendered = json.loads(result.stdout)
    assert rendered["Statement"][1]["Resource"] == ["arn:aws:s3:::my-log-bucket/*"]


def test_invalid_arn_fails():
    result = CliRunner().invoke(cli, ["data-bucket-policy", "--bucket-arn", "", "--account-id", "123456789012"])

    assert result.exit_code == 1
    assert "ARN must not be empty" in result.output
