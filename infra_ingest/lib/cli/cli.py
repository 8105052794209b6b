import json
import logging

import click

from infra_ingest.lib.iam import (
    InvalidInputException,
    PolicyDocument,
    generate_data_bucket_policy,
    generate_kms_key_policy,
    generate_log_bucket_policy,
    render_policy_document,
)

logger = logging.getLogger(__name__)


def echo_policy(document: PolicyDocument):
    click.echo(json.dumps(render_policy_document(document), indent=2))


def _generate(generator, *args) -> PolicyDocument:
    logger.debug("calling %s with %s", generator.__name__, args)
    try:
        return generator(*args)
    except InvalidInputException as e:
        raise click.ClickException(str(e))


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    """Render the access policies the data-ingestion stack attaches, without deploying anything."""
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!", err=True)


@cli.command()
@click.option("--role-arn", required=True, help="ARN of the role allowed to use the key")
@click.option("--account-id", required=True, help="Account owning the key")
@click.option("--partition", default="aws", show_default=True, help="AWS partition")
def key_policy(role_arn, account_id, partition):
    """Print the data key policy."""
    echo_policy(_generate(generate_kms_key_policy, role_arn, account_id, partition))


@cli.command()
@click.option("--bucket-arn", required=True, help="ARN of the data bucket")
@click.option("--account-id", required=True, help="Account owning the bucket")
def data_bucket_policy(bucket_arn, account_id):
    """Print the data bucket policy."""
    echo_policy(_generate(generate_data_bucket_policy, bucket_arn, account_id))


@cli.command()
@click.option("--bucket-arn", required=True, help="ARN of the log bucket")
@click.option("--account-id", required=True, help="Account owning the bucket")
def log_bucket_policy(bucket_arn, account_id):
    """Print the log bucket policy."""
    echo_policy(_generate(generate_log_bucket_policy, bucket_arn, account_id))


if __name__ == "__main__":
    cli()
