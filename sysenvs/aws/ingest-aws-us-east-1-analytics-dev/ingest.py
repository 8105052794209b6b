# Boilerplate entrypoint: copy it into any new sysenv directory.
# The module to run is picked from the active stack name, so the `data-ingestion` stack runs
# `infra_ingest/modules/aws/data_ingestion`.
#
# Set INGEST_DEBUG=1 to get debug logs from configuration loading.
from infra_ingest.launcher import run_active_stack

run_active_stack("aws")
