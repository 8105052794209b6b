from ..config import (
    tag_prefix,
    get_team,
    get_sysenv,
    get_stack,
    get_project,
    get_purpose,
    get_phase,
)


def get_tags(service, role, group=None) -> dict:
    """
    Generate tag dict for resources

    example tags:
      data bucket:
        Name = s3-bucket-data
               service-role-group
        ingest:sysenv = ingest-aws-us-east-1-analytics-dev
        ingest:service = s3
        ingest:role = bucket
        ingest:group = data
        ingest:createdby = pulumi
        ingest:team = data-platform
        ingest:project = ingest
        ingest:stack = data-ingestion
        ingest:purpose = analytics
        ingest:phase = dev

      warehouse workgroup:
        Name = redshift-workgroup
               service-role
        ingest:sysenv = ingest-aws-us-east-1-analytics-dev
        ingest:service = redshift
        ingest:role = workgroup
        ingest:group = main
        ...

    :param service: This resource's "namespace" (s3, kms, redshift,...)
    :param role: The role this resource performs within the namespace (bucket, key, workgroup,...)
    :param group: The group this resource belongs to (data, logs). Leave unset to use "main".
    :return: Dict of tags
    """

    group_name = "main" if not group else group
    group_suffix = f"-{group}" if group else ""

    return {
        "Name": f"{service}-{role}{group_suffix}",
        f"{tag_prefix}sysenv": get_sysenv(),
        f"{tag_prefix}service": service,
        f"{tag_prefix}role": role,
        f"{tag_prefix}group": group_name,
        f"{tag_prefix}team": get_team(),
        f"{tag_prefix}createdby": "pulumi",
        f"{tag_prefix}stack": get_stack(),
        f"{tag_prefix}project": get_project(),
        f"{tag_prefix}purpose": get_purpose(),
        f"{tag_prefix}phase": get_phase(),
    }
