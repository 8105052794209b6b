def kebab_from_snake(v: str) -> str:
    """Convert a python module name to the stack name that selects it

    Example:
        ``data_ingestion`` becomes ``data-ingestion``

    :param v: String in snake case
    :return: String in kebab case
    """
    return v.replace("_", "-")
