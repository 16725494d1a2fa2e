from fnol_claims.schema import ExtractedFields


def with_updates(fields: ExtractedFields, **sections) -> ExtractedFields:
    """
    Copy a claim record, replacing top-level values or nested section values.
    Nested updates are given as dicts: with_updates(f, policy_info={"policy_number": None}).
    Copies skip validation, so values the model would normally reject ("") can be tested.
    """
    update = {}
    for key, value in sections.items():
        current = getattr(fields, key)
        if isinstance(value, dict) and hasattr(current, "model_copy"):
            update[key] = current.model_copy(update=value)
        else:
            update[key] = value
    return fields.model_copy(update=update)
