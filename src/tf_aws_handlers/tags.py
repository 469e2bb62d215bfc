from tf_aws_handlers.common import logger


def ignore_aws(tags, prefix='aws:'):
    """
    Drop tags whose keys are reserved for AWS.

    Args:
        tags (dict): Key/value tags
        prefix (str): Reserved key prefix, an empty prefix keeps every tag

    Returns:
        dict: Tags without reserved keys
    """
    if not prefix:
        return dict(tags or {})
    return {k: v for k, v in (tags or {}).items() if not k.startswith(prefix)}


def to_ecs_tags(tags):
    """Convert a key/value map into the ECS [{'key': ..., 'value': ...}] shape."""
    return [{'key': k, 'value': v} for k, v in tags.items()]


def from_ecs_tags(ecs_tags):
    """Convert the ECS tag list shape into a key/value map."""
    return {t['key']: t.get('value', '') for t in ecs_tags or []}


def ecs_update_tags(ecs_service, resource_arn, old_tags, new_tags, prefix='aws:'):
    """
    Apply a tag diff to an ECS resource.

    Removed keys are untagged first, then added or changed keys are tagged.
    Keys with the reserved prefix are ignored on both sides.

    Args:
        ecs_service (ECSService): ECS service instance
        resource_arn (str): ARN of the resource to tag
        old_tags (dict): Tags in prior state
        new_tags (dict): Configured tags
        prefix (str): Reserved key prefix
    """
    old_tags = ignore_aws(old_tags, prefix)
    new_tags = ignore_aws(new_tags, prefix)

    removed = sorted(k for k in old_tags if k not in new_tags)
    updated = {k: v for k, v in new_tags.items() if old_tags.get(k) != v}

    logger.info(f"[TAG_UPDATE] {resource_arn}: {len(removed)} removed, {len(updated)} added or changed")
    if removed:
        ecs_service.untag_resource(resource_arn, removed)
    if updated:
        ecs_service.tag_resource(resource_arn, to_ecs_tags(updated))
