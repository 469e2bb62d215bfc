from tf_aws_handlers.common import logger, error_handler

class ECSService:
    """Service for ECS capacity provider operations"""

    def __init__(self, context):
        """
        Initialize ECS service.

        Args:
            context (ExecutionContext): Execution context providing the ECS client
        """
        self.client = context.client('ecs')

    @error_handler
    def create_capacity_provider(self, name, auto_scaling_group_provider, tags=None):
        """
        Create a capacity provider.

        Args:
            name (str): Capacity provider name
            auto_scaling_group_provider (dict): Expanded autoScalingGroupProvider structure
            tags (list, optional): ECS tags. Omitted from the request when empty,
                the API does not accept an empty list.

        Returns:
            dict: The created capacityProvider structure
        """
        request = {
            'name': name,
            'autoScalingGroupProvider': auto_scaling_group_provider,
        }
        if tags:
            request['tags'] = tags

        logger.info(f"[CAPACITY_PROVIDER_CREATE_REQUEST] Creating capacity provider {name}")
        response = self.client.create_capacity_provider(**request)
        provider = response['capacityProvider']
        logger.info(f"[CAPACITY_PROVIDER_CREATED] Capacity provider created: {provider.get('capacityProviderArn')}")
        return provider

    @error_handler
    def describe_capacity_providers(self, capacity_providers, include_tags=True):
        """
        Get information about capacity providers.

        Args:
            capacity_providers (list): Capacity provider names or ARNs
            include_tags (bool): Whether to return resource tags

        Returns:
            list: capacityProvider structures found
        """
        request = {'capacityProviders': capacity_providers}
        if include_tags:
            request['include'] = ['TAGS']

        logger.info(f"[CAPACITY_PROVIDER_DESCRIBE] Getting information for {capacity_providers}")
        response = self.client.describe_capacity_providers(**request)

        for failure in response.get('failures', []):
            logger.warning(f"[CAPACITY_PROVIDER_DESCRIBE_FAILURE] Reason: {failure.get('reason', 'Unknown')}, ARN: {failure.get('arn', 'Unknown')}")

        return response.get('capacityProviders', [])

    @error_handler
    def tag_resource(self, resource_arn, tags):
        logger.info(f"[TAG_RESOURCE] Tagging {resource_arn} with {[t['key'] for t in tags]}")
        return self.client.tag_resource(resourceArn=resource_arn, tags=tags)

    @error_handler
    def untag_resource(self, resource_arn, tag_keys):
        logger.info(f"[UNTAG_RESOURCE] Removing tags {tag_keys} from {resource_arn}")
        return self.client.untag_resource(resourceArn=resource_arn, tagKeys=tag_keys)
