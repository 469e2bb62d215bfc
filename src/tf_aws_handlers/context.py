import boto3
from tf_aws_handlers.common import logger, error_handler


class ExecutionContext:
    """
    Per-call AWS context handed to every resource handler.

    Carries the region, partition and account id of the caller together with
    the API clients the handlers use. Clients may be injected (tests) or are
    created lazily from the boto3 session.
    """

    def __init__(self, region, partition='aws', account_id='', session=None, clients=None,
                 ignore_tag_prefix='aws:'):
        """
        Initialize execution context.

        Args:
            region (str): Default AWS region of the caller
            partition (str): AWS partition (aws, aws-cn, aws-us-gov, ...)
            account_id (str): AWS account id of the caller
            session (boto3.session.Session, optional): Session used to create clients
            clients (dict, optional): Pre-built clients keyed by service name
            ignore_tag_prefix (str): Tag key prefix reserved for AWS
        """
        self.region = region
        self.partition = partition
        self.account_id = account_id
        self.session = session
        self.ignore_tag_prefix = ignore_tag_prefix
        self._clients = dict(clients or {})

    def client(self, service_name):
        """
        Get the API client for a service.

        Args:
            service_name (str): boto3 service name, e.g. 'ecs'

        Returns:
            botocore.client.BaseClient: Client bound to the context region
        """
        if service_name not in self._clients:
            session = self.session or boto3.session.Session(region_name=self.region)
            self._clients[service_name] = session.client(service_name, region_name=self.region)
        return self._clients[service_name]

    @classmethod
    def from_config(cls, config):
        """
        Build a context from the configuration dictionary.

        Args:
            config (dict): Output of Config.get_config()

        Returns:
            ExecutionContext: Context with region, partition and account resolved
        """
        session = boto3.session.Session(region_name=config.get('AWS_REGION') or None)
        region = config.get('AWS_REGION') or session.region_name
        if not region:
            logger.error("[CONTEXT_ERROR] No AWS region configured")
        partition = config.get('AWS_PARTITION')
        if not partition:
            partition = session.get_partition_for_region(region) if region else 'aws'
        context = cls(
            region=region,
            partition=partition,
            session=session,
            ignore_tag_prefix=config.get('IGNORE_TAG_PREFIX', 'aws:'),
        )
        context.account_id = config.get('AWS_ACCOUNT_ID') or context._caller_account_id()
        logger.info(f"[CONTEXT_READY] Region {region}, partition {partition}, account {context.account_id}")
        return context

    @error_handler
    def _caller_account_id(self):
        response = self.client('sts').get_caller_identity()
        return response['Account']
