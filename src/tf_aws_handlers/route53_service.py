from tf_aws_handlers.common import logger, error_handler

NO_SUCH_HOSTED_ZONE = 'NoSuchHostedZone'
AUTHORIZATION_NOT_FOUND = 'VPCAssociationAuthorizationNotFound'

class Route53Service:
    """Service for Route 53 VPC association authorization operations"""

    def __init__(self, context):
        """
        Initialize Route 53 service.

        Args:
            context (ExecutionContext): Execution context providing the Route 53 client
        """
        self.client = context.client('route53')

    @error_handler
    def create_vpc_association_authorization(self, zone_id, vpc_id, vpc_region):
        """
        Authorize a VPC to be associated with a private hosted zone.

        Args:
            zone_id (str): Hosted zone id
            vpc_id (str): VPC id
            vpc_region (str): Region of the VPC

        Returns:
            dict: Response from create_vpc_association_authorization API
        """
        logger.info(f"[AUTHORIZATION_CREATE_REQUEST] Authorizing VPC {vpc_id} ({vpc_region}) for hosted zone {zone_id}")
        response = self.client.create_vpc_association_authorization(
            HostedZoneId=zone_id,
            VPC={
                'VPCRegion': vpc_region,
                'VPCId': vpc_id
            }
        )
        logger.info(f"[AUTHORIZATION_CREATED] VPC {vpc_id} authorized for hosted zone {zone_id}")
        return response

    @error_handler(expected_codes=(NO_SUCH_HOSTED_ZONE,))
    def list_vpc_association_authorizations(self, request):
        """
        List the VPCs authorized for a hosted zone.

        Only the first page is returned, NextToken is not followed.

        Args:
            request (dict): list_vpc_association_authorizations parameters

        Returns:
            list: VPC structures ({'VPCId': ..., 'VPCRegion': ...})
        """
        logger.info(f"[AUTHORIZATION_LIST] Listing VPC association authorizations for hosted zone {request.get('HostedZoneId')}")
        response = self.client.list_vpc_association_authorizations(**request)
        vpcs = response.get('VPCs', [])
        logger.info(f"[AUTHORIZATION_LIST_SUCCESS] Found {len(vpcs)} authorized VPCs")
        return vpcs

    @error_handler(expected_codes=(NO_SUCH_HOSTED_ZONE, AUTHORIZATION_NOT_FOUND))
    def delete_vpc_association_authorization(self, zone_id, vpc_id, vpc_region):
        """
        Remove the authorization of a VPC for a private hosted zone.

        Args:
            zone_id (str): Hosted zone id
            vpc_id (str): VPC id
            vpc_region (str): Region of the VPC

        Returns:
            dict: Response from delete_vpc_association_authorization API
        """
        logger.info(f"[AUTHORIZATION_DELETE_REQUEST] Deauthorizing VPC {vpc_id} ({vpc_region}) for hosted zone {zone_id}")
        response = self.client.delete_vpc_association_authorization(
            HostedZoneId=zone_id,
            VPC={
                'VPCRegion': vpc_region,
                'VPCId': vpc_id
            }
        )
        logger.info(f"[AUTHORIZATION_DELETED] VPC {vpc_id} deauthorized for hosted zone {zone_id}")
        return response
