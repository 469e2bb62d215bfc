"""
aws_route53_vpc_association_authorization

Authorizes a VPC (possibly owned by another account) to be associated with a
private hosted zone. Route 53 has no single key for an authorization, so the
stored id is the composite "ZONEID:VPCID", and the only way to find one is to
list every authorization of the zone and scan for the VPC.
"""

from tf_aws_handlers.common import logger
from tf_aws_handlers.errors import AwsApiError, IdentifierFormatError, RequestValidationError, ResourceError
from tf_aws_handlers.result import OUTCOME_CREATED, OUTCOME_DELETED, OUTCOME_READ, OUTCOME_REMOVED
from tf_aws_handlers.route53_service import AUTHORIZATION_NOT_FOUND, NO_SUCH_HOSTED_ZONE, Route53Service
from tf_aws_handlers.schema import TYPE_STRING, Field

TYPE_NAME = 'aws_route53_vpc_association_authorization'

ID_SEPARATOR = ':'

# HostedZoneId constraint of ListVPCAssociationAuthorizations
MAX_ZONE_ID_LENGTH = 32

SCHEMA = {
    'zone_id': Field(TYPE_STRING, required=True, force_new=True),
    'vpc_id': Field(TYPE_STRING, required=True, force_new=True),
    'vpc_region': Field(TYPE_STRING, optional=True, computed=True, force_new=True),
}


def encode_id(zone_id, vpc_id):
    return f"{zone_id}{ID_SEPARATOR}{vpc_id}"


def parse_id(id):
    """
    Split a stored id into hosted zone id and VPC id.

    Args:
        id (str): Identifier in ZONEID:VPCID form

    Returns:
        tuple: (zone_id, vpc_id)

    Raises:
        IdentifierFormatError: Unless the id has exactly two non-empty parts
    """
    parts = id.split(ID_SEPARATOR) if id else []
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise IdentifierFormatError(f"Unexpected format of ID ({id!r}), expected ZONEID:VPCID")
    return parts[0], parts[1]


def validate_list_request(request):
    zone_id = request.get('HostedZoneId')
    if not zone_id:
        raise RequestValidationError('ListVPCAssociationAuthorizations', request, "missing required field HostedZoneId")
    if len(zone_id) > MAX_ZONE_ID_LENGTH:
        raise RequestValidationError(
            'ListVPCAssociationAuthorizations', request,
            f"HostedZoneId must be at most {MAX_ZONE_ID_LENGTH} characters"
        )


def get_vpc_association(route53, zone_id, vpc_id):
    """
    Find the authorization of a VPC for a hosted zone.

    Args:
        route53 (Route53Service): Route 53 service instance
        zone_id (str): Hosted zone id
        vpc_id (str): VPC id to look for

    Returns:
        dict: The matching VPC entry, or None if the VPC is not authorized

    Raises:
        RequestValidationError: If the list request is malformed
        AwsApiError: If the list call fails, including NoSuchHostedZone
    """
    # MaxResults defaults to 50; NextToken is not followed
    request = {'HostedZoneId': zone_id}
    validate_list_request(request)

    for vpc in route53.list_vpc_association_authorizations(request):
        if vpc.get('VPCId') == vpc_id:
            return vpc
    return None


def create(data, context):
    route53 = Route53Service(context)

    zone_id = data.get('zone_id')
    vpc_id = data.get('vpc_id')
    # resource-level region overrides the caller's region
    vpc_region = data.get('vpc_region') or context.region

    logger.info(f"[AUTHORIZATION_CREATE] Creating VPC Association Authorization: zone {zone_id}, VPC {vpc_id}, region {vpc_region}")
    try:
        route53.create_vpc_association_authorization(zone_id, vpc_id, vpc_region)
    except AwsApiError as e:
        raise ResourceError(f"Error creating VPC Association Authorization: {e}") from e

    data.set_id(encode_id(zone_id, vpc_id))

    if read(data, context) == OUTCOME_REMOVED:
        return OUTCOME_REMOVED
    return OUTCOME_CREATED


def read(data, context):
    route53 = Route53Service(context)

    logger.info(f"[AUTHORIZATION_READ] Reading VPC Association Authorization {data.id}")
    zone_id, vpc_id = parse_id(data.id)

    try:
        vpc = get_vpc_association(route53, zone_id, vpc_id)
    except AwsApiError as e:
        if e.is_code(NO_SUCH_HOSTED_ZONE):
            logger.warning(f"[HOSTED_ZONE_NOT_FOUND] Route 53 Hosted Zone ({zone_id}) not found, removing from state")
            data.set_id('')
            return OUTCOME_REMOVED
        raise ResourceError(
            f"error getting Route 53 VPC ({vpc_id}) Association Authorization for Hosted Zone ({zone_id}): {e}",
            data.id
        ) from e

    if vpc is None:
        logger.warning(f"[AUTHORIZATION_NOT_FOUND] Route 53 VPC ({vpc_id}) Association Authorization for Hosted Zone ({zone_id}) not found, removing from state")
        data.set_id('')
        return OUTCOME_REMOVED

    data.set('vpc_id', vpc.get('VPCId', ''))
    data.set('vpc_region', vpc.get('VPCRegion', ''))
    data.set('zone_id', zone_id)
    return OUTCOME_READ


def delete(data, context):
    route53 = Route53Service(context)

    zone_id, vpc_id = parse_id(data.id)
    vpc_region = data.get('vpc_region') or context.region

    logger.info(f"[AUTHORIZATION_DELETE] Deauthorizing Route 53 VPC ({vpc_id}) Association: {zone_id}")
    try:
        route53.delete_vpc_association_authorization(zone_id, vpc_id, vpc_region)
    except AwsApiError as e:
        if not e.is_code(NO_SUCH_HOSTED_ZONE, AUTHORIZATION_NOT_FOUND):
            raise ResourceError(
                f"error deleting Route 53 VPC ({vpc_id}) Association Authorization for Hosted Zone ({zone_id}): {e}",
                data.id
            ) from e
        logger.warning(f"[AUTHORIZATION_ALREADY_DELETED] {data.id} no longer exists ({e.code})")

    data.set_id('')
    return OUTCOME_DELETED
