# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
Route53-related interface definitions.
"""

from zope.interface import Attribute, Interface


class IRoute53Protocol(Interface):
    """
    An L{IRoute53Protocol} provider knows the wire format of one version of
    the Route53 API.  It turns the arguments of each API call into an
    operation (method, path, query, body) and knows how to read the
    response document back.

    Identifiers passed to these methods have already had any I{/hostedzone/}
    or I{/change/} prefix removed and required arguments have already been
    checked.
    """
    version = Attribute(
        "The L{route53client.route53.protocol.APIVersion} constant this "
        "provider implements.",
    )
    xmlns = Attribute("The XML namespace of request and response documents.")
    actions = Attribute(
        "The L{route53client.route53.model.ChangeAction} constants this "
        "version supports.",
    )

    def check_change(change):
        """
        Reject a change which cannot be expressed in this version.

        @type change: L{route53client.route53.model.Change}

        @raise route53client.exception.UsageError: If the change uses an
            action or record set field this version does not have.
        """

    def list_hosted_zones(marker, max_items):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_ListHostedZones.html

        The operation's result is a
        L{route53client.route53.model.HostedZonePage}.
        """

    def get_hosted_zone(zone_id):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_GetHostedZone.html

        The operation's result is a
        L{route53client.route53.model.HostedZoneDetails}.
        """

    def create_hosted_zone(name, caller_reference, comment):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_CreateHostedZone.html

        The operation's result is a
        L{route53client.route53.model.CreatedHostedZone}.
        """

    def delete_hosted_zone(zone_id):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_DeleteHostedZone.html

        The operation's result is a
        L{route53client.route53.model.ChangeInfo}.
        """

    def list_resource_record_sets(zone_id, name, type, identifier, max_items):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_ListResourceRecordSets.html

        The operation's result is a
        L{route53client.route53.model.ResourceRecordSetPage}.
        """

    def change_resource_record_sets(zone_id, batch):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_ChangeResourceRecordSets.html

        @type batch: L{route53client.route53.model.ChangeBatch}

        The operation's result is a
        L{route53client.route53.model.ChangeInfo}.
        """

    def get_change(change_id):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_GetChange.html

        The operation's result is a
        L{route53client.route53.model.ChangeInfo}.
        """
