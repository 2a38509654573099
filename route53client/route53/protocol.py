# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
The Route53 wire format, one strategy per supported API version.

L{_Route53Protocol} implements every operation the way the current API
version (2013-04-01) expresses it.  Older versions subclass it and override
only the pieces of the format which differ.
"""

__all__ = [
    "APIVersion", "DEFAULT_API_VERSION", "get_protocol",
]

import re
from datetime import timezone

import attr

from constantly import Values, ValueConstant

from dateutil.parser import isoparse

from zope.interface import implementer

from route53client.exception import UsageError, UnknownAPIVersion

from ._util import to_xml, children
from .interface import IRoute53Protocol
from .model import (
    ChangeAction, ChangeStatus, Failover,
    HostedZone, DelegationSet, ChangeInfo,
    AliasTarget, ResourceRecordSet,
    HostedZonePage, HostedZoneDetails, CreatedHostedZone,
    ResourceRecordSetPage,
)


class APIVersion(Values):
    """
    The Route53 API versions this library speaks.
    """
    V2011_05_05 = ValueConstant(u"2011-05-05")
    V2013_04_01 = ValueConstant(u"2013-04-01")


DEFAULT_API_VERSION = APIVersion.V2013_04_01


@attr.s(frozen=True)
class _Operation(object):
    """
    Supply the details necessary to make an API call.

    @ivar method: The HTTP method of the operation.
    @type method: L{str}

    @ivar path: The path component of the request URI.
    @type path: L{list} of L{str}

    @ivar query: The query parameters of the request, already sorted by
        name.
    @type query: L{list} of L{tuple} of L{str}

    @ivar body: The serialized request document, or C{b""}.
    @type body: L{bytes}

    @ivar extract_result: A one-argument callable which is passed the parsed
        response document and can extract results and restructure them to be
        returned to application code.
    """
    method = attr.ib()
    path = attr.ib()
    query = attr.ib(default=attr.Factory(list))
    body = attr.ib(default=b"")
    extract_result = attr.ib(default=lambda document: None)

    @property
    def headers(self):
        if self.body:
            return {u"content-type": u"text/xml"}
        return {}


def _query(**arguments):
    """
    Build query arguments from keyword arguments, leaving out those which are
    L{None}.  Arguments are sorted by name so the raw query string is also
    the canonical one.
    """
    return [
        (name, u"{}".format(value))
        for (name, value) in sorted(arguments.items())
        if value is not None
    ]


def _bool(text):
    return {u"true": True, u"false": False}[text.strip().lower()]


def _optional(data, name, convert=None):
    value = data.get(name)
    if value is None or convert is None:
        return value
    return convert(value)


def _timestamp(text):
    instant = isoparse(text)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant


def normalize_version(version):
    """
    Resolve a user-supplied version string to an L{APIVersion}.

    Everything except digits is ignored, so C{"2013-04-01"},
    C{"2013.04.01"} and C{"20130401"} are all the same version.

    @raise UnknownAPIVersion: For anything else.
    """
    if version is None:
        return DEFAULT_API_VERSION
    if isinstance(version, ValueConstant):
        version = version.value
    digits = re.sub(r"[^0-9]", u"", u"{}".format(version))
    for candidate in APIVersion.iterconstants():
        if candidate.value.replace(u"-", u"") == digits:
            return candidate
    raise UnknownAPIVersion("Unknown API version {!r}".format(version))


@implementer(IRoute53Protocol)
class _Route53Protocol(object):
    """
    The shared implementation of L{IRoute53Protocol}, written against the
    2013-04-01 format.
    """
    version = APIVersion.V2013_04_01
    xmlns = u"https://route53.amazonaws.com/doc/2013-04-01/"

    actions = (ChangeAction.CREATE, ChangeAction.DELETE, ChangeAction.UPSERT)

    def __repr__(self):
        return "<{} {}>".format(self.__class__.__name__, self.version.value)

    def _path(self, *segments):
        return [self.version.value] + list(segments)

    def _document(self, root, fields):
        return to_xml(root, fields, xmlns=self.xmlns)

    def check_change(self, change):
        if change.action not in self.actions:
            raise UsageError(
                "Action {} is not supported by API version {}".format(
                    change.action.value, self.version.value,
                ),
            )

    # Requests

    def list_hosted_zones(self, marker=None, max_items=None):
        return _Operation(
            method=u"GET",
            path=self._path(u"hostedzone"),
            query=_query(marker=marker, maxitems=max_items),
            extract_result=self._handle_list_hosted_zones_response,
        )

    def get_hosted_zone(self, zone_id):
        return _Operation(
            method=u"GET",
            path=self._path(u"hostedzone", zone_id),
            extract_result=self._handle_get_hosted_zone_response,
        )

    def create_hosted_zone(self, name, caller_reference, comment=None):
        return _Operation(
            method=u"POST",
            path=self._path(u"hostedzone"),
            body=self._document(u"CreateHostedZoneRequest", (
                (u"Name", name),
                (u"CallerReference", caller_reference),
                (u"HostedZoneConfig", (
                    (u"Comment", comment),
                )),
            )),
            extract_result=self._handle_create_hosted_zone_response,
        )

    def delete_hosted_zone(self, zone_id):
        return _Operation(
            method=u"DELETE",
            path=self._path(u"hostedzone", zone_id),
            extract_result=self._handle_change_info_response,
        )

    def list_resource_record_sets(self, zone_id, name=None, type=None,
                                  identifier=None, max_items=None):
        return _Operation(
            method=u"GET",
            path=self._path(u"hostedzone", zone_id, u"rrset"),
            query=_query(
                name=name,
                type=type,
                identifier=identifier,
                maxitems=max_items,
            ),
            extract_result=self._handle_list_resource_record_sets_response,
        )

    def change_resource_record_sets(self, zone_id, batch):
        return _Operation(
            method=u"POST",
            path=self._path(u"hostedzone", zone_id, u"rrset"),
            body=self._document(u"ChangeResourceRecordSetsRequest", (
                (u"ChangeBatch", (
                    (u"Comment", batch.comment),
                    (u"Changes", tuple(
                        (u"Change", self._change_fields(change))
                        for change in batch.changes
                    )),
                )),
            )),
            extract_result=self._handle_change_info_response,
        )

    def get_change(self, change_id):
        return _Operation(
            method=u"GET",
            path=self._path(u"change", change_id),
            extract_result=self._handle_change_info_response,
        )

    def _change_fields(self, change):
        return (
            (u"Action", change.action.value),
            (u"ResourceRecordSet", self._rrset_fields(change.rrset)),
        )

    def _rrset_fields(self, rrset):
        return (
            (u"Name", rrset.name),
            (u"Type", rrset.type),
            (u"SetIdentifier", rrset.set_identifier),
            (u"Weight", rrset.weight),
            (u"Region", rrset.region),
            (u"Failover", rrset.failover and rrset.failover.value),
            (u"TTL", rrset.ttl),
            (u"ResourceRecords", tuple(
                (u"ResourceRecord", ((u"Value", value),))
                for value in rrset.records
            )),
            (u"AliasTarget", self._alias_target_fields(rrset.alias_target)),
            (u"HealthCheckId", rrset.health_check_id),
        )

    def _alias_target_fields(self, alias_target):
        if alias_target is None:
            return None
        return (
            (u"HostedZoneId", alias_target.hosted_zone_id),
            (u"DNSName", alias_target.dns_name),
            (u"EvaluateTargetHealth", alias_target.evaluate_target_health),
        )

    # Responses

    def _handle_list_hosted_zones_response(self, document):
        return HostedZonePage(
            hosted_zones=list(
                self._hosted_zone_from(zone)
                for zone in children(document.get(u"HostedZones"), u"HostedZone")
            ),
            next_marker=document.get(u"NextMarker"),
            max_items=_optional(document, u"MaxItems", int),
            is_truncated=_optional(document, u"IsTruncated", _bool) or False,
        )

    def _handle_get_hosted_zone_response(self, document):
        return HostedZoneDetails(
            hosted_zone=self._hosted_zone_from(document[u"HostedZone"]),
            delegation_set=self._delegation_set_from(
                document.get(u"DelegationSet"),
            ),
        )

    def _handle_create_hosted_zone_response(self, document):
        return CreatedHostedZone(
            hosted_zone=self._hosted_zone_from(document[u"HostedZone"]),
            change_info=self._change_info_from(document[u"ChangeInfo"]),
            delegation_set=self._delegation_set_from(
                document.get(u"DelegationSet"),
            ),
        )

    def _handle_change_info_response(self, document):
        return self._change_info_from(document[u"ChangeInfo"])

    def _handle_list_resource_record_sets_response(self, document):
        return ResourceRecordSetPage(
            resource_record_sets=list(
                self._rrset_from(rrset)
                for rrset in children(
                    document.get(u"ResourceRecordSets"), u"ResourceRecordSet",
                )
            ),
            next_record_name=document.get(u"NextRecordName"),
            next_record_type=document.get(u"NextRecordType"),
            next_record_identifier=document.get(u"NextRecordIdentifier"),
            max_items=_optional(document, u"MaxItems", int),
            is_truncated=_optional(document, u"IsTruncated", _bool) or False,
        )

    def _hosted_zone_from(self, zone):
        config = zone.get(u"Config") or {}
        return HostedZone(
            id=zone[u"Id"],
            name=zone[u"Name"],
            caller_reference=zone[u"CallerReference"],
            comment=config.get(u"Comment"),
            private_zone=_optional(config, u"PrivateZone", _bool),
            resource_record_set_count=_optional(
                zone, u"ResourceRecordSetCount", int,
            ),
        )

    def _delegation_set_from(self, delegation_set):
        if delegation_set is None:
            return None
        return DelegationSet(
            name_servers=children(
                delegation_set.get(u"NameServers"), u"NameServer",
            ),
        )

    def _change_info_from(self, change_info):
        return ChangeInfo(
            id=change_info[u"Id"],
            status=ChangeStatus.lookupByValue(change_info[u"Status"]),
            submitted_at=_timestamp(change_info[u"SubmittedAt"]),
            comment=change_info.get(u"Comment"),
        )

    def _rrset_from(self, rrset):
        return ResourceRecordSet(
            name=rrset[u"Name"],
            type=rrset[u"Type"],
            ttl=_optional(rrset, u"TTL", int),
            records=list(
                record[u"Value"]
                for record in children(
                    rrset.get(u"ResourceRecords"), u"ResourceRecord",
                )
            ),
            alias_target=self._alias_target_from(rrset.get(u"AliasTarget")),
            set_identifier=rrset.get(u"SetIdentifier"),
            weight=_optional(rrset, u"Weight", int),
            region=rrset.get(u"Region"),
            failover=_optional(rrset, u"Failover", Failover.lookupByValue),
            health_check_id=rrset.get(u"HealthCheckId"),
        )

    def _alias_target_from(self, alias_target):
        if alias_target is None:
            return None
        return AliasTarget(
            hosted_zone_id=alias_target[u"HostedZoneId"],
            dns_name=alias_target[u"DNSName"],
            evaluate_target_health=_optional(
                alias_target, u"EvaluateTargetHealth", _bool,
            ) or False,
        )


class _Route53Protocol20130401(_Route53Protocol):
    """
    API version 2013-04-01.  This is the shared implementation unchanged.
    """


class _Route53Protocol20110505(_Route53Protocol):
    """
    API version 2011-05-05.

    This version predates I{UPSERT}, latency and failover routing, health
    checks and alias target health evaluation.
    """
    version = APIVersion.V2011_05_05
    xmlns = u"https://route53.amazonaws.com/doc/2011-05-05/"

    actions = (ChangeAction.CREATE, ChangeAction.DELETE)

    def check_change(self, change):
        super(_Route53Protocol20110505, self).check_change(change)
        rrset = change.rrset
        for field in (u"region", u"failover", u"health_check_id"):
            if getattr(rrset, field) is not None:
                raise UsageError(
                    "{} is not supported by API version {}".format(
                        field, self.version.value,
                    ),
                )

    def _rrset_fields(self, rrset):
        return (
            (u"Name", rrset.name),
            (u"Type", rrset.type),
            (u"SetIdentifier", rrset.set_identifier),
            (u"Weight", rrset.weight),
            (u"TTL", rrset.ttl),
            (u"ResourceRecords", tuple(
                (u"ResourceRecord", ((u"Value", value),))
                for value in rrset.records
            )),
            (u"AliasTarget", self._alias_target_fields(rrset.alias_target)),
        )

    def _alias_target_fields(self, alias_target):
        if alias_target is None:
            return None
        return (
            (u"HostedZoneId", alias_target.hosted_zone_id),
            (u"DNSName", alias_target.dns_name),
        )


_PROTOCOLS = {
    APIVersion.V2011_05_05: _Route53Protocol20110505,
    APIVersion.V2013_04_01: _Route53Protocol20130401,
}


def get_protocol(version=None):
    """
    Get the wire format strategy for an API version.

    @param version: An L{APIVersion} constant, a version string in any
        punctuation, or L{None} for L{DEFAULT_API_VERSION}.

    @rtype: L{IRoute53Protocol} provider

    @raise UnknownAPIVersion: If C{version} is not supported.
    """
    return _PROTOCOLS[normalize_version(version)]()
