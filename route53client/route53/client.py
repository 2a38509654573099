# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
A client for Route53.
"""

__all__ = [
    "Route53Error", "Route53Client", "get_route53_client", "make_change",
]

from collections.abc import Mapping

import attr
from attr import validators

from twisted.logger import Logger
from twisted.web import http

from route53client.exception import AWSError, UsageError
from route53client.credentials import AWSCredentials
from route53client.client.base import RequestDetails, url_context, query, error_wrapper
from route53client.client.interface import IHTTPTransport, IRequestSigner
from route53client.client.transport import RequestsTransport
from route53client.client._validators import provides
from route53client.service import (
    REGION_US_EAST_1, ROUTE53_ENDPOINT, ROUTE53_SERVICE, AWSServiceEndpoint,
)
from route53client._auth_v3 import AWS3Signer
from route53client._auth_v4 import AWS4Signer

from ._util import from_xml
from .interface import IRoute53Protocol
from .model import (
    Name, ChangeAction, AliasTarget, ResourceRecordSet, Change, ChangeBatch,
    ErrorInfo,
)
from .protocol import get_protocol


_HOSTED_ZONE_PREFIX = u"/hostedzone/"
_CHANGE_PREFIX = u"/change/"

# find_hosted_zone reads the zone listing this many zones at a time.
_FIND_PAGE_SIZE = 100

_CHANGE_FIELDS = frozenset({
    u"action", u"name", u"type", u"ttl", u"value", u"records",
    u"alias_target", u"set_identifier", u"weight", u"region", u"failover",
    u"health_check_id",
})


def _fallback_error_info(status):
    """
    Describe a failure whose body told us nothing, from its status alone.
    """
    status = int(status)
    reason = http.RESPONSES.get(status)
    return ErrorInfo(
        type=u"HTTP" if status >= 500 else u"Sender",
        code=u"{}".format(status),
        message=reason.decode("ascii") if reason else None,
    )


class Route53Error(AWSError):
    """
    L{Route53Error} is the base exception type for all errors returned from
    the AWS Route53 service.

    Route53 describes failures with an I{ErrorResponse} document holding one
    I{Error} element and a I{RequestId}.
    """
    def _set_400_error(self, tree):
        response = tree.get(u"ErrorResponse")
        if not isinstance(response, dict):
            return
        nodes = response.get(u"Error") or []
        if isinstance(nodes, dict):
            nodes = [nodes]
        for node in nodes:
            # A text-only Error element carries no Type, Code or Message.
            if not isinstance(node, dict):
                continue
            data = self._node_to_dict(node)
            if data:
                self.errors.append(data)

    def _set_500_error(self, tree):
        self._set_request_id(tree)
        self._set_400_error(tree)

    @property
    def error_info(self):
        """
        The first error Route53 reported.

        @rtype: L{ErrorInfo}
        """
        if not self.errors:
            return _fallback_error_info(self.status)
        error = self.errors[0]
        return ErrorInfo(
            type=error.get(u"Type"),
            code=error.get(u"Code"),
            message=error.get(u"Message"),
        )


def _error_info(error):
    """
    Get the L{ErrorInfo} for the result of L{error_wrapper}.
    """
    if isinstance(error, Route53Error):
        return error.error_info
    return _fallback_error_info(error.status)


def _get_signer(signature_version, credentials, transport, endpoint):
    if signature_version == 4:
        return AWS4Signer(
            credentials=credentials,
            region=REGION_US_EAST_1,
            service=ROUTE53_SERVICE,
        )
    if signature_version == 3:
        return AWS3Signer(
            credentials=credentials,
            transport=transport,
            endpoint=endpoint,
        )
    raise UsageError(
        "Unsupported signature version {!r}".format(signature_version),
    )


def get_route53_client(id, key, version=None, transport=None,
                       endpoint=ROUTE53_ENDPOINT, signature_version=4,
                       raise_errors=False, utcnow=None):
    """
    Get a Route53 client.

    @param id: The AWS access key id.
    @param key: The AWS secret key.

    @param version: The API version to speak, as an
        L{route53client.route53.protocol.APIVersion} or a string such as
        C{"2011-05-05"}.  L{None} selects
        L{route53client.route53.protocol.DEFAULT_API_VERSION}.

    @param transport: The L{IHTTPTransport} provider to issue requests with.
        By default a new L{RequestsTransport}.

    @param endpoint: The base URL of the Route53 service.
    @type endpoint: L{str}

    @param signature_version: C{4} to sign with AWS Signature Version 4, or
        C{3} for the older I{AWS3-HTTPS} scheme.

    @param raise_errors: If C{True}, failed operations raise
        L{Route53Error} instead of returning L{None}.

    @param utcnow: A no-argument callable returning the current UTC time.
        Used for request signatures.

    @raise UsageError: If the credentials, version or signature version are
        not acceptable.
    """
    credentials = AWSCredentials(access_key=id, secret_key=key)
    if transport is None:
        transport = RequestsTransport()
    if not isinstance(endpoint, AWSServiceEndpoint):
        endpoint = AWSServiceEndpoint(endpoint)
    return Route53Client(
        protocol=get_protocol(version),
        signer=_get_signer(signature_version, credentials, transport, endpoint),
        transport=transport,
        endpoint=endpoint,
        raise_errors=raise_errors,
        utcnow=utcnow,
    )


def _require(name, value):
    if value is None or value == u"":
        raise UsageError(
            "Required parameter {!r} is not defined".format(name),
        )
    return value


def _strip_prefix(prefix, identifier):
    if identifier.startswith(prefix):
        return identifier[len(prefix):]
    return identifier


def _alias_target(value):
    if value is None or isinstance(value, AliasTarget):
        return value
    if isinstance(value, Mapping):
        try:
            return AliasTarget(**value)
        except TypeError as e:
            raise UsageError("Bad alias_target {!r}: {}".format(value, e))
    raise UsageError("Bad alias_target {!r}".format(value))


def _action(value):
    try:
        return ChangeAction.lookupByValue(u"{}".format(value).upper())
    except ValueError:
        raise UsageError("Unknown change action {!r}".format(value))


def make_change(fields):
    """
    Build a L{Change} from a mapping of change fields.

    The fields are C{action} (case-insensitive), C{name}, C{type}, C{ttl},
    C{records} or C{value} (a single record value), C{alias_target} (an
    L{AliasTarget} or a mapping of its attributes), C{set_identifier},
    C{weight}, C{region}, C{failover} and C{health_check_id}.

    @raise UsageError: If a field is unknown or a required field is missing.
    """
    unknown = set(fields) - _CHANGE_FIELDS
    if unknown:
        raise UsageError(
            "Unknown change fields: {}".format(u", ".join(sorted(unknown))),
        )
    action = _action(_require(u"action", fields.get(u"action")))
    name = _require(u"name", fields.get(u"name"))
    type = _require(u"type", fields.get(u"type"))

    records = fields.get(u"records")
    value = fields.get(u"value")
    alias_target = _alias_target(fields.get(u"alias_target"))
    if records is None and value is not None:
        records = [value]
    if records is None and alias_target is None:
        raise UsageError(
            "Required parameter 'records' or 'value' is not defined",
        )
    if isinstance(records, str):
        raise UsageError("'records' must be a list, got {!r}".format(records))

    try:
        rrset = ResourceRecordSet(
            name=name,
            type=type,
            ttl=fields.get(u"ttl"),
            records=records or (),
            alias_target=alias_target,
            set_identifier=fields.get(u"set_identifier"),
            weight=fields.get(u"weight"),
            region=fields.get(u"region"),
            failover=fields.get(u"failover"),
            health_check_id=fields.get(u"health_check_id"),
        )
    except (TypeError, ValueError) as e:
        raise UsageError("Bad change {!r}: {}".format(dict(fields), e))
    return Change(action=action, rrset=rrset)


@attr.s
class Route53Client(object):
    """
    @ivar protocol: The wire format of the API version in use.
    @type protocol: L{IRoute53Protocol} provider

    @ivar signer: Authenticates each request.
    @type signer: L{IRequestSigner} provider

    @ivar transport: Issues HTTP requests.
    @type transport: L{IHTTPTransport} provider

    @ivar endpoint: The AWS service endpoint to which to issue requests.
    @type endpoint: L{AWSServiceEndpoint}

    @ivar raise_errors: Raise L{Route53Error} from failed operations rather
        than returning L{None}.
    @type raise_errors: L{bool}

    @ivar utcnow: Supplies the time requests are signed with, or L{None}
        for the system clock.
    """
    _log = Logger()

    protocol = attr.ib(validator=provides(IRoute53Protocol))
    signer = attr.ib(validator=provides(IRequestSigner))
    transport = attr.ib(validator=provides(IHTTPTransport))
    endpoint = attr.ib(validator=validators.instance_of(AWSServiceEndpoint))
    raise_errors = attr.ib(default=False, validator=validators.instance_of(bool))
    utcnow = attr.ib(default=None)
    _error = attr.ib(default=attr.Factory(ErrorInfo), init=False, repr=False)

    @property
    def version(self):
        return self.protocol.version

    def error(self):
        """
        Get the details of the most recent failed operation.

        @return: An empty L{ErrorInfo} if no operation has failed yet.
        @rtype: L{ErrorInfo}
        """
        return self._error

    def _details(self, op):
        # Operation paths are relative to any path the endpoint carries.
        prefix = [
            segment for segment in self.endpoint.path.split(u"/") if segment
        ]
        return RequestDetails(
            method=op.method,
            url_context=url_context(
                scheme=self.endpoint.scheme,
                host=self.endpoint.host,
                port=self.endpoint.port,
                path=prefix + list(op.path),
                query=op.query,
            ),
            headers=op.headers,
            body=op.body,
        )

    def _op(self, op):
        q = query(signer=self.signer, details=self._details(op))
        response = q.submit(self.transport, utcnow=self.utcnow)
        if not response.success:
            return self._failed(op, response)
        return op.extract_result(from_xml(response.content))

    def _failed(self, op, response):
        error = error_wrapper(response, Route53Error)
        self._error = _error_info(error)
        self._log.warn(
            u"Route53 {method} /{path} failed: {status} {code} {message}",
            method=op.method,
            path=u"/".join(op.path),
            status=response.status,
            code=self._error.code,
            message=self._error.message,
        )
        if self.raise_errors:
            raise error
        return None

    def list_hosted_zones(self, marker=None, max_items=None):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_ListHostedZones.html

        @param marker: The id of the first zone to list, with or without its
            I{/hostedzone/} prefix.
        @param max_items: The largest number of zones to return.

        @return: A L{HostedZonePage}, or L{None} on failure.
        """
        if marker is not None:
            marker = _strip_prefix(_HOSTED_ZONE_PREFIX, marker)
        return self._op(
            self.protocol.list_hosted_zones(marker=marker, max_items=max_items),
        )

    def get_hosted_zone(self, zone_id):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_GetHostedZone.html

        @return: A L{HostedZoneDetails}, or L{None} on failure.
        """
        return self._op(self.protocol.get_hosted_zone(self._zone_id(zone_id)))

    def find_hosted_zone(self, name):
        """
        Find the hosted zone with exactly the given name.

        The zone listing is read a page at a time until the zone turns up or
        a page comes back short, which means it was the last one.

        @param name: The zone name.  A trailing dot is added if it is
            missing.

        @return: The L{HostedZone}, or L{None} if there is no such zone or a
            listing request failed.
        """
        name = Name(_require(u"name", name)).text
        marker = None
        while True:
            self._log.debug(
                u"Listing hosted zones from {marker} looking for {name}",
                marker=marker,
                name=name,
            )
            page = self.list_hosted_zones(
                marker=marker, max_items=_FIND_PAGE_SIZE,
            )
            if page is None:
                return None
            for zone in page.hosted_zones:
                if zone.name == name:
                    return zone
            if len(page.hosted_zones) < _FIND_PAGE_SIZE:
                return None
            marker = _strip_prefix(
                _HOSTED_ZONE_PREFIX, page.hosted_zones[-1].id,
            )

    def create_hosted_zone(self, name, caller_reference, comment=None):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_CreateHostedZone.html

        @param name: The zone name.  A trailing dot is added if it is
            missing.
        @param caller_reference: A string which is unique to this request.

        @return: A L{CreatedHostedZone}, or L{None} on failure.
        """
        name = Name(_require(u"name", name)).text
        caller_reference = _require(u"caller_reference", caller_reference)
        return self._op(
            self.protocol.create_hosted_zone(
                name=name,
                caller_reference=caller_reference,
                comment=comment,
            ),
        )

    def delete_hosted_zone(self, zone_id):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_DeleteHostedZone.html

        @return: The L{ChangeInfo} of the deletion, or L{None} on failure.
        """
        return self._op(
            self.protocol.delete_hosted_zone(self._zone_id(zone_id)),
        )

    def list_resource_record_sets(self, zone_id, name=None, type=None,
                                  identifier=None, max_items=None):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_ListResourceRecordSets.html

        @param name: List starting from this record name.
        @param type: List starting from this record type.  Requires
            C{name}.
        @param identifier: List starting from this set identifier.  Requires
            C{name} and C{type}.
        @param max_items: The largest number of record sets to return.

        @return: A L{ResourceRecordSetPage}, or L{None} on failure.
        """
        return self._op(
            self.protocol.list_resource_record_sets(
                zone_id=self._zone_id(zone_id),
                name=name,
                type=type,
                identifier=identifier,
                max_items=max_items,
            ),
        )

    def change_resource_record_sets(self, zone_id, changes=None, comment=None,
                                    **change):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_ChangeResourceRecordSets.html

        Either pass C{changes}, or pass the fields of a single change as
        keyword arguments (see L{make_change}).

        @param changes: The changes to make, in order.  Each is a L{Change}
            or a mapping of change fields.

        @param comment: A comment for the change batch.

        @return: The L{ChangeInfo} of the batch, or L{None} on failure.
        """
        zone_id = self._zone_id(zone_id)
        if changes is None:
            if not change:
                raise UsageError(
                    "Required parameter 'changes' is not defined",
                )
            changes = [change]
        elif change:
            raise UsageError(
                "Pass either 'changes' or the fields of one change, not both",
            )
        if not changes:
            raise UsageError("Required parameter 'changes' is empty")

        batch = ChangeBatch(
            changes=[
                c if isinstance(c, Change) else make_change(c)
                for c in changes
            ],
            comment=comment,
        )
        for c in batch.changes:
            self.protocol.check_change(c)
        return self._op(
            self.protocol.change_resource_record_sets(zone_id, batch),
        )

    def get_change(self, change_id):
        """
        http://docs.aws.amazon.com/Route53/latest/APIReference/API_GetChange.html

        @param change_id: The change id, with or without its I{/change/}
            prefix.

        @return: A L{ChangeInfo}, or L{None} on failure.
        """
        change_id = _strip_prefix(
            _CHANGE_PREFIX, _require(u"change_id", change_id),
        )
        return self._op(self.protocol.get_change(change_id))

    def _zone_id(self, zone_id):
        return _strip_prefix(
            _HOSTED_ZONE_PREFIX, _require(u"zone_id", zone_id),
        )
