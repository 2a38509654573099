# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
Tests for L{route53client.route53.client}.
"""

from datetime import datetime, timezone

from twisted.logger import LogLevel, globalLogPublisher
from twisted.trial.unittest import TestCase
from twisted.web.http import BAD_REQUEST, NOT_FOUND

from route53client.exception import (
    UsageError, UnknownAPIVersion, CredentialsNotFoundError,
)
from route53client.route53.client import (
    Route53Error, get_route53_client, make_change,
)
from route53client.route53.model import (
    ChangeAction, ChangeStatus, AliasTarget, ResourceRecordSet, Change,
    ErrorInfo, HostedZone, create_rrset, to_data,
)
from route53client.route53.protocol import APIVersion
from route53client.testing.transport import MemoryTransport


_XMLNS = u"https://route53.amazonaws.com/doc/2013-04-01/"

_ERROR = (
    b"<ErrorResponse><Error><Type>Sender</Type><Code>InvalidInput</Code>"
    b"<Message>Bad zone name</Message></Error>"
    b"<RequestId>5b0a5a4d-0000-4000-8000-000000000000</RequestId>"
    b"</ErrorResponse>"
)

_NO_SUCH_ZONE = (
    b"<ErrorResponse><Error><Type>Sender</Type><Code>NoSuchHostedZone</Code>"
    b"<Message>No hosted zone found with ID: Z9</Message></Error>"
    b"<RequestId>5b0a5a4d-0000-4000-8000-000000000001</RequestId>"
    b"</ErrorResponse>"
)

_CHANGE_INFO = (
    u"<ChangeInfo><Id>/change/C1</Id><Status>PENDING</Status>"
    u"<SubmittedAt>2017-03-01T12:30:15.000Z</SubmittedAt></ChangeInfo>"
)


def _zone_xml(number, name):
    return (
        u"<HostedZone><Id>/hostedzone/Z{:03d}</Id><Name>{}</Name>"
        u"<CallerReference>ref{}</CallerReference><Config/>"
        u"<ResourceRecordSetCount>2</ResourceRecordSetCount></HostedZone>"
    ).format(number, name, number)


def _zone_page(zones, next_marker=None):
    """
    Render a I{ListHostedZonesResponse} holding the given C{(number, name)}
    zones.
    """
    if next_marker is None:
        truncated = u"<IsTruncated>false</IsTruncated>"
    else:
        truncated = (
            u"<IsTruncated>true</IsTruncated>"
            u"<NextMarker>{}</NextMarker>".format(next_marker)
        )
    return (
        u'<ListHostedZonesResponse xmlns="{}"><HostedZones>{}</HostedZones>'
        u"<Marker/>{}<MaxItems>100</MaxItems></ListHostedZonesResponse>"
    ).format(
        _XMLNS,
        u"".join(_zone_xml(number, name) for (number, name) in zones),
        truncated,
    ).encode("utf-8")


def _change_response(root=u"ChangeResourceRecordSetsResponse"):
    return u'<{root} xmlns="{}">{}</{root}>'.format(
        _XMLNS, _CHANGE_INFO, root=root,
    ).encode("utf-8")


class _ClientMixin(object):
    def setUp(self):
        self.transport = MemoryTransport()
        self.instant = datetime(2017, 3, 1, 12, 30, 15, tzinfo=timezone.utc)
        self.client = self.get_client()

    def get_client(self, **kwargs):
        kwargs.setdefault(u"transport", self.transport)
        kwargs.setdefault(u"utcnow", lambda: self.instant)
        return get_route53_client(u"AKIDEXAMPLE", u"secret", **kwargs)

    def sent(self):
        """
        Get the single request issued so far.
        """
        [request] = self.transport.requests
        return request


class GetRoute53ClientTests(_ClientMixin, TestCase):
    """
    Tests for L{get_route53_client}.
    """
    def test_default_version(self):
        self.assertIs(APIVersion.V2013_04_01, self.client.version)

    def test_version(self):
        """
        The version may be given in any punctuation.
        """
        client = self.get_client(version=u"2011.05.05")
        self.assertIs(APIVersion.V2011_05_05, client.version)

    def test_unknown_version(self):
        self.assertRaises(
            UnknownAPIVersion, self.get_client, version=u"2010-10-01",
        )

    def test_signature_version(self):
        self.assertRaises(UsageError, self.get_client, signature_version=2)

    def test_credentials(self):
        """
        Both halves of the credentials are required.
        """
        self.assertRaises(
            CredentialsNotFoundError,
            get_route53_client, u"AKIDEXAMPLE", u"", transport=self.transport,
        )
        self.assertRaises(
            CredentialsNotFoundError,
            get_route53_client, None, u"secret", transport=self.transport,
        )

    def test_endpoint(self):
        """
        Requests go to the configured endpoint.
        """
        client = self.get_client(endpoint=u"http://localhost:8080/")
        self.transport.respond(content=_change_response(u"GetChangeResponse"))
        client.get_change(u"C1")
        self.assertEqual(
            u"http://localhost:8080/2013-04-01/change/C1", self.sent().url,
        )
        self.assertEqual(u"localhost:8080", self.sent().headers[u"host"])

    def test_endpoint_path(self):
        """
        Operation paths are appended to any path the endpoint carries.
        """
        client = self.get_client(endpoint=u"http://localhost:4566/route53/")
        self.transport.respond(content=_change_response(u"GetChangeResponse"))
        client.get_change(u"C1")
        self.assertEqual(
            u"http://localhost:4566/route53/2013-04-01/change/C1",
            self.sent().url,
        )

    def test_signature_v4(self):
        """
        Requests are signed with AWS Signature Version 4 by default.
        """
        self.transport.respond(content=_change_response(u"GetChangeResponse"))
        self.client.get_change(u"C1")
        headers = self.sent().headers
        self.assertEqual(u"20170301T123015Z", headers[u"x-amz-date"])
        self.assertTrue(
            headers[u"authorization"].startswith(
                u"AWS4-HMAC-SHA256 "
                u"Credential=AKIDEXAMPLE/20170301/us-east-1/route53/"
                u"aws4_request, SignedHeaders=host;x-amz-date, Signature=",
            ),
            headers[u"authorization"],
        )

    def test_signature_v3(self):
        """
        With signature version 3 the service's clock is read first and the
        request carries an I{X-Amzn-Authorization} header.
        """
        client = self.get_client(signature_version=3)
        self.transport.respond(
            headers={u"Date": u"Wed, 01 Mar 2017 12:30:16 GMT"},
        )
        self.transport.respond(content=_change_response(u"GetChangeResponse"))
        client.get_change(u"C1")
        date_request, request = self.transport.requests
        self.assertEqual(u"/date", date_request.path)
        self.assertEqual(
            u"Wed, 01 Mar 2017 12:30:16 GMT", request.headers[u"date"],
        )
        self.assertTrue(
            request.headers[u"x-amzn-authorization"].startswith(
                u"AWS3-HTTPS AWSAccessKeyId=AKIDEXAMPLE,",
            ),
        )


class HostedZoneTests(_ClientMixin, TestCase):
    """
    Tests for the hosted zone operations of L{Route53Client}.
    """
    def test_create_hosted_zone(self):
        """
        The zone name gets a trailing dot and the request document lists its
        elements in the order Route53 requires.
        """
        self.transport.respond(
            status=201,
            content=(
                u'<CreateHostedZoneResponse xmlns="{}">{}{}<DelegationSet>'
                u"<NameServers><NameServer>ns-1.awsdns-01.com</NameServer>"
                u"<NameServer>ns-2.awsdns-02.net</NameServer></NameServers>"
                u"</DelegationSet></CreateHostedZoneResponse>"
            ).format(
                _XMLNS, _zone_xml(1, u"example.com."), _CHANGE_INFO,
            ).encode("utf-8"),
        )
        created = self.client.create_hosted_zone(
            name=u"example.com", caller_reference=u"ref1",
        )
        request = self.sent()
        self.assertEqual(
            (u"POST", u"/2013-04-01/hostedzone"),
            (request.method, request.path),
        )
        self.assertEqual(u"text/xml", request.headers[u"content-type"])
        self.assertEqual(
            b'<?xml version="1.0" encoding="UTF-8"?>\n'
            b'<CreateHostedZoneRequest xmlns="https://route53.amazonaws.com/'
            b'doc/2013-04-01/"><Name>example.com.</Name>'
            b'<CallerReference>ref1</CallerReference>'
            b'</CreateHostedZoneRequest>',
            request.body,
        )
        self.assertEqual(u"/hostedzone/Z001", created.hosted_zone.id)
        self.assertEqual(ChangeStatus.PENDING, created.change_info.status)
        self.assertEqual(
            (u"ns-1.awsdns-01.com", u"ns-2.awsdns-02.net"),
            created.delegation_set.name_servers,
        )

    def test_create_hosted_zone_required(self):
        """
        The zone name and caller reference are required.
        """
        self.assertRaises(
            UsageError,
            self.client.create_hosted_zone, name=None, caller_reference=u"r",
        )
        self.assertRaises(
            UsageError,
            self.client.create_hosted_zone,
            name=u"example.com.", caller_reference=u"",
        )
        self.assertEqual([], self.transport.requests)

    def test_get_hosted_zone(self):
        """
        A I{/hostedzone/} prefix is removed from the zone id.
        """
        self.transport.respond(
            content=(
                u'<GetHostedZoneResponse xmlns="{}">{}</GetHostedZoneResponse>'
            ).format(_XMLNS, _zone_xml(1, u"example.com.")).encode("utf-8"),
        )
        details = self.client.get_hosted_zone(u"/hostedzone/Z001")
        self.assertEqual(u"/2013-04-01/hostedzone/Z001", self.sent().path)
        self.assertEqual(u"example.com.", details.hosted_zone.name)
        self.assertIs(None, details.delegation_set)

    def test_delete_hosted_zone(self):
        self.transport.respond(
            content=_change_response(u"DeleteHostedZoneResponse"),
        )
        info = self.client.delete_hosted_zone(u"Z001")
        self.assertEqual(
            (u"DELETE", u"/2013-04-01/hostedzone/Z001", b""),
            (self.sent().method, self.sent().path, self.sent().body),
        )
        self.assertEqual(u"/change/C1", info.id)

    def test_zone_id_required(self):
        """
        Operations on a zone require its id.
        """
        for operation in (
            self.client.get_hosted_zone,
            self.client.delete_hosted_zone,
            self.client.list_resource_record_sets,
        ):
            self.assertRaises(UsageError, operation, None)
            self.assertRaises(UsageError, operation, u"")
        self.assertEqual([], self.transport.requests)

    def test_list_hosted_zones(self):
        """
        A truncated listing reports the marker of the next page.
        """
        self.transport.respond(
            content=_zone_page(
                [(1, u"a.example.com."), (2, u"b.example.com.")],
                next_marker=u"Z003",
            ),
        )
        page = self.client.list_hosted_zones(
            marker=u"/hostedzone/Z001", max_items=2,
        )
        self.assertEqual(u"marker=Z001&maxitems=2", self.sent().query)
        self.assertEqual(
            [u"a.example.com.", u"b.example.com."],
            [zone.name for zone in page.hosted_zones],
        )
        self.assertEqual(u"Z003", page.next_marker)
        self.assertTrue(page.is_truncated)

    def test_list_hosted_zones_last_page(self):
        """
        The last page has no next marker at all.
        """
        self.transport.respond(content=_zone_page([(1, u"a.example.com.")]))
        page = self.client.list_hosted_zones()
        self.assertEqual(u"", self.sent().query)
        self.assertIs(None, page.next_marker)
        self.assertNotIn(u"next_marker", to_data(page))
        self.assertFalse(page.is_truncated)


class FindHostedZoneTests(_ClientMixin, TestCase):
    """
    Tests for L{Route53Client.find_hosted_zone}.
    """
    def _full_page(self):
        return _zone_page(
            list((n, u"zone{}.example.com.".format(n)) for n in range(100)),
        )

    def test_first_page(self):
        """
        A zone on the first page is found with one request, whether or not
        the name has a trailing dot.
        """
        self.transport.respond(
            content=_zone_page([(1, u"a.example.com."), (2, u"b.example.com.")]),
        )
        zone = self.client.find_hosted_zone(u"b.example.com")
        self.assertEqual(u"/hostedzone/Z002", zone.id)
        self.assertEqual(u"maxitems=100", self.sent().query)

    def test_paging(self):
        """
        Following pages are requested with the last zone id of the previous
        page as the marker.
        """
        self.transport.respond(content=self._full_page())
        self.transport.respond(content=_zone_page([(100, u"target.example.com.")]))
        zone = self.client.find_hosted_zone(u"target.example.com.")
        self.assertEqual(
            HostedZone(
                id=u"/hostedzone/Z100",
                name=u"target.example.com.",
                caller_reference=u"ref100",
                resource_record_set_count=2,
            ),
            zone,
        )
        self.assertEqual(
            [u"maxitems=100", u"marker=Z099&maxitems=100"],
            [request.query for request in self.transport.requests],
        )

    def test_not_found(self):
        """
        A short page ends the search.
        """
        self.transport.respond(content=self._full_page())
        self.transport.respond(content=_zone_page([]))
        self.assertIs(None, self.client.find_hosted_zone(u"missing.example.com."))
        self.assertEqual(2, len(self.transport.requests))

    def test_exact_name(self):
        """
        Only an exact name matches.
        """
        self.transport.respond(content=_zone_page([(1, u"www.example.com.")]))
        self.assertIs(None, self.client.find_hosted_zone(u"example.com"))

    def test_failure(self):
        """
        If a page cannot be listed, nothing is found and the error is kept.
        """
        self.transport.respond(status=500)
        self.assertIs(None, self.client.find_hosted_zone(u"example.com."))
        self.assertEqual(
            ErrorInfo(
                type=u"HTTP", code=u"500", message=u"Internal Server Error",
            ),
            self.client.error(),
        )

    def test_logged(self):
        events = []
        globalLogPublisher.addObserver(events.append)
        self.addCleanup(globalLogPublisher.removeObserver, events.append)

        self.transport.respond(content=_zone_page([]))
        self.client.find_hosted_zone(u"example.com")
        [event] = list(
            e for e in events if e.get(u"name") == u"example.com."
        )
        self.assertEqual(LogLevel.debug, event[u"log_level"])


class ResourceRecordSetTests(_ClientMixin, TestCase):
    """
    Tests for the resource record set operations of L{Route53Client}.
    """
    def test_list(self):
        """
        The listing cursor is passed as sorted query arguments.
        """
        self.transport.respond(
            content=(
                u'<ListResourceRecordSetsResponse xmlns="{}">'
                u"<ResourceRecordSets><ResourceRecordSet>"
                u"<Name>www.example.com.</Name><Type>A</Type><TTL>60</TTL>"
                u"<ResourceRecords><ResourceRecord><Value>10.0.0.1</Value>"
                u"</ResourceRecord></ResourceRecords></ResourceRecordSet>"
                u"</ResourceRecordSets><IsTruncated>false</IsTruncated>"
                u"<MaxItems>1</MaxItems></ListResourceRecordSetsResponse>"
            ).format(_XMLNS).encode("utf-8"),
        )
        page = self.client.list_resource_record_sets(
            u"/hostedzone/Z1", name=u"www.example.com.", type=u"A",
            max_items=1,
        )
        self.assertEqual(u"/2013-04-01/hostedzone/Z1/rrset", self.sent().path)
        self.assertEqual(
            u"maxitems=1&name=www.example.com.&type=A", self.sent().query,
        )
        self.assertEqual(
            (ResourceRecordSet(
                name=u"www.example.com.", type=u"A", ttl=60,
                records=[u"10.0.0.1"],
            ),),
            page.resource_record_sets,
        )
        self.assertEqual(
            {u"resource_record_sets", u"max_items", u"is_truncated"},
            set(to_data(page)),
        )

    def _change(self, client=None, **kwargs):
        """
        Submit a change and return the request document sent for it.
        """
        transport = MemoryTransport().respond(content=_change_response())
        if client is None:
            client = self.get_client(transport=transport)
        info = client.change_resource_record_sets(u"Z1", **kwargs)
        self.assertEqual(ChangeStatus.PENDING, info.status)
        [request] = transport.requests
        self.assertEqual(
            (u"POST", u"/2013-04-01/hostedzone/Z1/rrset"),
            (request.method, request.path),
        )
        return request.body

    def test_shorthand(self):
        """
        The fields of a single change may be passed directly as keyword
        arguments, with C{value} standing for a one-element C{records} list.
        """
        expected = self._change(
            changes=[create_rrset(ResourceRecordSet(
                name=u"www.example.com.", type=u"A", ttl=300,
                records=[u"10.0.0.1"],
            ))],
        )
        self.assertEqual(
            expected,
            self._change(
                action=u"create", name=u"www.example.com.", type=u"A",
                ttl=300, value=u"10.0.0.1",
            ),
        )
        self.assertEqual(
            expected,
            self._change(changes=[{
                u"action": u"CREATE",
                u"name": u"www.example.com.",
                u"type": u"A",
                u"ttl": 300,
                u"records": [u"10.0.0.1"],
            }]),
        )

    def test_order(self):
        """
        Changes are sent in the order they are given along with the comment.
        """
        body = self._change(
            changes=[
                {u"action": u"delete", u"name": u"b.example.com.",
                 u"type": u"A", u"ttl": 60, u"value": u"10.0.0.2"},
                {u"action": u"create", u"name": u"a.example.com.",
                 u"type": u"A", u"ttl": 60, u"value": u"10.0.0.1"},
            ],
            comment=u"swap",
        )
        self.assertIn(
            b"<ChangeBatch><Comment>swap</Comment><Changes><Change>"
            b"<Action>DELETE</Action><ResourceRecordSet>"
            b"<Name>b.example.com.</Name>",
            body,
        )
        self.assertLess(body.index(b"b.example.com."), body.index(b"a.example.com."))

    def test_usage_errors(self):
        """
        Incomplete or contradictory change arguments are rejected before
        anything is sent.
        """
        change = dict(
            action=u"CREATE", name=u"www.example.com.", type=u"A", ttl=60,
            value=u"10.0.0.1",
        )
        cases = [
            dict(),
            dict(changes=[]),
            dict(changes=[change], **change),
            dict(change, action=None),
            dict(change, action=u"REPLACE"),
            dict(change, name=None),
            dict(change, type=u""),
            dict(change, value=None),
            dict(change, value=None, records=u"10.0.0.1"),
            dict(change, colour=u"blue"),
            dict(change, alias_target={u"dns_name": u"x."}),
        ]
        for kwargs in cases:
            self.assertRaises(
                UsageError,
                self.client.change_resource_record_sets, u"Z1", **kwargs
            )
        self.assertRaises(
            UsageError,
            self.client.change_resource_record_sets, None, **change
        )
        self.assertEqual([], self.transport.requests)

    def test_unsupported_action(self):
        """
        I{UPSERT} is refused when speaking the 2011-05-05 API.
        """
        client = self.get_client(version=APIVersion.V2011_05_05)
        self.assertRaises(
            UsageError,
            client.change_resource_record_sets,
            u"Z1", action=u"UPSERT", name=u"www.example.com.", type=u"A",
            ttl=60, value=u"10.0.0.1",
        )
        self.assertEqual([], self.transport.requests)

    def test_get_change(self):
        """
        A I{/change/} prefix is removed from the change id.
        """
        self.transport.respond(content=_change_response(u"GetChangeResponse"))
        info = self.client.get_change(u"/change/C1")
        self.assertEqual(u"/2013-04-01/change/C1", self.sent().path)
        self.assertEqual(u"/change/C1", info.id)
        self.assertRaises(UsageError, self.client.get_change, None)


class MakeChangeTests(TestCase):
    """
    Tests for L{make_change}.
    """
    def test_alias_target(self):
        """
        An alias target may be given as a mapping and then needs no records.
        """
        change = make_change({
            u"action": u"upsert",
            u"name": u"alias.example.com.",
            u"type": u"A",
            u"alias_target": {
                u"hosted_zone_id": u"Z2",
                u"dns_name": u"www.example.com.",
            },
        })
        self.assertEqual(
            Change(
                action=ChangeAction.UPSERT,
                rrset=ResourceRecordSet(
                    name=u"alias.example.com.", type=u"A",
                    alias_target=AliasTarget(
                        hosted_zone_id=u"Z2", dns_name=u"www.example.com.",
                    ),
                ),
            ),
            change,
        )

    def test_bad_field_value(self):
        """
        A field of the wrong type is a usage error.
        """
        self.assertRaises(
            UsageError, make_change, {
                u"action": u"create", u"name": u"www.example.com.",
                u"type": u"A", u"ttl": u"sixty", u"value": u"10.0.0.1",
            },
        )


class ErrorTests(_ClientMixin, TestCase):
    """
    Tests for the handling of failed operations.
    """
    def test_no_error(self):
        """
        Before anything fails the error is empty.
        """
        self.assertEqual(ErrorInfo(), self.client.error())
        self.assertFalse(self.client.error())

    def test_error_response(self):
        """
        A failed operation returns L{None} and the error details come from
        the I{ErrorResponse} document.
        """
        self.transport.respond(status=BAD_REQUEST, content=_ERROR)
        self.assertIs(None, self.client.get_hosted_zone(u"Z1"))
        self.assertEqual(
            ErrorInfo(
                type=u"Sender", code=u"InvalidInput", message=u"Bad zone name",
            ),
            self.client.error(),
        )

    def test_overwritten(self):
        """
        Each failure replaces the previous error and a success leaves it.
        """
        self.transport.respond(status=BAD_REQUEST, content=_ERROR)
        self.transport.respond(status=NOT_FOUND, content=_NO_SUCH_ZONE)
        self.transport.respond(content=_change_response(u"GetChangeResponse"))
        self.client.get_hosted_zone(u"Z1")
        self.client.get_hosted_zone(u"Z9")
        self.assertEqual(u"NoSuchHostedZone", self.client.error().code)
        self.client.get_change(u"C1")
        self.assertEqual(u"NoSuchHostedZone", self.client.error().code)

    def test_empty_body(self):
        """
        Without an error document the details come from the status.
        """
        self.transport.respond(status=403)
        self.assertIs(None, self.client.list_hosted_zones())
        self.assertEqual(
            ErrorInfo(type=u"Sender", code=u"403", message=u"Forbidden"),
            self.client.error(),
        )

    def test_raise_errors(self):
        """
        A client created with C{raise_errors=True} raises L{Route53Error}.
        """
        client = self.get_client(raise_errors=True)
        self.transport.respond(status=BAD_REQUEST, content=_ERROR)
        error = self.assertRaises(Route53Error, client.get_hosted_zone, u"Z1")
        self.assertEqual(BAD_REQUEST, int(error.status))
        self.assertEqual(u"InvalidInput", error.error_info.code)
        self.assertEqual(
            u"5b0a5a4d-0000-4000-8000-000000000000", error.request_id,
        )
        self.assertEqual(error.error_info, client.error())

    def test_text_only_error(self):
        """
        An I{Error} element without details is treated like an empty body.
        """
        for status, body in [
            (BAD_REQUEST, b"<ErrorResponse><Error>oops</Error></ErrorResponse>"),
            (503, b"<ErrorResponse><Error>oops</Error><Error>again</Error>"
                  b"<RequestId>r1</RequestId></ErrorResponse>"),
        ]:
            self.transport.respond(status=status, content=body)
            self.assertIs(None, self.client.get_hosted_zone(u"Z1"))
        self.assertEqual(
            ErrorInfo(
                type=u"HTTP", code=u"503", message=u"Service Unavailable",
            ),
            self.client.error(),
        )

    def test_text_only_error_first(self):
        self.transport.respond(
            status=BAD_REQUEST,
            content=b"<ErrorResponse><Error>oops</Error></ErrorResponse>",
        )
        self.client.get_hosted_zone(u"Z1")
        self.assertEqual(
            ErrorInfo(type=u"Sender", code=u"400", message=u"Bad Request"),
            self.client.error(),
        )

    def test_server_error(self):
        """
        A I{5xx} error document is read the same way.
        """
        self.transport.respond(
            status=503,
            content=(
                b"<ErrorResponse><Error><Type>Receiver</Type>"
                b"<Code>Throttling</Code><Message>Rate exceeded</Message>"
                b"</Error><RequestId>r1</RequestId></ErrorResponse>"
            ),
        )
        self.client.get_change(u"C1")
        self.assertEqual(
            ErrorInfo(
                type=u"Receiver", code=u"Throttling", message=u"Rate exceeded",
            ),
            self.client.error(),
        )

    def test_logged(self):
        """
        Failures are logged as warnings.
        """
        events = []
        globalLogPublisher.addObserver(events.append)
        self.addCleanup(globalLogPublisher.removeObserver, events.append)

        self.transport.respond(status=BAD_REQUEST, content=_ERROR)
        self.client.get_hosted_zone(u"Z1")
        [event] = list(
            e for e in events if e.get(u"code") == u"InvalidInput"
        )
        self.assertEqual(LogLevel.warn, event[u"log_level"])
        self.assertEqual(
            (u"GET", u"2013-04-01/hostedzone/Z1", BAD_REQUEST),
            (event[u"method"], event[u"path"], event[u"status"]),
        )
