# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
Request construction, signing and submission shared by every client.
"""

from datetime import datetime, timezone
from urllib.parse import quote
from xml.parsers.expat import ExpatError

import attr
from attr import validators

from pyrsistent import PMap, freeze, pmap

from twisted.logger import Logger
from twisted.web import http
from twisted.web.error import Error as TwistedWebError

from route53client.client._validators import (
    list_of as _list_of, provides as _provides,
)
from route53client.client.interface import IRequestSigner
from route53client.exception import AWSResponseParseError


@attr.s(frozen=True)
class _QueryArgument(object):
    """
    Representation of a single URL query argument, eg I{foo=bar}.
    """
    name = attr.ib(validator=validators.instance_of(str))
    value = attr.ib(default=None, validator=validators.optional(validators.instance_of(str)))

    def url_encode(self):
        def q(t):
            return quote(t.encode("utf-8"), safe=b"")

        if self.value is None:
            return q(self.name)
        return q(self.name) + u"=" + q(self.value)


def _tuples_to_queryarg(tuples):
    """
    Convert an iterator of tuples to a list of L{_QueryArgument}
    instances.
    """
    return list(_QueryArgument(*v) for v in tuples)


def error_wrapper(response, errorClass):
    """
    Describe a failed response as an exception.

    Amazon says that its errors are accompanied by a 400-series or
    500-series response with an XML document describing them.  If the body
    is such a document, the result is an C{errorClass} built from it.
    Otherwise it is a plain L{twisted.web.error.Error} carrying the standard
    reason phrase for the status.

    @param response: The failed response.
    @type response: L{route53client.client.transport.HTTPResponse}

    @param errorClass: An L{AWSError} subclass.

    @return: The exception, which is not raised.
    """
    message = http.RESPONSES.get(response.status)
    if response.content.strip():
        try:
            return errorClass(
                response.content, response.status, message, response.content,
            )
        except (ExpatError, AWSResponseParseError):
            pass
    return TwistedWebError(response.status, message, response.content)


def url_context(**kw):
    """
    Construct a new URL context, usable to determine the URI to which
    a query should be issued.

    @param scheme: The scheme portion of the URL, eg
        ``u"http"`` or ``u"https"``.
    @type scheme: L{str}

    @param host: The host portion of the URL, eg ``u"example.com"``.
    @type host: L{str}

    @param port: A non-default port for the URL or ``None`` for the
        scheme default.
    @type port: L{int} or L{NoneType}

    @param path: The path portion of the URL as a list of unicode path
        segments.
    @type path: L{list} of L{str}

    @param query: The query arguments of the URL as a list of tuples.
        Each tuple is length one (a string representing a no-value
        argument) or two (two strings representing an argument name and
        value).  They are encoded in the order given.
    @type query: L{list} of L{tuple} of L{str}
    """
    return _URLContext(**kw)


@attr.s(frozen=True)
class _URLContext(object):
    """
    A description of the URL involved in an AWS request.

    See parameter documentation for ``url_context`` (the public
    constructor) for details about attributes.
    """
    scheme = attr.ib(validator=validators.instance_of(str))
    host = attr.ib(validator=validators.instance_of(str))
    port = attr.ib(validator=validators.optional(validators.instance_of(int)))
    path = attr.ib(validator=_list_of(validators.instance_of(str)))
    query = attr.ib(
        default=attr.Factory(list),
        converter=_tuples_to_queryarg,
        validator=_list_of(validators.instance_of(_QueryArgument)),
    )

    def get_encoded_host(self):
        """
        @return: The encoded host component, including a non-default port.
        @rtype: L{str}
        """
        host = self.host.encode("idna").decode("ascii")
        if self.port is None:
            return host
        return u"{}:{}".format(host, self.port)

    def get_encoded_path(self):
        """
        @return: The encoded path component.
        @rtype: L{str}
        """
        return u"/" + u"/".join(
            quote(segment.encode("utf-8"), safe=b"") for segment in self.path
        )

    def get_encoded_query(self):
        """
        @return: The encoded query component.
        @rtype: L{str}
        """
        return u"&".join(arg.url_encode() for arg in self.query)

    def get_encoded_url(self):
        """
        @return: The complete, encoded URL.
        @rtype: L{str}
        """
        url = u"{}://{}{}".format(
            self.scheme, self.get_encoded_host(), self.get_encoded_path(),
        )
        query = self.get_encoded_query()
        if query:
            url += u"?" + query
        return url


@attr.s
class RequestDetails(object):
    """
    Describe an AWS request in sufficient detail to sign and submit
    it.

    @ivar method: The HTTP method of the request.
    @type method: L{str}

    @ivar url_context: The details of the request URL.  An object
        returned by L{url_context}.

    @ivar headers: Any application-required HTTP headers for inclusion
        in the request.  This excludes headers like I{Authorization}
        which are added during signing.
    @type headers: L{pmap}

    @ivar body: The request body.
    @type body: L{bytes}
    """
    method = attr.ib(validator=validators.instance_of(str))
    url_context = attr.ib(validator=validators.instance_of(_URLContext))
    headers = attr.ib(
        default=pmap(),
        converter=freeze,
        validator=validators.instance_of(PMap),
    )
    body = attr.ib(default=b"", validator=validators.instance_of(bytes))


@attr.s
class OutboundRequest(object):
    """
    A request which is ready to be signed and handed to a transport.

    @ivar method: The HTTP method.
    @type method: L{str}

    @ivar url: The complete, encoded URL.
    @type url: L{str}

    @ivar headers: The request headers keyed by lowercase name.  Signers
        add to this.
    @type headers: L{dict}

    @ivar body: The request body.
    @type body: L{bytes}
    """
    method = attr.ib()
    url = attr.ib()
    headers = attr.ib(default=attr.Factory(dict))
    body = attr.ib(default=b"")


def query(**kw):
    """
    Create a new AWS query model object.

    @param signer: The signer which authenticates the request.
    @type signer: L{IRequestSigner} provider

    @param details: The specifics of the query/request to construct.
    @type details: L{RequestDetails}
    """
    return _Query(**kw)


def _utcnow():
    return datetime.now(timezone.utc)


@attr.s(frozen=True)
class _Query(object):
    """
    Representation of enough information to submit an AWS request.
    """
    _log = Logger()

    _signer = attr.ib(validator=_provides(IRequestSigner))
    _details = attr.ib(validator=validators.instance_of(RequestDetails))

    def _get_headers(self, url_context, app_headers):
        """
        Build the headers the request starts with, before signing.
        """
        headers = {
            name.lower(): value for (name, value) in app_headers.items()
        }
        headers.setdefault(u"host", url_context.get_encoded_host())
        return headers

    def submit(self, transport, utcnow=None):
        """
        Sign this request and send it to AWS.

        @param transport: The transport to use to issue the request.
        @type transport: L{IHTTPTransport} provider

        @param utcnow: A no-argument callable returning the current time as
            a timezone-aware UTC L{datetime.datetime}.  The time is read
            once, so every header of the request agrees on it.

        @return: The response.
        @rtype: L{route53client.client.transport.HTTPResponse}
        """
        if utcnow is None:
            utcnow = _utcnow

        url_context = self._details.url_context
        url = url_context.get_encoded_url()
        request = OutboundRequest(
            method=self._details.method,
            url=url,
            headers=self._get_headers(url_context, self._details.headers),
            body=self._details.body,
        )
        instant = utcnow()
        self._signer.sign(request, instant)

        self._log.info(
            u"Submitting query: {method} {url}",
            method=request.method,
            url=url,
        )
        return transport.request(
            request.method,
            request.url,
            request.headers,
            request.body,
        )
