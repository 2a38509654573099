# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
Blocking HTTP transports.
"""

__all__ = [
    "HTTPResponse", "RequestsTransport",
]

import attr
from attr import validators

import requests

from zope.interface import implementer

from route53client import version
from route53client.client.interface import IHTTPTransport


USER_AGENT = u"route53client/{} (Python)".format(version.route53client)


def _lowercase_keys(headers):
    return {name.lower(): value for (name, value) in dict(headers).items()}


@attr.s(frozen=True)
class HTTPResponse(object):
    """
    A complete HTTP response.

    @ivar status: The response code.
    @type status: L{int}

    @ivar headers: The response headers, keyed by lowercase name.
    @type headers: L{dict}

    @ivar content: The response body.
    @type content: L{bytes}
    """
    status = attr.ib(validator=validators.instance_of(int))
    headers = attr.ib(
        default=attr.Factory(dict),
        converter=_lowercase_keys,
    )
    content = attr.ib(default=b"", validator=validators.instance_of(bytes))

    @property
    def success(self):
        """
        Whether the status is in the I{2xx} range.
        """
        return 200 <= self.status < 300

    def get_header(self, name, default=None):
        return self.headers.get(name.lower(), default)


@implementer(IHTTPTransport)
@attr.s
class RequestsTransport(object):
    """
    An L{IHTTPTransport} built on a L{requests.Session}.

    @ivar session: The session to issue requests with.

    @ivar timeout: Passed to L{requests.Session.request} with every request.
        L{None} waits forever.

    @ivar user_agent: Sent as I{User-Agent} unless the caller supplies one.
    """
    session = attr.ib(default=attr.Factory(requests.Session))
    timeout = attr.ib(default=None)
    user_agent = attr.ib(default=USER_AGENT)

    def request(self, method, url, headers, body):
        headers = dict(headers)
        headers.setdefault(u"user-agent", self.user_agent)
        response = self.session.request(
            method,
            url,
            headers=headers,
            data=body or None,
            timeout=self.timeout,
        )
        return HTTPResponse(
            status=response.status_code,
            headers=response.headers,
            content=response.content,
        )
