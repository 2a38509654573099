# Licenced under the route53client licence available at /LICENSE in the route53client source.
"""
AWS authorization, version 3 (I{AWS3-HTTPS}).

This is the scheme Route53 accepted before Signature Version 4.  The
signature covers nothing but the I{Date} header, so the date has to
agree with Amazon's clock; it is fetched from the service itself.
"""

import attr

from zope.interface import implementer

from twisted.logger import Logger
from twisted.web.http import datetimeToString

from route53client.client.interface import IRequestSigner


ALGORITHM = "HmacSHA1"


def _make_authorization_header(credentials, date):
    """
    Construct the value of an I{X-Amzn-Authorization} header.

    @param credentials: The AWS credentials.
    @type credentials: L{route53client.credentials.AWSCredentials}

    @param date: The value of the request's I{Date} header.
    @type date: L{str}

    @rtype: L{str}
    """
    return "AWS3-HTTPS AWSAccessKeyId={},Algorithm={},Signature={}".format(
        credentials.access_key,
        ALGORITHM,
        credentials.sign(date),
    )


@implementer(IRequestSigner)
@attr.s(frozen=True)
class AWS3Signer(object):
    """
    Sign requests with the I{AWS3-HTTPS} scheme.

    @ivar credentials: The credentials to sign with.
    @type credentials: L{route53client.credentials.AWSCredentials}

    @ivar transport: The transport used to ask the service for its
        current time.
    @type transport: L{IHTTPTransport} provider

    @ivar endpoint: The service endpoint.
    @type endpoint: L{route53client.service.AWSServiceEndpoint}
    """
    _log = Logger()

    credentials = attr.ib()
    transport = attr.ib()
    endpoint = attr.ib()

    def _get_server_date(self):
        """
        Ask the service for its idea of the current time.

        @return: The server's I{Date} header, or L{None} if it did not send
            one.
        @rtype: L{str} or L{NoneType}
        """
        url = "{}://{}/date".format(
            self.endpoint.scheme, self.endpoint.get_canonical_host(),
        )
        response = self.transport.request("GET", url, {}, b"")
        return response.get_header("date")

    def sign(self, request, instant):
        """
        Add I{Date}, I{Content-Type} and I{X-Amzn-Authorization} headers to
        C{request}.

        C{instant} is only used when the server does not report its time.

        @see: L{IRequestSigner.sign}
        """
        date = self._get_server_date()
        if not date:
            self._log.warn(
                "Can't get Amazon server date, signing with local time",
            )
            date = datetimeToString(instant.timestamp()).decode("ascii")
        request.headers["date"] = date
        request.headers["content-type"] = "text/xml"
        request.headers["x-amzn-authorization"] = _make_authorization_header(
            self.credentials, date,
        )
