# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
Interfaces between the request machinery and its collaborators.
"""

from zope.interface import Attribute, Interface


class IHTTPTransport(Interface):
    """
    An L{IHTTPTransport} provider can issue one blocking HTTP request at a
    time.
    """
    def request(method, url, headers, body):
        """
        Issue a request and wait for the complete response.

        @param method: The HTTP method, for example C{"GET"}.
        @type method: L{str}

        @param url: The absolute, already encoded URL.
        @type url: L{str}

        @param headers: Request headers, keyed by lowercase name.
        @type headers: L{dict} of L{str}

        @param body: The request body.
        @type body: L{bytes}

        @return: The response.
        @rtype: L{route53client.client.transport.HTTPResponse}
        """


class IRequestSigner(Interface):
    """
    An L{IRequestSigner} provider authenticates an outbound request by adding
    headers to it.
    """
    credentials = Attribute(
        "The L{route53client.credentials.AWSCredentials} to sign with.",
    )

    def sign(request, instant):
        """
        Add authentication headers to C{request}.

        @param request: The request to sign.  Its C{headers} are modified in
            place and must already include I{host}.
        @type request: L{route53client.client.base.OutboundRequest}

        @param instant: The time the request is being made, in UTC.
        @type instant: L{datetime.datetime}
        """
