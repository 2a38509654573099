# Copyright (C) 2009 Duncan McGreggor <duncan@canonical.com>
# Copyright (C) 2009 Robert Collins <robertc@robertcollins.net>
# Licenced under the route53client licence available at /LICENSE in the route53client source.

from route53client.util import parse


__all__ = [
    "AWSServiceEndpoint", "REGION_US_EAST_1", "ROUTE53_ENDPOINT",
    "ROUTE53_SERVICE",
]


# Route53 is a global service but requests are always signed for this
# region.
# http://docs.aws.amazon.com/general/latest/gr/rande.html#r53_region
REGION_US_EAST_1 = "us-east-1"

ROUTE53_ENDPOINT = "https://route53.amazonaws.com/"
ROUTE53_SERVICE = "route53"


class AWSServiceEndpoint(object):
    """
    @param uri: The URL for the service.
    """

    def __init__(self, uri=""):
        self.host = ""
        self.port = None
        self.path = "/"
        self._parse_uri(uri)
        if not self.scheme:
            self.scheme = "http"

    def __repr__(self):
        return "<AWSServiceEndpoint {}>".format(self.get_uri())

    def _parse_uri(self, uri):
        scheme, host, port, path = parse(
            str(uri), defaultPort=False)
        self.scheme = scheme
        self.host = host
        self.port = port
        self.path = path

    def get_canonical_host(self):
        """
        Return the canonical host as for the Host HTTP header specification.
        """
        host = self.host.lower()
        if self.port is not None:
            host = "%s:%s" % (host, self.port)
        return host

    def get_uri(self):
        """Get a URL representation of the service."""
        uri = "%s://%s%s" % (self.scheme, self.get_canonical_host(), self.path)
        return uri
