# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""Generally useful utilities for AWS web services not specific to a service.

New things in this module should be of relevance to more than one of Amazon's
services.
"""

from base64 import b64encode
from hashlib import sha1
import hmac
from urllib.parse import urlparse, urlunparse

import xmltodict


__all__ = ["hmac_sha1", "parse", "XML"]


def _to_bytes(value):
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


def hmac_sha1(secret, data):
    digest = hmac.new(_to_bytes(secret), _to_bytes(data), sha1).digest()
    return b64encode(digest).decode("ascii")


def parse(url, defaultPort=True):
    """
    Split the given URL into the scheme, host, port, and path.

    @type url: C{str}
    @param url: An URL to parse.

    @type defaultPort: C{bool}
    @param defaultPort: Whether to return the default port associated with the
        scheme in the given url, when the url doesn't specify one.

    @return: A four-tuple of the scheme, host, port, and path of the URL.  All
    of these are C{str} instances except for port, which is an C{int}.
    """
    url = url.strip()
    parsed = urlparse(url)
    scheme = parsed[0]
    path = urlunparse(("", "") + parsed[2:])
    host = parsed[1]

    if ":" in host:
        host, port = host.split(":")
        try:
            port = int(port)
        except ValueError:
            # A non-numeric port was given, it will be replaced with
            # an appropriate default value if defaultPort is True
            port = None
    else:
        port = None

    if port is None and defaultPort:
        if scheme == "https":
            port = 443
        else:
            port = 80

    if path == "":
        path = "/"
    return (str(scheme), str(host), port, str(path))


def XML(text, force_list=None):
    """
    Parse an XML document into nested mappings.

    Namespace declarations are kept as C{@xmlns} keys but element names are
    left unqualified, which is how every AWS response we deal with is
    written.

    @param text: The document.
    @type text: L{bytes} or L{str}

    @param force_list: Passed through to L{xmltodict.parse}.

    @return: A L{dict} with a single key, the name of the root element.
    """
    return xmltodict.parse(text, force_list=force_list)
