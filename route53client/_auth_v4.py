# Licenced under the route53client licence available at /LICENSE in the route53client source.
"""
AWS authorization, version 4.
"""
import hashlib
import hmac
from urllib.parse import urlsplit

import attr

from zope.interface import implementer

from route53client.client.interface import IRequestSigner


# The header names which take part in every signature.  Route53 does not
# require anything else to be signed.
SIGNED_HEADERS = "host;x-amz-date"

_EMPTY_SHA256 = hashlib.sha256(b"").hexdigest()


# The following four functions are taken straight from
# http://docs.aws.amazon.com/general/latest/gr/sigv4-signed-request-examples.html
def sign(key, msg):
    """
    Produce a SHA-256 HMAC for a message.

    @param key: The secret key to use.
    @type key: L{bytes}

    @param msg: The message to sign.
    @type msg: L{str}

    @return: The binary (B{not} the hex) digest of the HMAC signature.
    """
    return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()


def getSignatureKey(key, dateStamp, regionName, serviceName):
    """
    Generate the signing key for AWS V4 requests.

    @param key: The secret key to use.
    @type key: L{str}

    @param dateStamp: The UTC date and time, serialized as an AWS date
        stamp.
    @type dateStamp: L{str}

    @param regionName: The name of the region.
    @type regionName: L{str}

    @param serviceName: The name of the service to which the request
        will be sent.
    @type serviceName: L{str}

    @return: The 32 byte signing key.
    @rtype: L{bytes}
    """
    kDate = sign(("AWS4" + key).encode("utf-8"), dateStamp)
    kRegion = sign(kDate, regionName)
    kService = sign(kRegion, serviceName)
    kSigning = sign(kService, "aws4_request")
    return kSigning


def makeAMZDate(instant):
    """
    Serialize a L{datetime.datetime} according to the "amz date" format.

    @param instant: A UTC L{datetime.datetime}.
    @type instant: L{datetime.datetime}

    @return: The formatted date and time.
    @rtype: L{str}
    """
    return instant.strftime('%Y%m%dT%H%M%SZ')


def makeDateStamp(instant):
    """
    Serialize a L{datetime.datetime} according to the AWS "date stamp"
    format.

    @param instant: A UTC L{datetime.datetime}.
    @type instant: L{datetime.datetime}

    @return: The formatted date.
    @rtype: L{str}
    """
    return instant.strftime('%Y%m%d')


def _make_canonical_uri(parsed):
    """
    Return the canonical URI for a parsed URL.

    The path is used exactly as it appears in the request URL; it is
    expected to be percent-encoded already.

    @param parsed: The parsed URL from which to extract the canonical
        URI
    @type parsed: L{urllib.parse.SplitResult}

    @return: The canonical URI.
    @rtype: L{str}
    """
    return parsed.path or "/"


def _make_canonical_query_string(parsed):
    """
    Return the canonical query string for a parsed URL.

    The raw query component is preserved as-is.  Request builders are
    responsible for emitting their arguments in sorted order.

    @param parsed: The parsed URL from which to extract the canonical
        query string.
    @type parsed: L{urllib.parse.SplitResult}

    @return: The canonical query string.
    @rtype: L{str}
    """
    return parsed.query


def _make_canonical_headers(host, amz_date):
    """
    Return canonicalized headers.

    @param host: The value of the I{Host} header.
    @type host: L{str}

    @param amz_date: The value of the I{x-amz-date} header.
    @type amz_date: L{str}

    @return: The canonicalized headers.
    @rtype: L{str}
    """
    return "host:{}\nx-amz-date:{}\n".format(host, amz_date)


def _make_payload_hash(method, canonical_query_string):
    """
    Return the payload hash for a request.

    I{GET} requests hash the empty string.  Everything else hashes the
    canonical query string rather than the request body.

    @rtype: L{str}
    """
    if method.upper() == "GET":
        return _EMPTY_SHA256
    return hashlib.sha256(
        canonical_query_string.encode("utf-8"),
    ).hexdigest()


@attr.s(frozen=True)
class _CanonicalRequest(object):
    """
    A canonicalized request.  See
    U{http://docs.aws.amazon.com/general/latest/gr/sigv4-create-canonical-request.html}

    @ivar method: The HTTP method.
    @type method: L{str}

    @ivar canonical_uri: The 'canonical URI'.  Just the path.  See
        L{_make_canonical_uri}.
    @type canonical_uri: L{str}

    @ivar canonical_query_string: The 'canonical query string'.  See
        L{_make_canonical_query_string}.
    @type canonical_query_string: L{str}

    @ivar canonical_headers: The 'canonical headers'.  See
        L{_make_canonical_headers}.
    @type canonical_headers: L{str}

    @ivar signed_headers: The 'signed headers'.  Always
        L{SIGNED_HEADERS}.
    @type signed_headers: L{str}

    @ivar payload_hash: See L{_make_payload_hash}.
    @type payload_hash: L{str}
    """
    method = attr.ib()
    canonical_uri = attr.ib()
    canonical_query_string = attr.ib()
    canonical_headers = attr.ib()
    signed_headers = attr.ib()
    payload_hash = attr.ib()

    @classmethod
    def from_request_components(cls, method, url, host, amz_date):
        """
        Construct a L{_CanonicalRequest}.

        @param method: The HTTP method.
        @type method: L{str}

        @param url: The request's URL, or just its path and query.
        @type url: L{str}

        @param host: The value of the request's I{Host} header.
        @type host: L{str}

        @param amz_date: The request time in 'amz date' format.  See
            L{makeAMZDate}.
        @type amz_date: L{str}

        @return: A canonical request
        @rtype: L{_CanonicalRequest}
        """
        parsed = urlsplit(url)
        canonical_query_string = _make_canonical_query_string(parsed)
        return cls(
            method=method,
            canonical_uri=_make_canonical_uri(parsed),
            canonical_query_string=canonical_query_string,
            canonical_headers=_make_canonical_headers(host, amz_date),
            signed_headers=SIGNED_HEADERS,
            payload_hash=_make_payload_hash(method, canonical_query_string),
        )

    def serialize(self):
        """
        Serialize this canonical request to a string.

        @return: The line-delimited serialization of this canonical
            request.
        @rtype: L{str}
        """
        return '\n'.join(attr.astuple(self))

    def hash(self):
        """
        Calculate the SHA256 hash of this canonical request.

        @return: The SHA256 hash of this canonical request's
            serialization.
        @rtype: L{str}
        """
        return hashlib.sha256(self.serialize().encode("utf-8")).hexdigest()


@attr.s(frozen=True)
class _CredentialScope(object):
    """
    The scope of the AWS credentials.

    @ivar date_stamp: The UTC date, in 'date stamp' format.
        See L{makeDateStamp}.
    @type date_stamp: L{str}

    @ivar region: The service region.
    @type region: L{str}

    @ivar service: The name of the service to which the request will
        be made.
    @type: L{str}
    """

    date_stamp = attr.ib()
    region = attr.ib()
    service = attr.ib()

    def serialize(self):
        """
        Serialize this credential scope to a string.

        @return: The slash-delimited credential scope serialization.
        @rtype: L{str}
        """
        return "/".join(attr.astuple(self) + ('aws4_request',))


@attr.s(frozen=True)
class _Credential(object):
    """
    An AWS credential.

    @ivar access_key: The AWS access key.  See
        L{route53client.credentials.AWSCredentials}
    @type access_key: L{str}

    @ivar credential_scope: The credential's scope.
    @type credential_scope: L{_CredentialScope}
    """
    access_key = attr.ib()
    credential_scope = attr.ib()

    def serialize(self):
        """
        Serialize this credential bundle to a string.

        @return: The serialized credential.
        @rtype: L{str}
        """
        return "/".join([self.access_key, self.credential_scope.serialize()])


@attr.s(frozen=True)
class _SignableAWS4HMAC256Token(object):
    """
    A signable AWS4 HMAC 256 token.  The AWS documentation calls the
    serialization of this the "string to sign".

    @ivar amz_date: The UTC date and time in 'amz date' format.  See
        L{makeAMZDate}.
    @type amz_date: L{str}

    @ivar credential_scope: The scope of this operation's credentials.
    @type credential_scope: L{_CredentialScope}

    @ivar canonical_request: The canonical request that comprises this
        operation.
    @type canonical_request: L{_CanonicalRequest}
    """

    ALGORITHM = "AWS4-HMAC-SHA256"

    amz_date = attr.ib()
    credential_scope = attr.ib()
    canonical_request = attr.ib()

    def serialize(self):
        """
        Serialize this token to a string.

        @return: The serialization of this token.  This is known in
            the AWS documentation as "the string to sign."
        @rtype: L{str}
        """
        return "\n".join([
            self.ALGORITHM,
            self.amz_date,
            self.credential_scope.serialize(),
            self.canonical_request.hash(),
        ])

    def signature(self, signing_key):
        """
        Return the signature of this token.

        @param signing_key: The signing key.  Not just your secret
            key!  See L{getSignatureKey}
        @type: L{bytes}

        @return: the hex encoded HMAC-256 signature.
        @rtype: L{str}
        """
        return hmac.new(
            signing_key,
            self.serialize().encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()


def _make_authorization_header(region,
                               service,
                               canonical_request,
                               credentials,
                               instant):
    """
    Construct an AWS version 4 authorization value for use in an
    C{Authorization} header.

    @param region: The AWS region name (e.g., C{'us-east-1'}).
    @type region: L{str}

    @param service: The AWS service's name (e.g., C{'route53'}).
    @type service: L{str}

    @param canonical_request: The canonical form of the request.
    @type canonical_request: L{_CanonicalRequest}

    @param credentials: The AWS credentials.
    @type credentials: L{route53client.credentials.AWSCredentials}

    @param instant: The current UTC date and time
    @type instant: L{datetime.datetime}

    @return: A value suitable for use in an C{Authorization} header
    @rtype: L{str}
    """
    date_stamp = makeDateStamp(instant)
    amz_date = makeAMZDate(instant)

    scope = _CredentialScope(
        date_stamp=date_stamp,
        region=region,
        service=service
    )

    signable = _SignableAWS4HMAC256Token(
        amz_date,
        scope,
        canonical_request,
    )

    signature = signable.signature(
        getSignatureKey(credentials.secret_key,
                        date_stamp,
                        region,
                        service)
    )

    v4credential = _Credential(
        access_key=credentials.access_key,
        credential_scope=scope,
    )

    return (
        "%s " % (_SignableAWS4HMAC256Token.ALGORITHM,) +
        ", ".join([
            "Credential=%s" % (v4credential.serialize(),),
            "SignedHeaders=%s" % (canonical_request.signed_headers,),
            "Signature=%s" % (signature,),
        ]))


@implementer(IRequestSigner)
@attr.s(frozen=True)
class AWS4Signer(object):
    """
    Sign requests with AWS Signature Version 4.

    @ivar credentials: The credentials to sign with.
    @type credentials: L{route53client.credentials.AWSCredentials}

    @ivar region: The region name which goes into the credential scope.
    @type region: L{str}

    @ivar service: The service name which goes into the credential scope.
    @type service: L{str}
    """
    credentials = attr.ib()
    region = attr.ib()
    service = attr.ib()

    def sign(self, request, instant):
        """
        Add I{x-amz-date} and I{Authorization} headers to C{request}.

        @see: L{IRequestSigner.sign}
        """
        amz_date = makeAMZDate(instant)
        canonical_request = _CanonicalRequest.from_request_components(
            method=request.method,
            url=request.url,
            host=request.headers["host"],
            amz_date=amz_date,
        )
        request.headers["x-amz-date"] = amz_date
        request.headers["authorization"] = _make_authorization_header(
            region=self.region,
            service=self.service,
            canonical_request=canonical_request,
            credentials=self.credentials,
            instant=instant,
        )
