# Copyright (C) 2009 Robert Collins <robertc@robertcollins.net>
# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""Credentials for accessing AWS services."""

import attr

from route53client.exception import CredentialsNotFoundError
from route53client.util import hmac_sha1


__all__ = ["AWSCredentials"]


def _required(name):
    def validate(inst, attribute, value):
        if not value:
            raise CredentialsNotFoundError(
                "Required parameter {!r} is not defined".format(name),
            )
        if not isinstance(value, str):
            raise TypeError(
                "{!r} must be a str, got {!r}".format(name, type(value)),
            )
    return validate


@attr.s(frozen=True)
class AWSCredentials(object):
    """An access key id and secret key pair.

    Nothing is read from the environment or the filesystem; callers
    supply both halves explicitly.

    @param access_key: The access key id.
    @param secret_key: The secret key.
    @raise CredentialsNotFoundError: Either value is missing or empty.
    """

    access_key = attr.ib(validator=_required("id"))
    secret_key = attr.ib(repr=False, validator=_required("key"))

    def sign(self, data):
        """Sign some bytes with HMAC-SHA1, as I{AWS3-HTTPS} requires."""
        return hmac_sha1(self.secret_key, data)
