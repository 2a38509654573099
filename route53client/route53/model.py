# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
Simple model objects related to Route53 interactions.
"""

__all__ = [
    "Name", "ChangeAction", "ChangeStatus", "Failover",
    "HostedZone", "DelegationSet", "ChangeInfo",
    "AliasTarget", "ResourceRecordSet", "Change", "ChangeBatch",
    "create_rrset", "delete_rrset", "upsert_rrset",
    "ErrorInfo",
    "HostedZonePage", "HostedZoneDetails", "CreatedHostedZone",
    "ResourceRecordSetPage",
    "to_data",
]

from datetime import datetime

import attr
from attr import validators

from constantly import Values, ValueConstant

from ..client._validators import tuple_of


_optional_str = validators.optional(validators.instance_of(str))
_optional_int = validators.optional(validators.instance_of(int))
_optional_bool = validators.optional(validators.instance_of(bool))


def _trailing_dot(text):
    if not text.endswith(u"."):
        return text + u"."
    return text


@attr.s(frozen=True)
class Name(object):
    """
    A fully qualified DNS name.  A trailing dot is added if it is missing.
    """
    text = attr.ib(
        converter=_trailing_dot,
        validator=validators.instance_of(str),
    )

    def __str__(self):
        return self.text


class ChangeAction(Values):
    """
    The kinds of change which can be made to a resource record set.
    """
    CREATE = ValueConstant(u"CREATE")
    DELETE = ValueConstant(u"DELETE")
    UPSERT = ValueConstant(u"UPSERT")


class ChangeStatus(Values):
    """
    The propagation state of a submitted change.
    """
    PENDING = ValueConstant(u"PENDING")
    INSYNC = ValueConstant(u"INSYNC")


class Failover(Values):
    """
    The role of a resource record set in failover routing.
    """
    PRIMARY = ValueConstant(u"PRIMARY")
    SECONDARY = ValueConstant(u"SECONDARY")


def _constant_of(container):
    """
    Require a value which is one of the constants of a L{Values} container.
    """
    def validate(inst, a, value):
        if value not in list(container.iterconstants()):
            raise ValueError(
                u"{!r} must be one of {}, got {!r}".format(
                    a.name, container.__name__, value,
                ),
            )
    return validate


@attr.s(frozen=True)
class HostedZone(object):
    """
    http://docs.aws.amazon.com/Route53/latest/APIReference/API_HostedZone.html

    @ivar id: The identifier, as Route53 reports it, including the
        I{/hostedzone/} prefix.
    @ivar resource_record_set_count: Assigned by the server.
    """
    id = attr.ib(validator=validators.instance_of(str))
    name = attr.ib(validator=validators.instance_of(str))
    caller_reference = attr.ib(validator=validators.instance_of(str))
    comment = attr.ib(default=None, validator=_optional_str)
    private_zone = attr.ib(default=None, validator=_optional_bool)
    resource_record_set_count = attr.ib(default=None, validator=_optional_int)


@attr.s(frozen=True)
class DelegationSet(object):
    """
    The name servers Route53 assigned to a hosted zone.
    """
    name_servers = attr.ib(
        converter=tuple,
        validator=tuple_of(validators.instance_of(str)),
    )


@attr.s(frozen=True)
class ChangeInfo(object):
    """
    http://docs.aws.amazon.com/Route53/latest/APIReference/API_ChangeInfo.html

    @ivar status: L{ChangeStatus.PENDING} until the change has reached
        every Route53 name server, then L{ChangeStatus.INSYNC}.
    @ivar submitted_at: A timezone-aware L{datetime}.
    """
    id = attr.ib(validator=validators.instance_of(str))
    status = attr.ib(validator=_constant_of(ChangeStatus))
    submitted_at = attr.ib(validator=validators.instance_of(datetime))
    comment = attr.ib(default=None, validator=_optional_str)


@attr.s(frozen=True)
class AliasTarget(object):
    """
    http://docs.aws.amazon.com/Route53/latest/APIReference/API_AliasTarget.html

    @ivar hosted_zone_id: Scope information for interpreting C{dns_name} (of
        variable meaning; see AWS docs).
    @type hosted_zone_id: L{str}

    @ivar dns_name: The target of the alias (of variable meaning; see AWS
        docs).
    @type dns_name: L{str}

    @ivar evaluate_target_health: Inherit health of the target.
    @type evaluate_target_health: L{bool}
    """
    hosted_zone_id = attr.ib(validator=validators.instance_of(str))
    dns_name = attr.ib(validator=validators.instance_of(str))
    evaluate_target_health = attr.ib(
        default=False, validator=validators.instance_of(bool),
    )


def _optional_failover(value):
    if value is None or value in list(Failover.iterconstants()):
        return value
    return Failover.lookupByValue(value.upper())


@attr.s(frozen=True)
class ResourceRecordSet(object):
    """
    https://tools.ietf.org/html/rfc2181#section-5
    http://docs.aws.amazon.com/Route53/latest/APIReference/API_ResourceRecordSet.html

    A basic record set has C{ttl} and C{records}; an alias record set has
    C{alias_target} instead.  The routing fields (C{set_identifier},
    C{weight}, C{region}, C{failover}) select weighted, latency or failover
    routing.  Which combinations make sense is left to Route53 to decide.

    @ivar records: The record values, in order, as Route53 represents them
        (for example C{u"10 mail.example.com."} for an I{MX} record).
    @type records: L{tuple} of L{str}
    """
    name = attr.ib(validator=validators.instance_of(str))
    type = attr.ib(validator=validators.instance_of(str))
    ttl = attr.ib(default=None, validator=_optional_int)
    records = attr.ib(
        default=(),
        converter=tuple,
        validator=tuple_of(validators.instance_of(str)),
    )
    alias_target = attr.ib(
        default=None,
        validator=validators.optional(validators.instance_of(AliasTarget)),
    )
    set_identifier = attr.ib(default=None, validator=_optional_str)
    weight = attr.ib(default=None, validator=_optional_int)
    region = attr.ib(default=None, validator=_optional_str)
    failover = attr.ib(
        default=None,
        converter=_optional_failover,
        validator=validators.optional(_constant_of(Failover)),
    )
    health_check_id = attr.ib(default=None, validator=_optional_str)


@attr.s(frozen=True)
class Change(object):
    """
    One change to one resource record set.

    For creation, C{rrset} is the rrset that will be created in the zone.
    For deletion, it must exactly match the rrset that already exists in
    the zone.  For replacement (upsert), it will be the new value of the
    rrset.
    """
    action = attr.ib(validator=_constant_of(ChangeAction))
    rrset = attr.ib(validator=validators.instance_of(ResourceRecordSet))


def create_rrset(rrset):
    return Change(ChangeAction.CREATE, rrset)


def delete_rrset(rrset):
    return Change(ChangeAction.DELETE, rrset)


def upsert_rrset(rrset):
    return Change(ChangeAction.UPSERT, rrset)


@attr.s(frozen=True)
class ChangeBatch(object):
    """
    Changes which Route53 applies together, all or nothing, in the order
    given.
    """
    changes = attr.ib(
        converter=tuple,
        validator=tuple_of(validators.instance_of(Change)),
    )
    comment = attr.ib(default=None, validator=_optional_str)


@attr.s(frozen=True)
class ErrorInfo(object):
    """
    The details of the most recent failed request.  All fields are L{None}
    if there has not been one.
    """
    type = attr.ib(default=None)
    code = attr.ib(default=None)
    message = attr.ib(default=None)

    def __bool__(self):
        return any(
            value is not None for value in (self.type, self.code, self.message)
        )


@attr.s(frozen=True)
class HostedZonePage(object):
    """
    One page of a hosted zone listing.

    @ivar next_marker: The marker to pass to get the next page, or L{None}
        if this is the last page.
    """
    hosted_zones = attr.ib(
        converter=tuple,
        validator=tuple_of(validators.instance_of(HostedZone)),
    )
    next_marker = attr.ib(default=None, validator=_optional_str)
    max_items = attr.ib(default=None, validator=_optional_int)
    is_truncated = attr.ib(default=False, validator=validators.instance_of(bool))


@attr.s(frozen=True)
class HostedZoneDetails(object):
    hosted_zone = attr.ib(validator=validators.instance_of(HostedZone))
    delegation_set = attr.ib(
        validator=validators.optional(validators.instance_of(DelegationSet)),
    )


@attr.s(frozen=True)
class CreatedHostedZone(object):
    hosted_zone = attr.ib(validator=validators.instance_of(HostedZone))
    change_info = attr.ib(validator=validators.instance_of(ChangeInfo))
    delegation_set = attr.ib(
        validator=validators.optional(validators.instance_of(DelegationSet)),
    )


@attr.s(frozen=True)
class ResourceRecordSetPage(object):
    """
    One page of a resource record set listing.

    The C{next_record_*} attributes locate the first record set of the
    following page.  They are L{None} on the last page.
    """
    resource_record_sets = attr.ib(
        converter=tuple,
        validator=tuple_of(validators.instance_of(ResourceRecordSet)),
    )
    next_record_name = attr.ib(default=None, validator=_optional_str)
    next_record_type = attr.ib(default=None, validator=_optional_str)
    next_record_identifier = attr.ib(default=None, validator=_optional_str)
    max_items = attr.ib(default=None, validator=_optional_int)
    is_truncated = attr.ib(default=False, validator=validators.instance_of(bool))


def _plain(value):
    if attr.has(type(value)):
        return to_data(value)
    if isinstance(value, ValueConstant):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, tuple):
        return list(_plain(v) for v in value)
    return value


def to_data(value):
    """
    Convert a model object into plain dicts, lists and strings.

    Attributes which are L{None} are left out altogether rather than
    represented with a null value.

    @param value: Any model object from this module.

    @rtype: L{dict}
    """
    result = {}
    for field in attr.fields(type(value)):
        item = getattr(value, field.name)
        if item is None:
            continue
        result[field.name] = _plain(item)
    return result
