# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
Assorted helper functionality for the Route53 implementation.
"""

__all__ = [
    "to_xml", "from_xml", "children",
]

import xmltodict

from route53client.util import XML


_DOCTYPE = b"""<?xml version="1.0" encoding="UTF-8"?>\n"""

# Route53 elements which may occur any number of times inside their
# container.  A container holding exactly one of them must still come back
# as a list.
_REPEATED = {
    u"HostedZones": u"HostedZone",
    u"NameServers": u"NameServer",
    u"ResourceRecordSets": u"ResourceRecordSet",
    u"ResourceRecords": u"ResourceRecord",
    u"Changes": u"Change",
}


def _text(value):
    if isinstance(value, bool):
        return u"true" if value else u"false"
    if isinstance(value, int):
        return u"{}".format(value)
    return value


def _is_empty(value):
    return value is None or value == u"" or value == () or value == []


def _to_mapping(fields):
    """
    Convert a sequence of C{(name, value)} pairs into the nested mapping
    form L{xmltodict.unparse} consumes.

    Pairs are visited in the order given.  Repeated names are collected
    into a list so they serialize as sibling elements at the position of
    their first occurrence.  Empty values are dropped, and so is any
    nested element which ends up with no children.
    """
    mapping = {}
    for name, value in fields:
        if isinstance(value, (list, tuple)):
            value = _to_mapping(value) or None
        else:
            value = _text(value)
        if _is_empty(value):
            continue
        if name in mapping:
            existing = mapping[name]
            if not isinstance(existing, list):
                mapping[name] = existing = [existing]
            existing.append(value)
        else:
            mapping[name] = value
    return mapping


def to_xml(root, fields, xmlns=None):
    """
    Serialize an ordered field list to a UTF-8 encoded XML document with an
    XML declaration.

    @param root: The name of the document element.
    @type root: L{str}

    @param fields: The children of the document element as C{(name, value)}
        pairs, in exactly the order Route53 requires.  A value may be a
        string, an integer, a boolean, a nested sequence of pairs, or L{None}
        to omit the element.
    @type fields: L{tuple} of L{tuple}

    @param xmlns: The namespace for the document element, if any.
    @type xmlns: L{str} or L{NoneType}

    @rtype: L{bytes}
    """
    document = {}
    if xmlns is not None:
        document[u"@xmlns"] = xmlns
    document.update(_to_mapping(fields))
    body = xmltodict.unparse({root: document}, full_document=False)
    return _DOCTYPE + body.encode("utf-8")


def _force_list(path, key, value):
    return bool(path) and _REPEATED.get(path[-1][0]) == key


def from_xml(document):
    """
    Parse a Route53 response document into nested mappings.

    Elements which are repeatable in the Route53 schema (L{_REPEATED}) are
    always given as lists, even when only one is present.

    @param document: The response body.
    @type document: L{bytes}

    @return: The content of the document element.
    @rtype: L{dict}
    """
    parsed = XML(document, force_list=_force_list)
    [(_, content)] = parsed.items()
    return content or {}


def children(container, name):
    """
    Get the list of repeated elements called C{name} from C{container}.

    @param container: A parsed container element such as I{HostedZones},
        or L{None} when the container was empty or missing.

    @return: A L{list}, possibly empty.
    """
    if not container:
        return []
    return container.get(name, [])
