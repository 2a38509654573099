# Licenced under the route53client licence available at /LICENSE in the route53client source.

"""
attrs validators for internal use.
"""

import attr
from attr import validators


def list_of(validator):
    """
    Require a value which is a list containing elements which the
    given validator accepts.
    """
    return _ContainerOf(list, validator)


def tuple_of(validator):
    """
    Require a value which is a tuple containing elements which the given
    validator accepts.
    """
    return _ContainerOf(tuple, validator)


@attr.s(frozen=True)
class _ContainerOf(object):
    """
    attrs validator for a container of objects which satisfy another
    validator.

    L{list_of}, L{tuple_of}, etc are the public constructors to hide the
    type and prevent subclassing.
    """
    container_type = attr.ib()
    validator = attr.ib()

    def __call__(self, inst, a, value):
        validators.instance_of(self.container_type)(inst, a, value)
        for n, element in enumerate(value):
            # Give the inner attribute a name that refers to the index
            # we're validating.  Otherwise the validation failure is pretty
            # confusing.
            inner_attr = a.evolve(name=u"{}[{}]".format(a.name, n))
            self.validator(inst, inner_attr, element)


def provides(interface):
    """
    Require a value which provides the given zope interface.
    """
    return _Provides(interface)


@attr.s(frozen=True)
class _Provides(object):
    interface = attr.ib()

    def __call__(self, inst, a, value):
        if not self.interface.providedBy(value):
            raise TypeError(
                u"{!r} must provide {!r}, got {!r}".format(
                    a.name, self.interface, value,
                ),
                a, self.interface, value,
            )
