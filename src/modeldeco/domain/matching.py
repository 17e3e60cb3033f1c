"""Target matching — does a command target select a model element?

Pure functions. A target field matches when it is a wildcard (``None``)
or exactly equal to the observed value. Inheritance is not resolved:
a target naming a supertype never matches its subtypes.
"""

from __future__ import annotations

from modeldeco.domain.commands import CommandTarget


def wildcard_or_equal(expected: str | None, observed: str | None) -> bool:
    """Return True if *expected* is a wildcard or equals *observed*.

    Examples:
        >>> wildcard_or_equal(None, "Foo")
        True
        >>> wildcard_or_equal("Foo", "Foo")
        True
        >>> wildcard_or_equal("Foo", "Bar")
        False
    """
    return expected is None or expected == observed


def matches(
    target: CommandTarget,
    namespace: str,
    declaration_name: str,
    property_name: str | None = None,
    property_type: str | None = None,
) -> bool:
    """Match *target* against a declaration or, with *property_name*, a property.

    Declaration context compares namespace and declaration only. Property
    context also compares the property name and its declared type name.
    """
    if not (
        wildcard_or_equal(target.namespace, namespace)
        and wildcard_or_equal(target.declaration, declaration_name)
    ):
        return False
    if property_name is None:
        return True
    return wildcard_or_equal(target.property, property_name) and wildcard_or_equal(
        target.type, property_type
    )
