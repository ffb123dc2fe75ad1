"""
Registration of embedded (complex) types.

A complex type is registered once per build no matter how many entities
embed it; later registrations just return the existing key. Each
sub-property descriptor already carries the column facts it needs, so the
owner's column list is not consulted.
"""

import logging

from .data_properties import data_property_for, make_complex_property
from .descriptors import ComponentDescriptor
from .errors import UnsupportedComplexTypeError
from .schema import TypeNode

logger = logging.getLogger(__name__)


def register_complex_type(ctx, component: ComponentDescriptor) -> str:
    """Add a complex type definition and return its key.

    Args:
        ctx: The current BuildContext.
        component: The embedded type.

    Returns:
        The type key, e.g. ``Location:#Northwind.Models``.
    """
    type_ref = component.type
    class_key = type_ref.key
    if class_key in ctx.type_names:
        return class_key

    cmap = TypeNode(short_name=type_ref.name, namespace=type_ref.namespace, is_complex_type=True)
    ctx.add_complex_type(cmap)
    logger.debug("Registered complex type %s", class_key)

    for prop in component.properties:
        if prop.is_association:
            raise UnsupportedComplexTypeError(
                f"Association {prop.name} is not supported inside complex type {class_key}",
                entity=class_key, property_name=prop.name)

        config = ctx.member_config(type_ref, prop.name)
        if prop.is_embedded and prop.component is not None:
            complex_type_name = register_complex_type(ctx, prop.component)
            cmap.data_properties.append(
                make_complex_property(config, prop.name, complex_type_name, prop.nullable))
        else:
            cmap.data_properties.append(data_property_for(ctx, type_ref, prop))

    return class_key
