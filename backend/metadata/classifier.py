"""
Property classification for one entity type.

Splits an entity's properties into data properties (scalars and complex
types) and navigation properties. Data properties are built first so
that association resolution can look up the FK properties among them.
"""

import logging
from typing import List, Set, Tuple

from .associations import resolve_association
from .complex_types import register_complex_type
from .data_properties import data_property_for, make_complex_property, make_data_property
from .descriptors import EntityDescriptor, TypeRef
from .schema import DataProperty, NavigationProperty

logger = logging.getLogger(__name__)


def classify_entity(ctx, entity: EntityDescriptor) -> Tuple[List[DataProperty], List[NavigationProperty]]:
    """Build the data and navigation properties of entity.

    Properties already declared by a mapped ancestor are skipped; they are
    emitted once, on the ancestor.
    """
    type_ref = entity.type
    inherited = ctx.inherited_property_names(entity)
    natural_id = set(entity.natural_id)

    data_list: List[DataProperty] = []
    nav_list: List[NavigationProperty] = []

    for prop in entity.properties:
        config = ctx.member_config(type_ref, prop.name)
        if prop.name in inherited or config.ignored:
            continue
        # associations wait until all data properties exist, for the FK lookups
        if prop.is_association:
            continue

        if prop.is_embedded and prop.component is not None:
            complex_type_name = register_complex_type(ctx, prop.component)
            data_list.append(
                make_complex_property(config, prop.name, complex_type_name, prop.nullable))
        else:
            data_list.append(data_property_for(
                ctx, type_ref, prop,
                is_key=prop.name in natural_id,
                is_version=prop.name == entity.version_property))

    _add_identifier(ctx, entity, inherited, data_list, nav_list)
    _add_custom_members(ctx, entity, data_list)

    for prop in entity.properties:
        if not prop.is_association:
            continue
        if prop.name in inherited:
            # empty slot, so the ancestor's synthetic properties can be merged in later
            ctx.ensure_synthetic_slot(type_ref)
            continue
        if ctx.member_config(type_ref, prop.name).ignored:
            continue
        nav_list.append(resolve_association(ctx, entity, prop, data_list))

    logger.debug("Classified %s: %d data, %d navigation properties",
                 type_ref.key, len(data_list), len(nav_list))
    return data_list, nav_list


def _add_identifier(ctx, entity: EntityDescriptor, inherited: Set[str],
                    data_list: List[DataProperty], nav_list: List[NavigationProperty]) -> None:
    """Put the identifier property, or the composite key parts, at the front."""
    identifier = entity.identifier
    if identifier is None:
        return

    if not entity.has_composite_identifier:
        if identifier.name in inherited:
            return
        data_list.insert(0, data_property_for(ctx, entity.type, identifier,
                                              is_key=True, is_nullable=False))
        return

    position = 0
    for part in identifier.component.properties:
        if part.name in inherited:
            continue
        if part.is_association:
            nav_list.append(resolve_association(ctx, entity, part, data_list, is_key=True))
        else:
            data_list.insert(position, data_property_for(ctx, entity.type, part, is_key=True))
            position += 1


def _add_custom_members(ctx, entity: EntityDescriptor, data_list: List[DataProperty]) -> None:
    """Append developer-declared members that have no mapping as unmapped properties."""
    model = ctx.model_config(entity.type)
    mapped = set(entity.property_names) | set(entity.identifier_names)

    for member in model.members.values():
        if member.ignored:
            continue
        if not member.is_custom and member.name in mapped:
            continue
        dmap = make_data_property(ctx, member, member.name, TypeRef(member.data_type_name),
                                  member.is_nullable)
        dmap.is_unmapped = True
        data_list.append(dmap)
