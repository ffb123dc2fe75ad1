"""
Association resolution: navigation properties and their foreign keys.

For every association this works out the related type, the physical FK
columns, the association name shared by both ends, and which scalar
properties carry the key. It also fills the foreign-key map used when
relationships are re-linked during a save.
"""

import logging
from typing import List, Optional, Sequence

from .data_properties import find_property_by_name, make_data_property
from .descriptors import EntityDescriptor, PropertyDescriptor, SyntheticProperty, TypeRef
from .errors import (
    MissingEntityMetadataError, UnknownRelatedTypeError, UnresolvableForeignKeyError,
)
from .naming import association_name, names_equal, to_pascal_case, unbracket_all
from .schema import DataProperty, NavigationProperty

logger = logging.getLogger(__name__)


def resolve_association(ctx, entity: EntityDescriptor, prop: PropertyDescriptor,
                        data_properties: List[DataProperty],
                        is_key: bool = False) -> NavigationProperty:
    """Make the navigation property for an association of entity.

    Args:
        ctx: The current BuildContext.
        entity: The entity containing the property.
        prop: The association property.
        data_properties: Data properties already built for entity. A
            synthetic FK property may be appended, and "isPartOfKey" may be
            set on existing ones.
        is_key: Whether the association is part of the entity's key.

    Raises:
        UnresolvableForeignKeyError: a to-one association whose FK columns
            match no property and cannot be synthesized.
    """
    related_type = related_entity_type(entity, prop)
    column_names = property_column_names(entity, prop)
    related_name = _association_type_name(ctx, related_type, prop.name)

    nmap = NavigationProperty(
        name_on_server=prop.name,
        entity_type_name=related_type.key,
        is_scalar=not prop.is_collection,
        association_name=association_name(entity.type.name, related_name, column_names),
    )

    if ctx.orphan_delete_enabled:
        nmap.has_orphan_delete = prop.orphan_delete

    config = ctx.member_config(entity.type, prop.name)
    if config.serialized_name:
        nmap.name = config.serialized_name

    if prop.is_collection:
        # many-to-many relationships have no direct connection on the client
        if not prop.many_to_many:
            element = ctx.provider.get_entity(related_type.key)
            if element is not None:
                fk_names = find_property_names_for_columns(element, column_names)
                if fk_names is not None:
                    nmap.inv_foreign_key_names_on_server = fk_names
        return nmap

    entity_relationship = f"{entity.type.full_name}.{prop.name}"
    owned_by_related = not prop.foreign_key_from_parent

    fk_names = None
    if owned_by_related:
        related = ctx.provider.get_entity(related_type.key)
        if related is not None:
            fk_names = find_property_names_for_columns(related, column_names)
    if fk_names is None:
        fk_names = find_property_names_for_columns(entity, column_names)

    # only single-column keys get a surrogate; a multi-column miss is fatal
    if fk_names is None and len(column_names) == 1:
        if owned_by_related:
            # the surrogate lives on the related side, under the same derived name
            fk_names = [to_pascal_case(column_names[0])]
        else:
            fk_names = [_add_synthetic_property(ctx, entity, prop, related_type,
                                                column_names[0], data_properties)]

    if fk_names is None:
        ctx.add_foreign_key(entity_relationship, column_names)
        raise UnresolvableForeignKeyError(
            f"Could not find matching fk for property {entity_relationship} "
            f"(columns: {', '.join(column_names)})",
            entity=entity.key, property_name=prop.name, columns=column_names)

    if prop.foreign_key_from_parent:
        nmap.foreign_key_names_on_server = fk_names
    else:
        nmap.inv_foreign_key_names_on_server = fk_names

    ctx.add_foreign_key(entity_relationship, column_names)

    if is_key:
        for fk_name in fk_names:
            related_data_property = find_property_by_name(data_properties, fk_name)
            if related_data_property is not None:
                related_data_property.is_part_of_key = True

    return nmap


def related_entity_type(entity: EntityDescriptor, prop: PropertyDescriptor) -> TypeRef:
    """The client-side entity type of an association.

    Collections are unwrapped one level, to their element type.
    """
    if not prop.is_collection:
        return prop.type
    if prop.type.element_type is not None:
        return prop.type.element_type
    if len(prop.type.args) == 1:
        return prop.type.args[0]
    raise UnknownRelatedTypeError(
        f"Don't know how to handle collection type {prop.type.full_name} "
        f"of {entity.type.full_name}.{prop.name}",
        entity=entity.key, property_name=prop.name)


def property_column_names(entity: EntityDescriptor, prop: PropertyDescriptor) -> List[str]:
    """Unbracketed FK column names for an association.

    For a collection, and for a to-one whose key lives on the other table,
    these are the inverse columns on the related table.
    """
    if prop.is_collection or not prop.foreign_key_from_parent:
        columns = list(prop.referenced_columns)
    else:
        columns = list(prop.columns)
    if not columns:
        # happens when the property is part of the key
        columns = list(entity.key_columns)
    if not columns or columns[0] is None:
        # formula-mapped property
        columns = [prop.name]
    return unbracket_all(columns)


def find_property_names_for_columns(entity: EntityDescriptor, column_names: Sequence[str],
                                    decompose: bool = True) -> Optional[List[str]]:
    """Names of the properties of entity mapped to exactly column_names.

    May return a component property, never an association. When nothing
    matches a multi-column set, each column is tried on its own and the
    matches are combined.
    """
    for prop in _searchable_properties(entity):
        columns = prop.columns
        if not columns or columns[0] is None:
            continue
        if names_equal(columns, column_names):
            return [prop.name]

    # maybe the columns are the identifier
    if entity.identifier is not None and entity.key_columns \
            and names_equal(entity.key_columns, column_names):
        if entity.identifier.name:
            return [entity.identifier.name]
        if entity.has_composite_identifier:
            return [p.name for p in entity.identifier.component.properties]

    if decompose and len(column_names) > 1:
        found: List[str] = []
        for column in column_names:
            names = find_property_names_for_columns(entity, [column], decompose=False)
            if names:
                found.extend(n for n in names if n not in found)
        if found:
            return found

    return None


def _searchable_properties(entity: EntityDescriptor) -> List[PropertyDescriptor]:
    props = [p for p in entity.properties if not p.is_association]
    if entity.has_composite_identifier:
        props.extend(p for p in entity.identifier.component.properties
                     if not p.is_association)
    return props


def _association_type_name(ctx, related_type: TypeRef, prop_name: str) -> str:
    """Short name of the related type as used in the association name.

    When the property is declared on a discriminated (table-per-hierarchy)
    type, the declaring type's name is used so every sibling agrees.
    """
    related = ctx.provider.get_entity(related_type.key)
    if related is None or related.get_property(prop_name) is None:
        return related_type.name

    declaring = related
    for ancestor in ctx.ancestors(related, registered_only=False):
        if ancestor.get_property(prop_name) is None:
            break
        declaring = ancestor

    if declaring.discriminator_value is not None:
        return declaring.type.name
    return related_type.name


def _add_synthetic_property(ctx, entity: EntityDescriptor, prop: PropertyDescriptor,
                            related_type: TypeRef, column_name: str,
                            data_properties: List[DataProperty]) -> str:
    """Create an unmapped FK scalar for a to-one association and return its name.

    Several associations over the same column share one surrogate.
    """
    name = to_pascal_case(column_name)
    existing = find_property_by_name(data_properties, name)
    if existing is not None and existing.is_unmapped:
        return name

    related = ctx.provider.get_entity(related_type.key)
    if related is None or related.identifier is None:
        raise MissingEntityMetadataError(
            f"Could not find related entity of type {related_type.full_name}",
            entity=entity.key, property_name=prop.name, columns=[column_name])

    pk = related.identifier
    synthetic = SyntheticProperty(
        name=name,
        fk_property_name=prop.name,
        fk_type=related_type,
        pk_type=pk.type,
        pk_property_name=pk.name,
        is_nullable=prop.nullable,
    )
    ctx.add_synthetic_property(entity.type, synthetic)

    dmap = make_data_property(ctx, ctx.member_config(entity.type, name), name,
                              pk.type, synthetic.is_nullable, length=pk.length)
    dmap.is_unmapped = True
    data_properties.append(dmap)
    logger.debug("Synthesized foreign key property %s.%s for %s",
                 entity.type.name, name, prop.name)
    return name
