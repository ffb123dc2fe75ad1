"""
SQLAlchemy metadata provider.

Describes the classes mapped on a declarative registry: column properties,
composites (as embedded types), relationships, inheritance, identifiers
and version columns.
"""

import dataclasses
import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy import Column, Enum as SAEnum, String
from sqlalchemy.orm import (
    ColumnProperty, CompositeProperty, RelationshipProperty, configure_mappers,
)

from ..descriptors import (
    ComponentDescriptor, EntityDescriptor, EnumDescriptor, KeyGeneration,
    PropertyDescriptor, TypeRef,
)
from .base import MetadataProvider

logger = logging.getLogger(__name__)


class SQLAlchemyMetadataProvider(MetadataProvider):
    """Provider over the mappers of a declarative base (or registry)."""

    def __init__(self, base):
        super().__init__()
        self._registry = getattr(base, 'registry', base)
        self._entities: Optional[List[EntityDescriptor]] = None
        self._by_key: Dict[str, EntityDescriptor] = {}

    def get_all_entities(self) -> List[EntityDescriptor]:
        self._ensure_loaded()
        return list(self._entities)

    def get_entity(self, key: str) -> Optional[EntityDescriptor]:
        self._ensure_loaded()
        return self._by_key.get(key)

    def reload(self) -> None:
        """Forget the cached descriptors; the next lookup re-reads the mappers."""
        self._entities = None
        self._by_key = {}

    def _ensure_loaded(self) -> None:
        if self._entities is not None:
            return
        configure_mappers()
        mappers = sorted(self._registry.mappers,
                         key=lambda m: (m.class_.__module__, m.class_.__name__))
        self._entities = [self._describe(m) for m in mappers]
        self._by_key = {e.key: e for e in self._entities}
        logger.debug("Loaded %d SQLAlchemy mappers", len(self._entities))

    # -----------------------------------------------------------------------
    # Mapper -> EntityDescriptor
    # -----------------------------------------------------------------------

    def _describe(self, mapper) -> EntityDescriptor:
        cls = mapper.class_
        pk_columns = list(mapper.primary_key)
        pk_ids = {id(c) for c in pk_columns}
        composite_ids = {
            id(c) for p in mapper.attrs if isinstance(p, CompositeProperty) for c in p.columns
        }

        properties: List[PropertyDescriptor] = []
        natural_id: List[str] = []
        for prop in mapper.attrs:
            if isinstance(prop, ColumnProperty):
                if any(id(c) in pk_ids or id(c) in composite_ids for c in prop.columns):
                    continue
                properties.append(self._column_property(prop))
                if any(getattr(c, 'info', {}).get('natural_id') for c in prop.columns):
                    natural_id.append(prop.key)
            elif isinstance(prop, CompositeProperty):
                properties.append(self._composite_property(prop))
            elif isinstance(prop, RelationshipProperty):
                properties.append(self._relationship_property(prop))

        identifier, key_generation = self._identifier(mapper, pk_columns)

        version_property = None
        if mapper.version_id_col is not None:
            version_property = mapper.get_property_by_column(mapper.version_id_col).key

        return EntityDescriptor(
            type=self._type_ref(cls),
            identifier=identifier,
            key_columns=tuple(c.name for c in pk_columns),
            properties=properties,
            superclass=self._type_ref(mapper.inherits.class_) if mapper.inherits is not None else None,
            key_generation=key_generation,
            natural_id=tuple(natural_id),
            version_property=version_property,
            discriminator_value=self._discriminator_value(mapper),
            mapped_type=cls,
        )

    def _identifier(self, mapper, pk_columns) -> Tuple[Optional[PropertyDescriptor],
                                                       Optional[KeyGeneration]]:
        if not pk_columns:
            return None, None

        parts = []
        for column in pk_columns:
            prop = mapper.get_property_by_column(column)
            part = self._scalar(prop.key, column)
            part.nullable = False
            parts.append(part)

        if len(parts) == 1:
            return parts[0], self._key_generation(pk_columns[0])

        cls = mapper.class_
        component = ComponentDescriptor(type=TypeRef(f"{cls.__name__}Key", cls.__module__),
                                        properties=parts)
        identifier = PropertyDescriptor(
            name=None, type=component.type, nullable=False,
            columns=tuple(c.name for c in pk_columns),
            is_embedded=True, component=component)
        return identifier, KeyGeneration.ASSIGNED

    @staticmethod
    def _key_generation(column) -> KeyGeneration:
        if column.table is not None and column.table.autoincrement_column is column:
            return KeyGeneration.IDENTITY
        if column.default is not None or column.server_default is not None:
            return KeyGeneration.GENERATOR
        if column.foreign_keys:
            return KeyGeneration.FOREIGN
        return KeyGeneration.ASSIGNED

    @staticmethod
    def _discriminator_value(mapper):
        """Discriminator of a type sharing its table with siblings, else None."""
        if mapper.polymorphic_on is None:
            return None
        if mapper.single or any(m.single for m in mapper.self_and_descendants):
            return mapper.polymorphic_identity
        return None

    # -----------------------------------------------------------------------
    # Properties
    # -----------------------------------------------------------------------

    def _column_property(self, prop: ColumnProperty) -> PropertyDescriptor:
        column = prop.columns[0]
        if not isinstance(column, Column):
            # column_property() over an expression
            return PropertyDescriptor(name=prop.key, type=TypeRef(type(column.type).__name__),
                                      columns=(None,))
        descriptor = self._scalar(prop.key, column)
        descriptor.columns = tuple(c.name for c in prop.columns if isinstance(c, Column))
        descriptor.nullable = all(c.nullable for c in prop.columns if isinstance(c, Column))
        return descriptor

    def _scalar(self, name: str, column) -> PropertyDescriptor:
        column_type = column.type
        length = None
        if isinstance(column_type, String) and not isinstance(column_type, SAEnum):
            length = column_type.length

        enum = None
        if isinstance(column_type, SAEnum) and column_type.enum_class is not None:
            enum_class = column_type.enum_class
            enum = EnumDescriptor(name=enum_class.__name__, namespace=enum_class.__module__,
                                  values=tuple(member.name for member in enum_class))

        return PropertyDescriptor(
            name=name,
            type=TypeRef(type(column_type).__name__),
            nullable=column.nullable,
            columns=(column.name,),
            length=length,
            enum=enum,
        )

    def _composite_property(self, prop: CompositeProperty) -> PropertyDescriptor:
        composite_class = prop.composite_class
        columns = list(prop.columns)
        if dataclasses.is_dataclass(composite_class):
            names = [f.name for f in dataclasses.fields(composite_class)]
        else:
            names = [c.key for c in columns]

        parts = [self._scalar(name, column) for name, column in zip(names, columns)]
        component = ComponentDescriptor(
            type=self._type_ref(composite_class), properties=parts)
        return PropertyDescriptor(
            name=prop.key,
            type=component.type,
            nullable=all(c.nullable for c in columns),
            columns=tuple(c.name for c in columns),
            is_embedded=True,
            component=component,
        )

    def _relationship_property(self, prop: RelationshipProperty) -> PropertyDescriptor:
        target = self._type_ref(prop.mapper.class_)
        pairs = list(prop.local_remote_pairs or [])

        columns: Tuple[str, ...] = ()
        referenced: Tuple[str, ...] = ()
        nullable = True
        from_parent = True
        many_to_many = prop.secondary is not None

        if many_to_many:
            # both ends see the same join-table columns
            referenced = tuple(sorted(c.name for c in prop.secondary.columns if c.foreign_keys))
        elif prop.direction.name == 'MANYTOONE':
            columns = tuple(local.name for local, _ in pairs)
            nullable = all(local.nullable for local, _ in pairs)
        else:
            referenced = tuple(remote.name for _, remote in pairs)
            from_parent = False

        prop_type = target
        if prop.uselist:
            collection_class = prop.collection_class or list
            prop_type = TypeRef(getattr(collection_class, '__name__', 'list'), args=(target,))

        return PropertyDescriptor(
            name=prop.key,
            type=prop_type,
            nullable=nullable,
            columns=columns,
            is_association=True,
            is_collection=bool(prop.uselist),
            referenced_columns=referenced,
            many_to_many=many_to_many,
            foreign_key_from_parent=from_parent,
            orphan_delete=bool(prop.cascade.delete_orphan),
        )

    @staticmethod
    def _type_ref(cls) -> TypeRef:
        return TypeRef(cls.__name__, cls.__module__)
