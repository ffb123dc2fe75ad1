"""
ORM-side descriptors consumed by the metadata builder.

A metadata provider turns its mapping configuration into these plain
dataclasses; the builder never looks at ORM or language-level type
information directly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple


@dataclass(frozen=True)
class TypeRef:
    """Identity of a mapped or primitive type.

    Collection types carry their element either as ``element_type``
    (array-like) or as generic ``args``.
    """
    name: str
    namespace: str = ''
    args: Tuple['TypeRef', ...] = ()
    element_type: Optional['TypeRef'] = None

    @property
    def key(self) -> str:
        """Client type key, e.g. ``Customer:#Northwind.Models``."""
        return f"{self.name}:#{self.namespace}"

    @property
    def full_name(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}.{self.name}"


class KeyGeneration(str, Enum):
    """How an entity's identifier value is produced."""
    IDENTITY = 'identity'
    ASSIGNED = 'assigned'
    FOREIGN = 'foreign'
    GENERATOR = 'generator'


@dataclass(frozen=True)
class EnumDescriptor:
    name: str
    namespace: str
    values: Tuple[str, ...]


@dataclass
class ComponentDescriptor:
    """An embedded value type with no identity of its own."""
    type: TypeRef
    properties: List['PropertyDescriptor'] = field(default_factory=list)


@dataclass
class PropertyDescriptor:
    """One mapped member of an entity or component."""
    name: Optional[str]
    type: TypeRef
    nullable: bool = True
    columns: Tuple[Optional[str], ...] = ()
    length: Optional[int] = None
    is_association: bool = False
    is_collection: bool = False
    is_embedded: bool = False
    component: Optional[ComponentDescriptor] = None
    enum: Optional[EnumDescriptor] = None

    # association-only
    referenced_columns: Tuple[str, ...] = ()
    many_to_many: bool = False
    foreign_key_from_parent: bool = True
    orphan_delete: bool = False


@dataclass
class EntityDescriptor:
    """Mapping of one entity type.

    ``properties`` lists every mapped non-identifier property, including
    the ones declared on mapped ancestors.
    """
    type: TypeRef
    identifier: Optional[PropertyDescriptor] = None
    key_columns: Tuple[str, ...] = ()
    properties: List[PropertyDescriptor] = field(default_factory=list)
    superclass: Optional[TypeRef] = None
    key_generation: Optional[KeyGeneration] = None
    natural_id: Tuple[str, ...] = ()
    version_property: Optional[str] = None
    discriminator_value: Optional[Any] = None
    mapped_type: Optional[type] = None

    @property
    def key(self) -> str:
        return self.type.key

    @property
    def property_names(self) -> List[str]:
        return [p.name for p in self.properties]

    @property
    def has_composite_identifier(self) -> bool:
        return (self.identifier is not None and self.identifier.is_embedded
                and self.identifier.component is not None)

    @property
    def identifier_names(self) -> List[str]:
        """Names the identifier occupies: its own name and any composite parts."""
        if self.identifier is None:
            return []
        names = [self.identifier.name] if self.identifier.name else []
        if self.has_composite_identifier:
            names.extend(p.name for p in self.identifier.component.properties)
        return names

    def get_property(self, name: str) -> Optional[PropertyDescriptor]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


@dataclass
class SyntheticProperty:
    """Surrogate scalar standing in for a foreign key with no mapped property."""
    name: str
    fk_property_name: str
    fk_type: TypeRef
    pk_type: TypeRef
    pk_property_name: Optional[str]
    is_nullable: bool
