"""
Working state of a single metadata build.

Every build gets its own BuildContext, so concurrent builds never share
anything but the (read-only) provider and configurator.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .configuration import MemberConfiguration, ModelConfiguration, ModelConfigurator
from .descriptors import EntityDescriptor, EnumDescriptor, SyntheticProperty, TypeRef
from .errors import DuplicateForeignKeyError, DuplicateResourceNameError, DuplicateTypeError
from .schema import DEFAULT_COMPARISON_OPTIONS, EnumType, SchemaDocument, TypeNode

logger = logging.getLogger(__name__)


class BuildContext:
    """In-progress document plus the registries the build steps share."""

    def __init__(self, provider, configurator: Optional[ModelConfigurator] = None,
                 orphan_delete_enabled: bool = False,
                 comparison_options: str = DEFAULT_COMPARISON_OPTIONS,
                 entity_keys: Optional[Iterable[str]] = None):
        self.provider = provider
        self.configurator = configurator or ModelConfigurator()
        self.orphan_delete_enabled = orphan_delete_enabled
        # keys of the entities in this build; None means every provider entity
        self.entity_keys: Optional[Set[str]] = None
        if entity_keys is not None:
            self.entity_keys = set(entity_keys)
        self.document = SchemaDocument(local_query_comparison_options=comparison_options)
        self.type_names: Set[str] = set()
        self.synthetic_properties: Dict[str, List[SyntheticProperty]] = {}
        self._ancestors: Dict[Tuple[str, bool], List[EntityDescriptor]] = {}

    # -----------------------------------------------------------------------
    # Configuration lookups
    # -----------------------------------------------------------------------

    def model_config(self, type_ref: TypeRef) -> ModelConfiguration:
        return self.configurator.get_model_configuration(type_ref)

    def member_config(self, type_ref: TypeRef, name: Optional[str]) -> MemberConfiguration:
        return self.configurator.get_member_configuration(type_ref, name)

    # -----------------------------------------------------------------------
    # Document registries
    # -----------------------------------------------------------------------

    def add_entity_type(self, node: TypeNode) -> None:
        if node.key in self.type_names:
            raise DuplicateTypeError(f"Type {node.key} is mapped more than once",
                                     entity=node.key)
        self.type_names.add(node.key)
        self.document.structural_types.append(node)

    def add_complex_type(self, node: TypeNode) -> None:
        self.type_names.add(node.key)
        self.document.structural_types.insert(0, node)

    def add_resource_name(self, resource_name: str, type_key: str) -> None:
        resource_map = self.document.resource_entity_type_map
        if resource_name in resource_map:
            raise DuplicateResourceNameError(
                f"Resource name '{resource_name}' of {type_key} is already used by "
                f"{resource_map[resource_name]}; configure a resource name override",
                entity=type_key)
        resource_map[resource_name] = type_key

    def add_enum(self, enum: EnumDescriptor) -> None:
        if any(e.short_name == enum.name for e in self.document.enum_types):
            return
        self.document.enum_types.append(
            EnumType(short_name=enum.name, namespace=enum.namespace, values=list(enum.values)))

    def add_foreign_key(self, relationship: str, column_names: List[str]) -> None:
        fk_map = self.document.foreign_key_map
        if relationship in fk_map:
            raise DuplicateForeignKeyError(
                f"Foreign key for {relationship} recorded twice",
                entity=relationship.rsplit('.', 1)[0],
                property_name=relationship.rsplit('.', 1)[-1],
                columns=column_names)
        fk_map[relationship] = ','.join(column_names)

    def add_synthetic_property(self, type_ref: TypeRef, prop: SyntheticProperty) -> None:
        self.synthetic_properties.setdefault(type_ref.key, []).append(prop)

    def ensure_synthetic_slot(self, type_ref: TypeRef) -> None:
        self.synthetic_properties.setdefault(type_ref.key, [])

    # -----------------------------------------------------------------------
    # Inheritance
    # -----------------------------------------------------------------------

    def is_registered(self, key: str) -> bool:
        """Whether the entity with this key is part of the current build."""
        if self.entity_keys is None:
            return self.provider.get_entity(key) is not None
        return key in self.entity_keys

    def ancestors(self, entity: EntityDescriptor,
                  registered_only: bool = True) -> List[EntityDescriptor]:
        """Mapped ancestors of entity, nearest first.

        Stops at the first superclass the provider does not know about or,
        with registered_only, at the first one left out of the build.
        """
        memo_key = (entity.key, registered_only)
        cached = self._ancestors.get(memo_key)
        if cached is not None:
            return cached

        chain: List[EntityDescriptor] = []
        seen = {entity.key}
        current = entity
        while current.superclass is not None:
            parent = self.provider.get_entity(current.superclass.key)
            if parent is None or parent.key in seen:
                break
            if registered_only and not self.is_registered(parent.key):
                break
            chain.append(parent)
            seen.add(parent.key)
            current = parent

        self._ancestors[memo_key] = chain
        return chain

    def inherited_property_names(self, entity: EntityDescriptor) -> Set[str]:
        """Names already declared by a registered ancestor, identifier included."""
        names: Set[str] = set()
        for ancestor in self.ancestors(entity):
            names.update(ancestor.property_names)
            names.update(ancestor.identifier_names)
        return names
