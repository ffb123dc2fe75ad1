"""
Metadata builder: assembles the client metadata document.

Walks every entity descriptor the provider exposes and produces the
structural types, resource names and enum types the Breeze client needs,
plus the server-side foreign-key map.
See http://www.breezejs.com/documentation/breeze-metadata-format
"""

import logging
from typing import Any, Callable, Optional

from .classifier import classify_entity
from .configuration import ModelConfigurator
from .context import BuildContext
from .descriptors import EntityDescriptor, KeyGeneration
from .pluralizer import Pluralizer
from .schema import DEFAULT_COMPARISON_OPTIONS, SchemaDocument, TypeNode

logger = logging.getLogger(__name__)

_AUTO_GENERATED_KEY_TYPES = {
    KeyGeneration.IDENTITY: 'Identity',
    KeyGeneration.ASSIGNED: 'None',
    KeyGeneration.FOREIGN: 'None',
    KeyGeneration.GENERATOR: 'KeyGenerator',
}


class MetadataBuilder:
    """Builds a fresh SchemaDocument from a metadata provider on every call."""

    def __init__(self, provider, configurator: Optional[ModelConfigurator] = None,
                 pluralizer: Optional[Pluralizer] = None,
                 orphan_delete_enabled: bool = False,
                 comparison_options: str = DEFAULT_COMPARISON_OPTIONS):
        self.provider = provider
        self.configurator = configurator or ModelConfigurator()
        self.pluralizer = pluralizer or Pluralizer()
        self.orphan_delete_enabled = orphan_delete_enabled
        self.comparison_options = comparison_options

    def build(self, include: Optional[Callable[[Any], bool]] = None) -> SchemaDocument:
        """Build the metadata document.

        Args:
            include: Optional predicate over an entity's mapped type; entities
                it rejects are left out.

        Raises:
            MetadataBuildError: the mapping configuration cannot be expressed
                as client metadata. No partial document is returned.
        """
        entities = list(self.provider.get_all_entities())
        if include is not None:
            entities = [e for e in entities if include(e.mapped_type)]

        ctx = BuildContext(self.provider, self.configurator,
                           orphan_delete_enabled=self.orphan_delete_enabled,
                           comparison_options=self.comparison_options,
                           entity_keys=[e.key for e in entities])

        for entity in entities:
            self._add_entity(ctx, entity)

        self.provider.set_synthetic_properties(ctx.synthetic_properties)

        document = ctx.document
        logger.info("Built metadata: %d structural types, %d enum types, %d foreign keys",
                    len(document.structural_types), len(document.enum_types),
                    len(document.foreign_key_map))
        return document

    def _add_entity(self, ctx: BuildContext, entity: EntityDescriptor) -> None:
        type_ref = entity.type
        cmap = TypeNode(short_name=type_ref.name, namespace=type_ref.namespace)
        ctx.add_entity_type(cmap)

        if entity.superclass is not None and ctx.is_registered(entity.superclass.key):
            cmap.base_type_name = entity.superclass.key

        if entity.key_generation is not None:
            cmap.auto_generated_key_type = _AUTO_GENERATED_KEY_TYPES[entity.key_generation]

        resource_name = ctx.model_config(type_ref).resource_name \
            or self.pluralizer.pluralize(type_ref.name)
        cmap.default_resource_name = resource_name
        ctx.add_resource_name(resource_name, cmap.key)

        logger.debug("Adding entity type %s as '%s'", cmap.key, resource_name)
        data_list, nav_list = classify_entity(ctx, entity)
        cmap.data_properties = data_list
        cmap.navigation_properties = nav_list
