"""
Metadata providers: the ORM-facing side of the metadata builder.

A provider enumerates entity descriptors and, after a build, keeps the
synthetic FK properties so they can be filled in on live entities.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..descriptors import EntityDescriptor, SyntheticProperty

logger = logging.getLogger(__name__)


class MetadataProvider:
    """Base class for ORM metadata providers."""

    def __init__(self):
        self._synthetic_properties: Dict[str, List[SyntheticProperty]] = {}

    def get_all_entities(self) -> List[EntityDescriptor]:
        """Return every mapped entity descriptor, in a stable order.

        Subclasses must override this method.
        """
        raise NotImplementedError

    def get_entity(self, key: str) -> Optional[EntityDescriptor]:
        """Return the descriptor for a type key, or None if it is not mapped.

        Subclasses must override this method.
        """
        raise NotImplementedError

    def type_key_for(self, cls: type) -> str:
        return f"{cls.__name__}:#{cls.__module__}"

    # -----------------------------------------------------------------------
    # Synthetic properties
    # -----------------------------------------------------------------------

    def set_synthetic_properties(self, table: Dict[str, List[SyntheticProperty]]) -> None:
        """Take the synthetic properties of a build.

        Subtypes get their ancestors' synthetic properties appended, so an
        instance of a subtype carries the FK values declared on its base.
        """
        merged: Dict[str, List[SyntheticProperty]] = {}
        for type_key, props in table.items():
            merged[type_key] = list(props)
            entity = self.get_entity(type_key)
            for ancestor_key in self._ancestor_keys(entity):
                for prop in table.get(ancestor_key, []):
                    if all(p.name != prop.name for p in merged[type_key]):
                        merged[type_key].append(prop)
        self._synthetic_properties = merged
        logger.debug("Registered synthetic properties for %d types", len(merged))

    def synthetic_properties_for(self, type_key: str) -> List[SyntheticProperty]:
        return list(self._synthetic_properties.get(type_key, []))

    def synthetic_values(self, instance: Any, type_key: Optional[str] = None) -> Dict[str, Any]:
        """Raw FK values of instance for its synthetic properties.

        The value is read through the navigation property: the related
        entity's identifier, or None when nothing is related.
        """
        key = type_key or self.type_key_for(type(instance))
        values: Dict[str, Any] = {}
        for prop in self._synthetic_properties.get(key, []):
            related = getattr(instance, prop.fk_property_name, None)
            if related is None or prop.pk_property_name is None:
                values[prop.name] = None
            else:
                values[prop.name] = getattr(related, prop.pk_property_name, None)
        return values

    def _ancestor_keys(self, entity: Optional[EntityDescriptor]) -> List[str]:
        keys: List[str] = []
        current = entity
        while current is not None and current.superclass is not None:
            key = current.superclass.key
            if key in keys:
                break
            keys.append(key)
            current = self.get_entity(key)
        return keys


class StaticMetadataProvider(MetadataProvider):
    """Provider over a fixed list of descriptors."""

    def __init__(self, entities: Iterable[EntityDescriptor]):
        super().__init__()
        self._entities = list(entities)
        self._by_key = {e.key: e for e in self._entities}

    def get_all_entities(self) -> List[EntityDescriptor]:
        return list(self._entities)

    def get_entity(self, key: str) -> Optional[EntityDescriptor]:
        return self._by_key.get(key)
