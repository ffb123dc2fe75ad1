import importlib
import logging
import threading
from typing import Any, Callable, Dict, Optional

from metadata import MetadataBuilder, MetadataBuildError, ModelConfigurator, SchemaDocument
from metadata.providers import SQLAlchemyMetadataProvider

logger = logging.getLogger(__name__)


class MetadataService:
    """Builds the metadata document on first use and serves the cached copy.

    Builds and rebuilds are serialized; readers never see a half-built
    document. A failed build leaves the previous document in place.
    """

    def __init__(self, builder: MetadataBuilder,
                 include: Optional[Callable[[Any], bool]] = None):
        self.builder = builder
        self._include = include
        self._document: Optional[SchemaDocument] = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config, configurator: Optional[ModelConfigurator] = None):
        """
        Create a service over the declarative base named by the config.

        Reads METADATA_MODELS_MODULE and METADATA_BASE_ATTR to find the base,
        BREEZE_ORPHAN_DELETE_ENABLED and LOCAL_QUERY_COMPARISON_OPTIONS for
        the builder options.
        """
        module = importlib.import_module(config['METADATA_MODELS_MODULE'])
        base = getattr(module, config['METADATA_BASE_ATTR'])
        builder = MetadataBuilder(
            SQLAlchemyMetadataProvider(base),
            configurator=configurator,
            orphan_delete_enabled=config['BREEZE_ORPHAN_DELETE_ENABLED'],
            comparison_options=config['LOCAL_QUERY_COMPARISON_OPTIONS'],
        )
        return cls(builder)

    def get_document(self) -> SchemaDocument:
        document = self._document
        if document is not None:
            return document
        with self._lock:
            if self._document is None:
                self._document = self._build()
            return self._document

    def get_metadata(self) -> Dict[str, Any]:
        """Client-facing metadata as a JSON-ready dict."""
        return self.get_document().to_dict()

    def get_foreign_key_map(self) -> Dict[str, str]:
        return dict(self.get_document().foreign_key_map)

    def refresh(self) -> SchemaDocument:
        """Re-read the mappings and rebuild the document."""
        with self._lock:
            reload = getattr(self.builder.provider, 'reload', None)
            if reload is not None:
                reload()
            self._document = self._build()
            return self._document

    def _build(self) -> SchemaDocument:
        try:
            return self.builder.build(self._include)
        except MetadataBuildError as e:
            logger.error("Metadata build failed (%s): %s", type(e).__name__, e)
            raise
