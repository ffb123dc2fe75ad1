import pytest

from metadata import MetadataBuilder
from metadata.providers import StaticMetadataProvider


@pytest.fixture
def client():
    """Create test client"""
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def build():
    """Build a document from descriptors; returns (document, provider)"""
    def _build(entities, **options):
        provider = StaticMetadataProvider(entities)
        document = MetadataBuilder(provider, **options).build()
        return document, provider
    return _build
