import pytest

from metadata import MetadataBuilder
from metadata.providers import StaticMetadataProvider
from services import MetadataService
from factories import entity, order_customer_entities, to_one


@pytest.fixture
def static_service(client, monkeypatch):
    service = MetadataService(MetadataBuilder(StaticMetadataProvider(order_customer_entities())))
    monkeypatch.setitem(client.application.extensions, 'metadata_service', service)
    return service


# ---------------------------------------------------------------------------
# GET /api/metadata
# ---------------------------------------------------------------------------

def test_get_metadata(client, static_service):
    """Test the document endpoint"""
    response = client.get('/api/metadata')
    assert response.status_code == 200
    data = response.get_json()
    assert list(data) == [
        'localQueryComparisonOptions',
        'structuralTypes',
        'resourceEntityTypeMap',
        'enumTypes',
    ]
    assert data['resourceEntityTypeMap'] == {
        'Customers': 'Customer:#Northwind.Models',
        'Orders': 'Order:#Northwind.Models',
    }


def test_get_metadata_for_sample_models(client):
    """Test the document built from the configured models"""
    response = client.get('/api/metadata')
    assert response.status_code == 200
    data = response.get_json()
    keys = [t['shortName'] for t in data['structuralTypes']]
    assert 'Address' in keys
    assert 'Order' in keys


def test_field_order_is_kept(client, static_service):
    """Test that wire field order is not sorted"""
    response = client.get('/api/metadata')
    assert response.get_data(as_text=True).startswith('{"localQueryComparisonOptions"')


# ---------------------------------------------------------------------------
# GET /api/metadata/foreign-keys
# ---------------------------------------------------------------------------

def test_get_foreign_keys(client, static_service):
    response = client.get('/api/metadata/foreign-keys')
    assert response.status_code == 200
    assert response.get_json() == {'Northwind.Models.Order.Customer': 'CustomerId'}


# ---------------------------------------------------------------------------
# POST /api/metadata/refresh
# ---------------------------------------------------------------------------

def test_refresh(client, static_service):
    before = static_service.get_document()
    response = client.post('/api/metadata/refresh')
    assert response.status_code == 200
    data = response.get_json()
    assert data['structural_types'] == 2
    assert data['foreign_keys'] == 1
    assert static_service.get_document() is not before


def test_refresh_requires_post(client, static_service):
    response = client.get('/api/metadata/refresh')
    assert response.status_code == 405


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def test_build_error_response(client, monkeypatch):
    """Test that a mapping defect is reported as a structured error"""
    broken = entity('Shipment', [to_one('Line', 'OrderLine', ['OrderId', 'LineNo'])])
    service = MetadataService(MetadataBuilder(StaticMetadataProvider([entity('OrderLine'), broken])))
    monkeypatch.setitem(client.application.extensions, 'metadata_service', service)

    response = client.get('/api/metadata')
    assert response.status_code == 500
    data = response.get_json()
    assert data['error_type'] == 'UnresolvableForeignKeyError'
    assert data['entity'] == 'Shipment:#Northwind.Models'
    assert data['property'] == 'Line'
    assert data['columns'] == ['OrderId', 'LineNo']
    assert 'structuralTypes' not in data
