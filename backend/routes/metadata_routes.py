from flask import Blueprint, current_app, jsonify

metadata_bp = Blueprint('metadata', __name__)


def _service():
    return current_app.extensions['metadata_service']


@metadata_bp.route('', methods=['GET'])
def get_metadata():
    """Metadata document for the Breeze client"""
    return jsonify(_service().get_metadata()), 200


@metadata_bp.route('/foreign-keys', methods=['GET'])
def get_foreign_keys():
    """Foreign-key index used to re-link relationships on save"""
    return jsonify(_service().get_foreign_key_map()), 200


@metadata_bp.route('/refresh', methods=['POST'])
def refresh_metadata():
    """Rebuild the document from the current mappings"""
    document = _service().refresh()
    return jsonify({
        'message': 'Metadata rebuilt',
        'structural_types': len(document.structural_types),
        'enum_types': len(document.enum_types),
        'foreign_keys': len(document.foreign_key_map)
    }), 200
