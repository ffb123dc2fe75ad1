import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import Config
from metadata import MetadataBuildError
from services import MetadataService

app = Flask(__name__)
app.config.from_object(Config)
# keep the document's field order on the wire
app.json.sort_keys = False

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize extensions
CORS(app, origins=app.config['CORS_ORIGINS'])
app.extensions['metadata_service'] = MetadataService.from_config(app.config)

# Error handlers
@app.errorhandler(MetadataBuildError)
def handle_metadata_error(error):
    return jsonify(error.to_dict()), 500

@app.errorhandler(Exception)
def handle_error(error):
    if isinstance(error, HTTPException):
        return error
    logger.exception("Unhandled error: %s", error)
    return jsonify({
        'error': str(error),
        'error_type': type(error).__name__
    }), 500

# Register routes
from routes import init_routes
init_routes(app)

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
