def init_routes(app):
    """Initialize all routes"""
    from .metadata_routes import metadata_bp

    app.register_blueprint(metadata_bp, url_prefix='/api/metadata')
