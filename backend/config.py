import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    # Module holding the declarative base whose mappings are published
    METADATA_MODELS_MODULE = os.environ.get('METADATA_MODELS_MODULE', 'models')
    METADATA_BASE_ATTR = os.environ.get('METADATA_BASE_ATTR', 'Base')

    # Breeze client options
    BREEZE_ORPHAN_DELETE_ENABLED = _env_flag('BREEZE_ORPHAN_DELETE_ENABLED')
    LOCAL_QUERY_COMPARISON_OPTIONS = os.environ.get('LOCAL_QUERY_COMPARISON_OPTIONS',
                                                    'caseInsensitiveSQL')

    CORS_ORIGINS = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
