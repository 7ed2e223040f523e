"""
Django Settings for Location Tracker
Configuration for SQLite storage, daily log files and the optional API key
"""
import os
from pathlib import Path

from corsheaders.defaults import default_headers

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-change-this-in-production-!!!')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.environ.get('DJANGO_DEBUG', '0') == '1'

ALLOWED_HOSTS = ['*']

# Application definition
INSTALLED_APPS = [
    'corsheaders',
    'apps.locations',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'apps.locations.middleware.ApiErrorMiddleware',
]

ROOT_URLCONF = 'core.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'core.wsgi.application'

# Data and log directories (created on start-up if missing)
DATA_DIR = Path(os.environ.get('LOCATION_TRACKER_DATA_DIR', BASE_DIR / 'data'))
LOG_DIR = Path(os.environ.get('LOCATION_TRACKER_LOG_DIR', BASE_DIR / 'logs'))
DATA_DIR.mkdir(parents=True, exist_ok=True)
LOG_DIR.mkdir(parents=True, exist_ok=True)

# Database configuration - single SQLite file holding the locations table
# CONN_MAX_AGE=None keeps one persistent connection for the life of the server
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': DATA_DIR / 'locations.db',
        'CONN_MAX_AGE': None,
        'TEST': {
            # A file (not :memory:) so the size endpoints have something to stat
            'NAME': DATA_DIR / 'test_locations.db',
        },
    }
}

# Location tracker settings
# Empty API_KEY leaves every route open
LOCATION_TRACKER_API_KEY = os.environ.get('API_KEY', '')
LOCATION_TRACKER_HOST = os.environ.get('HOST', '0.0.0.0')
LOCATION_TRACKER_PORT = int(os.environ.get('PORT', 8080))
LOCATIONS_DB_ALIAS = 'default'

# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.environ.get('TIME_ZONE', 'UTC')
USE_I18N = False
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# Logging configuration: console plus one file per calendar day
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{asctime}] {levelname} {message}',
            'style': '{',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'apps.locations.log_handlers.DailyFileHandler',
            'directory': LOG_DIR,
            'prefix': 'api',
            'formatter': 'verbose',
        },
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
        },
        'apps.locations': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}

# No CSRF middleware: the API has no sessions or cookies and devices can't send CSRF tokens

# CORS: any origin may call the API (browser dashboards on other hosts)
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_HEADERS = (*default_headers, 'x-api-key')
