"""
Django settings for magang_project.

Values come from the environment (a local .env file is loaded first).
See .env.example for the full list.
"""
import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.getenv('SECRET_KEY') or 'django-insecure-magang-dev-key-change-me'

DEBUG = env_bool('DEBUG', False)

ALLOWED_HOSTS = [h.strip() for h in os.getenv('ALLOWED_HOSTS', '*').split(',') if h.strip()]

CLIENT_URL = os.getenv('CLIENT_URL', '')

# Browser client allowed to call the API with credentials
CORS_ALLOWED_ORIGINS = [CLIENT_URL.rstrip('/')] if CLIENT_URL else []
CORS_ALLOW_CREDENTIALS = True


# Application definition

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'corsheaders',
    'rest_framework',

    'core.user_accounts',
    'internship.company',
    'internship.placement',
    'internship.logbook',
    'internship.dashboard',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'magang_project.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'magang_project.wsgi.application'


# Database
# The connection pool is bounded by DB_POOL_SIZE (10 by default). PostgreSQL
# uses psycopg's native pool; other engines keep persistent connections.

DB_ENGINE = os.getenv('DB_ENGINE', 'django.db.backends.sqlite3')
DB_POOL_SIZE = int(os.getenv('DB_POOL_SIZE', '10'))

if DB_ENGINE.endswith('sqlite3'):
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': os.getenv('DB_NAME') or str(BASE_DIR / 'magang.sqlite3'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': os.getenv('DB_NAME') or 'magang',
            'USER': os.getenv('DB_USER', ''),
            'PASSWORD': os.getenv('DB_PASSWORD', ''),
            'HOST': os.getenv('DB_HOST') or 'localhost',
            'PORT': os.getenv('DB_PORT', ''),
            'OPTIONS': {},
        }
    }
    if DB_ENGINE.endswith('postgresql'):
        DATABASES['default']['OPTIONS']['pool'] = {'min_size': 1, 'max_size': DB_POOL_SIZE}
    else:
        DATABASES['default']['CONN_MAX_AGE'] = int(os.getenv('DB_CONN_MAX_AGE', '60'))
        DATABASES['default']['CONN_HEALTH_CHECKS'] = True


# Authentication

AUTH_USER_MODEL = 'user_accounts.User'

# Usernames are unique among active accounts only (a conditional constraint),
# so the backend resolves logins through the active-user manager.
AUTHENTICATION_BACKENDS = ['core.user_accounts.backends.ActiveUserBackend']
SILENCED_SYSTEM_CHECKS = ['auth.W004']

PASSWORD_HASHERS = [
    'core.user_accounts.hashers.BCryptCost10PasswordHasher',
    'django.contrib.auth.hashers.BCryptSHA256PasswordHasher',
    'django.contrib.auth.hashers.PBKDF2PasswordHasher',
]

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
     'OPTIONS': {'min_length': 6}},
]


# Internationalization

LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.getenv('TIME_ZONE', 'Asia/Jakarta')
USE_I18N = True
USE_TZ = True


# Static files and uploads

STATIC_URL = 'static/'

MEDIA_ROOT = os.getenv('UPLOAD_DIR') or str(BASE_DIR / 'uploads')
MEDIA_URL = '/api/uploads/'

MAX_UPLOAD_SIZE = int(os.getenv('MAX_UPLOAD_SIZE', str(5 * 1024 * 1024)))
ALLOWED_UPLOAD_EXTENSIONS = ['.jpg', '.jpeg', '.png', '.gif', '.webp', '.pdf', '.doc', '.docx']

DATA_UPLOAD_MAX_MEMORY_SIZE = MAX_UPLOAD_SIZE + 1024 * 1024

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# REST framework

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'core.user_accounts.authentication.SessionTokenAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'magang_project.response_formatter.StandardizedJSONRenderer',
    ),
    'DEFAULT_PARSER_CLASSES': (
        'rest_framework.parsers.JSONParser',
        'rest_framework.parsers.FormParser',
        'rest_framework.parsers.MultiPartParser',
    ),
    'EXCEPTION_HANDLER': 'magang_project.response_formatter.custom_exception_handler',
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

SESSION_TOKEN_DAYS = int(os.getenv('SESSION_TOKEN_DAYS', '7'))

SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(days=SESSION_TOKEN_DAYS),
    'ALGORITHM': 'HS256',
    'SIGNING_KEY': os.getenv('JWT_SECRET') or SECRET_KEY,
    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',
    'UPDATE_LAST_LOGIN': False,
}


# Logging

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': os.getenv('DJANGO_LOG_LEVEL', 'WARNING').upper(),
            'propagate': False,
        },
    },
}
