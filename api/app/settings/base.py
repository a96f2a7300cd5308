import os
from pathlib import Path
import dj_database_url
from django.conf.locale import LANG_INFO

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
DEBUG = os.getenv('DEBUG', '0') == '1'

ALLOWED_HOSTS = [h for h in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h]
if DEBUG:
    for h in ('testserver',):
        if h not in ALLOWED_HOSTS:
            ALLOWED_HOSTS.append(h)

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'messagefiles',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'messagefiles.middleware.MessageFilesReloadMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'app.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'app.wsgi.application'

DATABASES = {
    'default': dj_database_url.parse(os.getenv('DATABASE_URL', f'sqlite:///{BASE_DIR / "db.sqlite3"}'), conn_max_age=600)
}

LANGUAGE_CODE = os.getenv('LANGUAGE_CODE', 'en')
LANGUAGES = [
    (code.strip(), LANG_INFO.get(code.strip(), {}).get('name', code.strip()))
    for code in os.getenv('LANGUAGES', 'en,fr,de').split(',')
    if code.strip()
]
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Locale property files (messagefiles app)
MESSAGEFILES_PATH = os.getenv('MESSAGEFILES_PATH', '').strip() or None
MESSAGEFILES_DEFAULT_LOCALE = os.getenv('MESSAGEFILES_DEFAULT_LOCALE', '').strip() or None
MESSAGEFILES_ENABLE_DIAGNOSTICS = os.getenv('MESSAGEFILES_ENABLE_DIAGNOSTICS', '0') == '1'
MESSAGEFILES_MERGE_POLICY = os.getenv('MESSAGEFILES_MERGE_POLICY', 'accumulate').strip().lower()
MESSAGEFILES_FAIL_ON_FILESYSTEM_ERROR = os.getenv('MESSAGEFILES_FAIL_ON_FILESYSTEM_ERROR', '0') == '1'
MESSAGEFILES_WATCH = os.getenv('MESSAGEFILES_WATCH', '1' if DEBUG else '0') == '1'
MESSAGEFILES_CHECK_INTERVAL = int(os.getenv('MESSAGEFILES_CHECK_INTERVAL', '60'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'console': {
            'format': '%(asctime)s %(levelname)-8s %(name)s - %(message)s',
            'datefmt': '%H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'console',
        },
    },
    'loggers': {
        'messagefiles': {
            'handlers': ['console'],
            'level': os.getenv('MESSAGEFILES_LOG_LEVEL', 'INFO'),
            'propagate': True,
        },
    },
}

CELERY_BROKER_URL = os.getenv('REDIS_URL', '')
CELERY_RESULT_BACKEND = os.getenv('REDIS_URL', '')
CELERY_TASK_ALWAYS_EAGER = os.getenv('CELERY_TASK_ALWAYS_EAGER', '0') == '1'
