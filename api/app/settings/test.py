from . import base

for k, v in base.__dict__.items():
    if k.isupper():
        globals()[k] = v

# Test overrides (executed when DJANGO_ENV=test or manage.py test sets 'test' in argv)
DEBUG = True
ALLOWED_HOSTS = [*base.ALLOWED_HOSTS, 'testserver']
DATABASES = {'default': {'ENGINE': 'django.db.backends.sqlite3', 'NAME': ':memory:'}}
CELERY_TASK_ALWAYS_EAGER = True  # ensure tasks run inline for assertions
# Tests point the loader at temporary folders through override_settings
MESSAGEFILES_PATH = None
MESSAGEFILES_DEFAULT_LOCALE = None
MESSAGEFILES_WATCH = False
LANGUAGES = [('en', 'English'), ('fr', 'French'), ('de', 'German')]
