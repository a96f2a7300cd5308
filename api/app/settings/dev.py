import os

from . import base

# Re-export uppercase symbols from base
for k, v in base.__dict__.items():
    if k.isupper():
        globals()[k] = v

# Development overrides
DEBUG = True
ALLOWED_HOSTS = sorted({*base.ALLOWED_HOSTS, '127.0.0.1', 'localhost', 'testserver'})
# Re-scan locale property files before each request
MESSAGEFILES_WATCH = os.getenv('MESSAGEFILES_WATCH', '1') == '1'
