import os

PORT = int(os.getenv('PORT', '3000'))
HOST = os.getenv('HOST', '0.0.0.0')

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
if LOG_LEVEL not in ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG'):
    LOG_LEVEL = 'INFO'

METRICS_ENABLED = os.getenv('METRICS_ENABLED', 'false').lower() in ('1', 'true', 'yes')
METRICS_PORT = int(os.getenv('METRICS_PORT', '8001'))

# Comma separated list; '*' allows any origin
CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()]
