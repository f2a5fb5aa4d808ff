import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Listen address for run.py
    HOST = os.environ.get('HOST') or '0.0.0.0'
    PORT = int(os.environ.get('PORT') or '3000')
    # Any origin may connect (HTTP and Socket.IO)
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS') or '*'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    # Reject moves from connections that are not seated on the current turn.
    # Off by default: any connection may place the current mark.
    ENFORCE_TURN_ORDER = os.environ.get('ENFORCE_TURN_ORDER', '0').lower() in ('1', 'true', 'yes')
