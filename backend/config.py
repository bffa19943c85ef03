class Config:
    HOST = '0.0.0.0'
    PORT = 5000
    # Only the game frontend may call the API
    CORS_ALLOWED_ORIGINS = ['http://localhost:3000']
    CORS_ALLOWED_METHODS = ['GET', 'POST', 'PUT', 'DELETE']
    CORS_ALLOWED_HEADERS = ['Origin', 'Content-Type', 'Accept']
    REQUEST_LOGGING = True
    REQUEST_LOG_TIME_FORMAT = '%Y-%m-%d %H:%M:%S'
