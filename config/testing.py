SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"

DB_CONFIG = None

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

LOG_LEVEL = "WARNING"
LOG_JSON = False
