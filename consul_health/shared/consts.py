from enum import Enum

ALL_DATACENTERS = "all"
DEFAULT_CONSUL_URL = "http://localhost:8500"
DEFAULT_SERVICE = "consul"
DEFAULT_CRITICAL_PERCENT = 50.0
DEFAULT_WARNING_PERCENT = 75.0


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
