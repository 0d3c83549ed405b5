from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"  # Client fault, safe to expose (400)
    PROVIDER = "provider"  # Email provider rejected the call or was unreachable (500)


class AppEnvironment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
