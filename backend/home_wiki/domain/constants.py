"""Column length limits shared by the ORM models and the request schemas."""

NAME_MAX_LENGTH = 150
DESCRIPTION_MAX_LENGTH = 5000
AUDIT_USER_MAX_LENGTH = 50

DEFAULT_AUDIT_USER = "system"
