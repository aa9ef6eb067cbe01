from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class AuditSettings(BaseSettings):
    """Where high priority task events are appended."""
    AUDIT_LOG_PATH: str = "logs/critical-high-priority-tasks.log"

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_audit_settings() -> AuditSettings:
    return AuditSettings()
