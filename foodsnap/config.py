from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # Google AI Studio (angle detection)
    GOOGLE_AI_API_KEY: Optional[str] = None
    ANGLE_MODEL: str = "gemini-2.0-flash"  # Fast, cheap vision model
    ANGLE_DETECTION_TIMEOUT: float = 6.0  # seconds, hard limit

    # Vertex AI (mask-based editing)
    GOOGLE_VERTEX_AI_CREDENTIALS: Optional[str] = None  # base64 service account JSON
    VERTEX_AI_REGION: str = "us-central1"
    IMAGEN_EDIT_MODEL: str = "imagen-3.0-capability-001"
    EDIT_REQUEST_TIMEOUT: float = 60.0  # end-to-end bound for one edit call

    # Container publishing (Graph API style)
    GRAPH_API_BASE: str = "https://graph.facebook.com/v21.0"
    GRAPH_USER_ID: Optional[str] = None
    GRAPH_ACCESS_TOKEN: Optional[str] = None
    PUBLISH_POLL_INTERVAL: float = 1.0
    PUBLISH_MAX_POLL_ATTEMPTS: int = 30

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def is_vertex_configured(self) -> bool:
        return bool(self.GOOGLE_VERTEX_AI_CREDENTIALS)

    @property
    def is_publish_configured(self) -> bool:
        return bool(self.GRAPH_USER_ID and self.GRAPH_ACCESS_TOKEN)

settings = Settings()
