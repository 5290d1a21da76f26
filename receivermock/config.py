"""Configuration for the receiver-mock test client"""
import ssl
from pathlib import Path
from typing import Literal, Optional, Union
from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Environment-based settings for reaching receiver-mock"""

    # Receiver settings
    receiver_mock_url: str = Field(default="http://localhost:3000/", description="Base URL of receiver-mock")

    # TLS settings
    tls_verify: bool = Field(default=True, description="Verify the receiver's TLS certificate")
    tls_ca_bundle: Optional[Path] = Field(default=None, description="CA bundle used to verify the receiver")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file")

    class Config:
        env_prefix = ""
        case_sensitive = False

    @validator('receiver_mock_url')
    def validate_receiver_mock_url(cls, v):
        """Reject an empty receiver URL"""
        if not v or not v.strip():
            raise ValueError("RECEIVER_MOCK_URL must not be empty")
        return v.strip()

    @validator('log_level', pre=True)
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @validator('log_file')
    def ensure_log_directory(cls, v):
        """Ensure the parent directory of the log file exists"""
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    def get_verify(self) -> Union[bool, str, ssl.SSLContext]:
        """Map TLS settings onto httpx's verify argument"""
        if not self.tls_verify:
            return False
        if self.tls_ca_bundle:
            return ssl.create_default_context(cafile=str(self.tls_ca_bundle))
        return True
