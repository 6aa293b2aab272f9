"""Configuration for the StatsD line parser"""
import codecs
from pathlib import Path
from typing import Dict, Literal, Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Environment-based settings (STATSD_ prefix)"""
    
    # Parsing
    encoding: str = Field(default="utf-8", description="Text encoding of metric payloads")
    strict: bool = Field(default=True, description="Reject the whole payload when any line is malformed")
    input_file: Optional[Path] = Field(default=None, description="Read the payload from this file instead of stdin")
    
    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file, logs always go to stderr")
    environment: Literal["production", "development"] = Field(default="production", description="JSON logs in production, console logs in development")
    
    # Service settings
    service_name: str = Field(default="statsd-line-parser", description="Service name")
    service_version: str = Field(default="0.1.0", description="Service version")
    
    class Config:
        env_prefix = "STATSD_"
        case_sensitive = False
    
    @validator('encoding')
    def validate_encoding(cls, v):
        try:
            name = codecs.lookup(v).name
            # Binary transforms (base64, rot13, ...) are not text encodings
            "\n".encode(name).decode(name)
        except LookupError:
            raise ValueError(f"Not a text encoding: {v}")
        return name
    
    @validator('log_level', pre=True)
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v
    
    @validator('log_file')
    def ensure_log_directory(cls, v):
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v
    
    def get_service_attributes(self) -> Dict[str, str]:
        """Attributes identifying this process in log records"""
        return {
            "service.name": self.service_name,
            "service.version": self.service_version,
        }
