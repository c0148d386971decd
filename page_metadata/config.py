"""
Configuration management for the page metadata parser.
Handles environment variables and service settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""
    
    # Server settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")  # json or console
    
    # Parsing
    HTML_PARSER: str = os.getenv("HTML_PARSER", "lxml")  # any bs4 tree builder
    MAX_HTML_BYTES: int = int(os.getenv("MAX_HTML_BYTES", str(5 * 1024 * 1024)))


config = Config()
