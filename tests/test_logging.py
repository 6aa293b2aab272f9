"""Tests for logging configuration"""
import logging

from config import Config
from logging_config import (
    setup_structured_logging,
    get_logger,
    log_startup,
    log_ingest_summary,
    log_error
)


class TestLoggingConfig:
    """Test logging configuration and structured logging"""
    
    def test_setup_structured_logging(self):
        """Test structured logging setup"""
        config = Config(log_level="DEBUG")
        
        setup_structured_logging(config)
        
        logger = logging.getLogger("test")
        assert logger.isEnabledFor(logging.DEBUG)
    
    def test_log_file(self, tmp_path):
        """Test records reach the configured log file"""
        log_file = tmp_path / "logs" / "parser.log"
        config = Config(log_file=log_file)
        
        setup_structured_logging(config)
        get_logger("test").info("Written to file", event_type="test")
        
        content = log_file.read_text()
        assert "Written to file" in content
        assert '"event_type": "test"' in content
    
    def test_development_vs_production_logging(self, tmp_path):
        """Test console rendering in development and JSON in production"""
        dev_file = tmp_path / "dev.log"
        setup_structured_logging(Config(environment="development", log_file=dev_file))
        get_logger("test").info("Test development log")
        assert not dev_file.read_text().lstrip().startswith("{")
        
        prod_file = tmp_path / "prod.log"
        setup_structured_logging(Config(environment="production", log_file=prod_file))
        get_logger("test").info("Test production log")
        assert prod_file.read_text().lstrip().startswith("{")
    
    def test_get_logger(self):
        """Test getting structured logger"""
        logger = get_logger("test_logger")
        
        assert logger is not None
        assert hasattr(logger, 'info')
        assert hasattr(logger, 'warning')
    
    def test_log_helpers(self):
        """Test helper functions log without raising"""
        setup_structured_logging(Config())
        logger = get_logger("test")
        
        log_startup(logger, Config())
        log_ingest_summary(logger, accepted=10, rejected=0, elapsed=0.0123)
        log_error(logger, ValueError("Test error"), {"component": "test"})
        log_error(logger, ValueError("Test error"))
