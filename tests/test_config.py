"""Tests for configuration module"""
import os
from pathlib import Path
from unittest.mock import patch
import pytest
from pydantic import ValidationError

from config import Config


class TestConfig:
    """Test configuration validation and parsing"""
    
    def test_default_config(self):
        """Test default configuration values"""
        config = Config()
        
        assert config.encoding == "utf-8"
        assert config.strict is True
        assert config.input_file is None
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.environment == "production"
        assert config.service_name == "statsd-line-parser"
    
    def test_environment_override(self):
        """Test configuration override from environment variables"""
        env_vars = {
            "STATSD_ENCODING": "latin-1",
            "STATSD_STRICT": "false",
            "STATSD_INPUT_FILE": "/tmp/metrics.txt",
            "STATSD_LOG_LEVEL": "debug",
            "STATSD_ENVIRONMENT": "development",
        }
        
        with patch.dict(os.environ, env_vars):
            config = Config()
            
            assert config.encoding == "iso8859-1"
            assert config.strict is False
            assert config.input_file == Path("/tmp/metrics.txt")
            assert config.log_level == "DEBUG"
            assert config.environment == "development"
    
    @pytest.mark.parametrize("encoding", ["no-such-codec", "rot13", "base64", "hex"])
    def test_validation_encoding(self, encoding):
        """Test unknown encodings and binary transforms are refused"""
        with patch.dict(os.environ, {"STATSD_ENCODING": encoding}):
            with pytest.raises(ValidationError):
                Config()
    
    def test_wide_encoding_accepted(self):
        """Test multi-byte newline encodings are valid"""
        with patch.dict(os.environ, {"STATSD_ENCODING": "UTF-16"}):
            assert Config().encoding == "utf-16"
    
    def test_validation_log_level(self):
        """Test log level must be a known level"""
        with patch.dict(os.environ, {"STATSD_LOG_LEVEL": "verbose"}):
            with pytest.raises(ValidationError):
                Config()
    
    def test_validation_environment(self):
        """Test environment must be production or development"""
        with patch.dict(os.environ, {"STATSD_ENVIRONMENT": "staging"}):
            with pytest.raises(ValidationError):
                Config()
    
    def test_directory_creation(self, tmp_path):
        """Test that parent directories are created for the log file"""
        log_file = tmp_path / "subdir" / "parser.log"
        
        with patch.dict(os.environ, {"STATSD_LOG_FILE": str(log_file)}):
            config = Config()
            
            assert config.log_file == log_file
            assert log_file.parent.exists()
    
    def test_get_service_attributes(self):
        """Test service attributes"""
        attrs = Config().get_service_attributes()
        
        assert attrs == {
            "service.name": "statsd-line-parser",
            "service.version": "0.1.0",
        }
