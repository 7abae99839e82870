"""
Tests for configuration validation utilities.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import patch, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tracklink.core.validation import check_dependencies, validate_configuration, validate_and_raise
from tracklink.core.exceptions import ConfigurationError


class TestCheckDependencies:
    """Tests for check_dependencies function."""
    
    @patch('importlib.import_module')
    def test_check_dependencies_all_installed(self, mock_import):
        """Test check_dependencies when all dependencies are installed."""
        mock_import.return_value = MagicMock()
        
        all_installed, missing = check_dependencies()
        
        assert all_installed is True
        assert missing == []
    
    @patch('importlib.import_module')
    def test_check_dependencies_missing_module(self, mock_import):
        """Test check_dependencies when a module is missing."""
        def side_effect(module_name):
            if module_name == "rapidfuzz":
                raise ImportError("No module named 'rapidfuzz'")
            return MagicMock()
        
        mock_import.side_effect = side_effect
        all_installed, missing = check_dependencies()
        
        assert all_installed is False
        assert missing == ["rapidfuzz"]


class TestValidateConfiguration:
    """Tests for validate_configuration and validate_and_raise."""
    
    def test_default_configuration_is_valid(self):
        """Test that the shipped configuration validates."""
        is_valid, errors = validate_configuration()
        assert is_valid, errors
    
    def test_invalid_page_size(self):
        """Test that a zero page size is rejected."""
        with patch.dict('tracklink.core.validation.SUGGESTION_CONFIG', {"RELEASE_GROUP_PAGE_SIZE": 0}):
            is_valid, errors = validate_configuration()
        
        assert not is_valid
        assert any("RELEASE_GROUP_PAGE_SIZE" in error for error in errors)
    
    def test_invalid_retry_attempts(self):
        """Test that a zero retry cap is rejected."""
        with patch.dict('tracklink.core.validation.SUGGESTION_CONFIG', {"MAX_RETRY_ATTEMPTS": 0}):
            is_valid, errors = validate_configuration()
        
        assert not is_valid
        assert any("MAX_RETRY_ATTEMPTS" in error for error in errors)
    
    def test_validate_and_raise(self):
        """Test that invalid configuration raises ConfigurationError."""
        with patch.dict('tracklink.core.validation.SUGGESTION_CONFIG', {"NAME_SIMILARITY_THRESHOLD": 2}):
            with pytest.raises(ConfigurationError) as exc_info:
                validate_and_raise()
        
        assert "NAME_SIMILARITY_THRESHOLD" in str(exc_info.value)
