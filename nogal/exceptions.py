#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
NoGAL - Exception Classes

All project-specific errors live here so the CLI, the engine and the
tests agree on a single taxonomy.
"""

from datetime import datetime
from typing import Dict, Any, Optional


class NoGalError(Exception):
    """Base class for all project-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code or "ERROR"
        self.details = details or {}
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Converts the exception to a dictionary for structured logging."""
        return {
            'error_code': self.error_code,
            'message': str(self),
            'details': self.details,
            'timestamp': self.timestamp.isoformat()
        }


# =====================================================================================================
# Configuration-related errors
# =====================================================================================================

class ConfigurationError(NoGalError):
    """Base class for configuration errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        config_details = details or {}
        if file_path:
            config_details['file_path'] = str(file_path)
        super().__init__(message, error_code or "CONFIG_ERROR", config_details)


class ValidationError(ConfigurationError):
    """Raised when a user configuration file fails validation."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 field_name: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        validation_details = details or {}
        if field_name:
            validation_details['field_name'] = field_name
        super().__init__(message, "VALIDATION_ERROR", file_path, validation_details)


class CategoryFileNotFoundError(ConfigurationError):
    """Raised when the category database (catver.ini) is not at the expected path."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CATEGORY_FILE_NOT_FOUND", file_path, details)


class CategoryFileUnreadableError(ConfigurationError):
    """Raised when the category database exists but cannot be read or decoded."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CATEGORY_FILE_UNREADABLE", file_path, details)


# =====================================================================================================
# Run validation errors
# =====================================================================================================

class DirectoryNotFoundError(NoGalError):
    """Raised when the ROM directory does not exist."""

    def __init__(self, message: str, directory: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        dir_details = details or {}
        if directory:
            dir_details['directory'] = str(directory)
        super().__init__(message, "DIRECTORY_NOT_FOUND", dir_details)


class BackupDirectoryError(NoGalError):
    """Raised when the backup directory cannot be created."""

    def __init__(self, message: str, directory: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        dir_details = details or {}
        if directory:
            dir_details['directory'] = str(directory)
        super().__init__(message, "BACKUP_DIR_CREATE_FAILED", dir_details)


# =====================================================================================================
# File action errors
# =====================================================================================================

class FileOperationError(NoGalError):
    """Raised when deleting or moving a single ROM or video fails."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 operation: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        file_details = details or {}
        if file_path:
            file_details['file_path'] = str(file_path)
        if operation:
            file_details['operation'] = operation
        super().__init__(message, "FILE_OP_ERROR", file_details)
