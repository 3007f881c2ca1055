"""
Schema exports for the application.
"""

# Base schemas
from .base import BaseSchema, Money, UtcDatetime, SuccessResponse
