"""API version 8 wire models."""

from .main_response_model8 import MainResponseModel8
from .version import Version

__all__ = ["MainResponseModel8", "Version"]
