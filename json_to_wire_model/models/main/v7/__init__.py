"""API version 7 wire models."""

from .main_response_model7 import MainResponseModel7

__all__ = ["MainResponseModel7"]
