"""Typed async client for the Dribbble v1 REST API."""

__version__ = "0.1.0"
