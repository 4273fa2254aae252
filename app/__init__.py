"""
Cinema API Application Package.

This package contains the REST API, the service layer with the catalogue
rules, MongoDB data access, and shared utilities.
"""

__version__ = "1.0.0"
