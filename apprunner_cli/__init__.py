"""
apprunner-cli - Command-line client for AWS App Runner services.

This package lists, describes and deletes App Runner services in the
currently configured AWS region, and reports which regions App Runner
supports.
"""

__version__ = "0.1.0"
__author__ = "apprunner-cli contributors"
