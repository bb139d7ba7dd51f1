"""
Command-line interface for apprunner-cli.
"""
