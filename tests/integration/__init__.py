"""Integration tests for the sendgridman CLI.

This package contains integration tests that run the export command end
to end with the SendGrid API stubbed.

Test Structure:
- test_export_cli.py: export scenarios, option validation and exit codes
"""
