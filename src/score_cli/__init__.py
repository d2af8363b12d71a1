"""
CLI (Command Line Interface) for plaintext scoring.

This is a thin wrapper around the scoring engine. All business logic lives
in the scoring package.
"""
