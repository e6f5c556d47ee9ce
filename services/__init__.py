"""
Service layer for Cognito Identity Provider requests.

This module separates request construction and dispatch from the SigV4
signing and HTTP transport collaborators.
"""
