"""
Shared Layer - Cross-Cutting Concerns
Configuration, errors, persistence plumbing, observability and HTTP middleware
"""
