"""
Configuration management for objaide.

Loads library settings from environment variables (.env files supported).
"""
