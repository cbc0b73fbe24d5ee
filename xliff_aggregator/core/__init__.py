"""
Core models, resource containers and configuration.
"""
