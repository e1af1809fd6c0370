"""FastAPI application module for GearRate.

This module contains the FastAPI application factory, the route handlers for
catalog mutations and queries, and the structured request logging used by
the service.
"""
