"""
VipClinic API

A small FastAPI service for registering doctors into a PostgreSQL-backed
clinic directory, with health reporting for the database connection.
"""

__version__ = "1.0.0"
