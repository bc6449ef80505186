"""
Database tables and sessions
"""
