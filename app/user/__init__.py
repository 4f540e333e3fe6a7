"""
User System

Account storage, hobby lookup, profile and location operations.
"""
