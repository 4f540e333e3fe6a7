"""
HobbyHub application package: account sessions and nearby search.
"""
