"""
Fantasy football playoff odds service.
"""
