"""
Products API package
"""
