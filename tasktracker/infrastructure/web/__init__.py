"""
Web layer: routers and middleware.
"""
