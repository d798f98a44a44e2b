"""
Business services. Each operation takes the caller as a ``Principal``
and raises application exceptions on failure.
"""
