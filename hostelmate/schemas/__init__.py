"""
Request and response schemas (snake_case in Python, camelCase on the wire).
"""
