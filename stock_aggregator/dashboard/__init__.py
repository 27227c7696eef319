"""
Dashboard backend: JSON API consumed by the browser front end.
"""
