"""
Application Layer for the training analytics engine.

This package contains:
- ports/: Abstract repository interfaces (what the analytics need)
- exceptions: Errors shared by the application and infrastructure layers
"""
