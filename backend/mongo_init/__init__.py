"""
myapp MongoDB initializer.

Provisions the application user, the users collection and the sample
records on a freshly started MongoDB instance.
"""

__version__ = "0.1.0"
