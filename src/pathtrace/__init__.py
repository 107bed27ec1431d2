"""
pathtrace: an offline Monte-Carlo path tracer.
"""
__version__ = "0.1.0"
