"""
LinkedIn profile PDF parser
"""
__version__ = "1.0.0"
