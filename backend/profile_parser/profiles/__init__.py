"""
LinkedIn profile export parsing: token stream in, structured profile out.
"""
from profile_parser.profiles.parser import ProfileParser

__all__ = ["ProfileParser"]
