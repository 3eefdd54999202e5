"""
Provably fair dice game: every random decision of the computer is committed with HMAC-SHA256 before the human answers.
"""

__version__ = "0.1.0"
