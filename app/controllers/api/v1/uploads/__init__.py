"""
Upload Controllers.
"""

from .upload import upload_file

__all__ = ['upload_file']
