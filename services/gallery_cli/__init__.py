"""
Gallery CLI - command-line front end for the image bucket

Commands:
1. upload: store one image and print its public URL
2. list: show the first page of objects
3. delete: remove selected objects
"""

from services.gallery_cli.main import app

__all__ = ["app"]
