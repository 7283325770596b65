"""
autofolders - keep a journal vault organized into year/month folders.

Watches a vault for new date-named notes and files them under
``base/year/month``, and sweeps the flat base folder once at startup.
"""

__version__ = "0.3.0"
