"""
Mail Categorizer - categorization and reply-suggestion core for the email
inbox dashboard.

Classifies an inbound email into one of a fixed set of categories and drafts
reply suggestions using one of several interchangeable AI providers, with a
deterministic keyword classifier as the always-available fallback.

Architecture: FastAPI surface + httpx provider dispatch + lenient response parsing
"""

__version__ = "0.1.0"
