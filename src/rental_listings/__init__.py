"""UK rental listings demo: query service, SEO helpers and web site."""

__version__ = "0.1.0"
