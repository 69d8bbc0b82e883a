"""Search-engine-optimization helpers: metadata, structured data, sitemap."""
