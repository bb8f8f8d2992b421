"""doc_scout.parser: HTML parsing, metadata extraction and sitemap reading."""
