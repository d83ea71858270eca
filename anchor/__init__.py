"""File toolkit: show contents, compute hashes and format JSON, XML, YAML and Markdown files."""

__version__ = "0.1.0"