"""
numwords — spell numbers as words in several languages.

Architecture: Normalize → Group → Render chunks → Compose scales → Format
Philosophy:  One engine, many rule sets. Languages are data, not branches.
"""

__version__ = "1.0.0"
