"""
docqa — retrieval-augmented question answering over a single document.

``docqa ingest`` splits a text file on blank lines, embeds every paragraph
and upserts it into a vector-store index; ``docqa ask`` embeds a question,
pulls the five nearest paragraphs and has a chat model answer from them.
"""

__version__ = "0.1.0"
