"""Client library for the College RAG platform."""
