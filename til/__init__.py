"""Core (UI-agnostic) Today I Learned logic.

This package contains:
- the category registry and fact record shape
- URL validation and submission-form state transitions
- the remote data accessor (PostgREST table -> Fact records)
- filtering and summary payloads (JSON-serializable)
"""
