"""HTTP API layer for llm-chorus.

This module provides the FastAPI integration:

    from llm_chorus.http.api import create_app
"""
