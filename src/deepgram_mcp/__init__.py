"""Deepgram MCP: a stdio JSON-RPC server exposing Deepgram text-to-speech as a tool."""

from __future__ import annotations

__version__ = "0.1.0"
