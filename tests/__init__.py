"""Tests for b64codec."""
