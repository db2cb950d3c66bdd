"""Tests for the static reference tables."""
