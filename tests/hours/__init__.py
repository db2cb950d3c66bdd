"""Tests for the planetary hour calculator."""
