"""Tests for the essential dignity evaluator."""
