"""Test-suite for the nujum package."""
