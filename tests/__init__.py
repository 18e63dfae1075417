"""Tests for the arithmetic table trace rows."""
