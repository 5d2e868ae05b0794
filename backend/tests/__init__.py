"""Test suite for the SERP collector."""
