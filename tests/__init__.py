"""Test suite for the users REST API."""
