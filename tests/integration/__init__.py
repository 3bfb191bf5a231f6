# tests/integration/__init__.py
"""
Integration tests for the HVAC mock-data generator.

These tests run real climate exports through the reader, the generator
and the JSON sink together, and drive the command line tool end to end.
"""
