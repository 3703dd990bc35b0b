"""
Test suite for the VipClinic API.

Contains unit and integration tests for doctor registration and health reporting.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
