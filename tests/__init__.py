"""Test suite for secretguard.

- unit/: Unit tests with mocked collaborators (moto for AWS APIs)
- integration-marked tests run real janitor threads with short intervals
"""
