"""Test suite for the PHP Parameter Generator.

Test Structure:
- config/: Tests for configuration management
- domain/: Tests for descriptor models, type classification, value and
  declaration generation, and descriptor construction from reflection
- application/: Tests for parameter list orchestration
- infrastructure/: Tests for JSON input and logging setup

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run command line tests only
"""

__version__ = "0.1.0"
