"""calvin Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - dateparse/: Date expression resolver and result models
  - test_config_models.py: ~/.calvin configuration loading
  - test_cli.py: `calvin` entry point

Running tests:
    # All tests
    uv run pytest

    # Specific module
    uv run pytest tests/unit/dateparse/

    # With coverage
    uv run pytest --cov=calvin --cov-report=term-missing
"""
