"""
SAL Journey Test Suite

Test Structure:
    tests/
    ├── conftest.py          # Shared fixtures (sample export, stores, mocks)
    └── unit/                # Unit tests (isolated, no external dependencies)

Running Tests:
    # Run all tests
    pytest backend/tests/ -v

    # Run with coverage
    pytest backend/tests/ --cov=journey --cov-report=html
"""
