"""
PlayerHub Profile Completion - Test Suite
==========================================

Test Categories:
- Field presence rules: test_fields.py
- Category table validation: test_categories.py
- Scoring and aggregation: test_completeness.py
- HTTP endpoints: test_api.py

Usage:
  python -m pytest tests/
"""
