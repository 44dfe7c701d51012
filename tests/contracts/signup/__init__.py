# Signup Service Contracts

"""
Signup Service Contract Module

This module contains:
- data_contract.py: models re-exported for tests, document builders, test data factory
"""
