"""Test suite for accelconv.

Test Structure:
- unit/: Unit tests for individual components
  - curves/: Models, transfer functions, registry, sampling, optimizer, generator
  - parsers/: Lookup table text format
  - formats/: Export encodings
  - config/: Config loading and the editor field set
  - utils/: Logging and math helpers
  - cli/: Command-line entry point
- conftest.py: Shared fixtures and test configuration
"""
