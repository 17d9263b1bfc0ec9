"""
Test suites package.

Kept importable so the unit tests can share `testsuites.unit.fake_dom` and
the UI tests can import their page objects.
"""
