"""
CRM test suites package.

Importable so that IDE navigation, pytest and CI jobs resolve
`crm_testsuites.ui_testing.framework` the same way.
"""
