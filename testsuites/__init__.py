"""
Test suites package.

`testsuites` stays importable so that:
  - step definitions load as pytest plugins (`testsuites.ui_testing.step_defs.*`)
  - page objects are shared between step modules and unit tests
  - `run_tests.py` can point pytest at each suite
"""
