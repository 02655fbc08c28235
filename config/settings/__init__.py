"""Settings package for the TMB service.

`base.py` contains configuration shared by every environment; `dev.py`,
`prod.py` and `test.py` extend it with environment specific overrides.
"""
