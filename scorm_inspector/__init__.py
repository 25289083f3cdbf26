"""Inspect SCORM zip packages: contents, manifest fields and HTML launch files."""
