"""
Shared Config Module
====================

Settings shipped with keeplist.

Structure:
- settings/defaults.yaml: system defaults, overridden by user.yaml and
  project.yaml in the project's ``settings`` directory and then by env vars
"""
