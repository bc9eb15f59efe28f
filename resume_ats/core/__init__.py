"""
Core business logic modules for resume_ats.

Submodules:
- ats: ATS compatibility audit rules and scanner
"""
