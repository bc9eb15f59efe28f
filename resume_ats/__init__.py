"""
Resume structuring and ATS compatibility auditing.

Turns an uploaded resume (PDF, DOCX or plain text) into normalized,
section-tagged data and scores it against a fixed ATS rubric.
"""

from resume_ats.utils.constants import APP_NAME as __app_name__
from resume_ats.utils.constants import VERSION as __version__

__all__ = ["__app_name__", "__version__"]
