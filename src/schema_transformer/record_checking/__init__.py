"""Record checking exports."""

from .record_checker import RecordCheckError, check_record, load_record
from .record_models import RecordViolation

__all__ = ["RecordCheckError", "RecordViolation", "check_record", "load_record"]
